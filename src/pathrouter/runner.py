"""Service runner — deploys annotated services and dispatches request paths.

Each runner owns its own router; there is no process-wide routing state.
Deploy everything during startup, then call ``dispatch()`` per request::

    runner = ServiceRunner().deploy(UserService(), HealthService())
    result = await runner.dispatch("/users/42")
"""

from __future__ import annotations

import inspect
import logging
import typing
from typing import Any

from pathrouter._internal.invoke import invoke
from pathrouter.config import RouterConfig
from pathrouter.errors import ConfigurationError, NotFound
from pathrouter.routing.params import argument_name, convert_param
from pathrouter.routing.route import RouteMatch
from pathrouter.routing.router import PatternPathRouter
from pathrouter.service import Endpoint, iter_endpoints

logger = logging.getLogger("pathrouter.runner")


def bind_arguments(handler: Any, parameters: dict[str, str]) -> dict[str, Any]:
    """Build keyword arguments for *handler* from extracted path parameters.

    Values are converted to the handler's ``int``/``float`` annotations.
    Parameters the handler does not accept are dropped unless it takes
    ``**kwargs``. Raises ``ValueError`` when a conversion fails.
    """
    sig = inspect.signature(handler)
    try:
        hints = typing.get_type_hints(handler)
    except (NameError, TypeError):
        hints = {}

    accepts_any = any(p.kind is inspect.Parameter.VAR_KEYWORD for p in sig.parameters.values())
    kwargs: dict[str, Any] = {}
    for name, value in parameters.items():
        arg = argument_name(name)
        param = sig.parameters.get(arg)
        if param is None:
            if accepts_any:
                kwargs[arg] = value
            continue
        kwargs[arg] = convert_param(value, hints.get(arg, param.annotation))
    return kwargs


class ServiceRunner:
    """Owns a router of endpoints and dispatches paths to them.

    The router returns every matching endpoint; the runner calls the first
    one, in deploy order, whose arguments convert cleanly.
    """

    __slots__ = ("_router", "_services")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._router: PatternPathRouter[Endpoint] = PatternPathRouter.create(config)
        self._services: list[Any] = []

    @property
    def router(self) -> PatternPathRouter[Endpoint]:
        return self._router

    @property
    def services(self) -> tuple[Any, ...]:
        return tuple(self._services)

    def deploy(self, *services: Any) -> ServiceRunner:
        """Register every ``@path`` endpoint of each service.

        A service whose templates do not compile is not registered at all.
        Raises ``ConfigurationError`` for an object without endpoints.
        """
        for service in services:
            endpoints = list(iter_endpoints(service))
            if not endpoints:
                name = getattr(service, "__qualname__", type(service).__qualname__)
                msg = f"{name} has no @path endpoints to deploy."
                raise ConfigurationError(msg)
            self._router.add_all((ep.template, ep) for ep in endpoints)
            self._services.append(service)
            logger.info(
                "Deployed %s (%d endpoint%s)",
                getattr(service, "__qualname__", type(service).__qualname__),
                len(endpoints),
                "" if len(endpoints) == 1 else "s",
            )
        return self

    def get_destinations(self, path: str) -> list[RouteMatch[Endpoint]]:
        return self._router.get_destinations(path)

    async def dispatch(self, path: str) -> Any:
        """Call the endpoint for *path* and return its result.

        Raises ``NotFound`` when no endpoint matches, or when every match
        rejects its arguments (e.g. ``id: int`` given ``"abc"``).
        """
        for match in self._router.get_destinations(path):
            endpoint = match.destination
            try:
                kwargs = bind_arguments(endpoint.handler, match.parameters)
            except ValueError as exc:
                logger.debug("Skipping %s for %r: %s", endpoint.name, path, exc)
                continue
            logger.debug("Dispatching %r to %s", path, endpoint.name)
            return await invoke(endpoint.handler, **kwargs)
        raise NotFound(path)
