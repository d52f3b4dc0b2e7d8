"""Pattern path router — an ordered route table with list-all matching.

Routes are registered during setup and read concurrently while serving.
Registration is serialized by a lock and republishes the table as a new
tuple, so lookups read one immutable snapshot without locking.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from pathrouter.config import RouterConfig
from pathrouter.errors import ConfigurationError
from pathrouter.routing.engines import load_engine
from pathrouter.routing.route import CompiledRoute, RouteMatch
from pathrouter.routing.template import compile_template

logger = logging.getLogger("pathrouter.routing")

_MULTI_SLASH = re.compile(r"/+")

T = TypeVar("T")


class PatternPathRouter(Generic[T]):
    """Matches request paths against registered templates.

    Every matching route is returned, in registration order. Choosing one
    destination among several is the caller's policy.

    Usage::

        router = PatternPathRouter.create()
        router.add("/users/{id:[0-9]+}", show_user)
        router.add("/users/**", users_fallback)
        for match in router.get_destinations("/users/42"):
            match.destination(**match.parameters)
    """

    __slots__ = ("_frozen", "_lock", "_routes", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        # Fail at construction, not at the first add(), on a bad engine.
        load_engine(self.config.regex_engine)
        self._routes: tuple[CompiledRoute[T], ...] = ()
        self._lock = threading.Lock()
        self._frozen = False

    @classmethod
    def create(cls, config: RouterConfig | None = None) -> PatternPathRouter[T]:
        """Construct an empty router."""
        return cls(config)

    # -- Building --

    def add(self, template: str, destination: T) -> CompiledRoute[T]:
        """Register *template* for *destination*.

        Raises ``TemplateError`` if the template is rejected; the table is
        left untouched in that case.
        """
        compiled = compile_template(template, self.config)
        route = CompiledRoute(template=compiled, destination=destination)
        with self._lock:
            if self._frozen:
                msg = f"Cannot add {template!r}: the router is frozen."
                raise ConfigurationError(msg)
            self._routes = (*self._routes, route)
        logger.debug(
            "Registered route %r -> %s (params: %s)",
            template,
            compiled.regex.pattern,
            ", ".join(compiled.param_names) or "none",
        )
        return route

    def add_all(self, entries: Iterable[tuple[str, T]]) -> tuple[CompiledRoute[T], ...]:
        """Register several routes at once, all or nothing.

        Every template is compiled before any is published, so one bad
        template leaves the table exactly as it was.
        """
        added = tuple(
            CompiledRoute(template=compile_template(template, self.config), destination=dest)
            for template, dest in entries
        )
        with self._lock:
            if self._frozen:
                msg = "Cannot add routes: the router is frozen."
                raise ConfigurationError(msg)
            self._routes = (*self._routes, *added)
        for route in added:
            logger.debug("Registered route %r -> %s", route.source, route.template.regex.pattern)
        return added

    def freeze(self) -> None:
        """End the building phase. Further ``add()`` calls raise."""
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def routes(self) -> tuple[CompiledRoute[T], ...]:
        """All registered routes, in registration order."""
        return self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[CompiledRoute[T]]:
        return iter(self._routes)

    # -- Serving --

    def normalize_path(self, path: str) -> str:
        """Normalize a request path the way lookups see it."""
        if self.config.collapse_slashes:
            path = _MULTI_SLASH.sub("/", path)
        if len(path) > 1 and path.endswith("/"):
            path = path[:-1]
        return path

    def get_destinations(self, path: str) -> list[RouteMatch[T]]:
        """Return every route matching *path*, in registration order.

        An empty list means no route matched; this never raises for an
        unknown path.
        """
        clean = self.normalize_path(path)
        result: list[RouteMatch[T]] = []
        for route in self._routes:
            params = route.template.match(clean)
            if params is not None:
                result.append(RouteMatch(destination=route.destination, parameters=params))
        return result
