"""Endpoint annotation and discovery.

A service is any object whose class and methods carry ``@path``::

    @path("/users")
    class UserService:
        @path("/{id:[0-9]+}")
        def show(self, id: int) -> dict: ...

        @path("/")
        def index(self) -> list: ...

``iter_endpoints(UserService())`` yields ``/users/{id:[0-9]+}`` and
``/users/`` bound to the instance's methods, in definition order. A plain
function decorated with ``@path`` is a service with a single endpoint.
"""

import inspect
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

PATH_ATTR = "__pathrouter_path__"

F = TypeVar("F")


def path(template: str) -> Callable[[F], F]:
    """Mark a service class (base path) or a method (endpoint path)."""

    def decorator(obj: F) -> F:
        setattr(obj, PATH_ATTR, template)
        return obj

    return decorator


def join_paths(*parts: str) -> str:
    """Join template parts with single slashes, always rooted at ``/``."""
    joined = "/".join(p.strip("/") for p in parts if p.strip("/"))
    return "/" + joined


@dataclass(frozen=True, slots=True)
class Endpoint:
    """A deployable endpoint: the full template and the callable behind it."""

    template: str
    handler: Callable[..., Any]

    @property
    def name(self) -> str:
        return getattr(self.handler, "__qualname__", repr(self.handler))


def iter_endpoints(service: Any) -> Iterator[Endpoint]:
    """Yield the annotated endpoints of *service* in definition order."""
    if inspect.isfunction(service) or inspect.ismethod(service):
        template = getattr(service, PATH_ATTR, None)
        if template is not None:
            yield Endpoint(join_paths(template), service)
        return

    cls = type(service)
    base = getattr(cls, PATH_ATTR, "")

    # Base classes first; an override keeps its base's position.
    members: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        members.update(vars(klass))

    for name, member in members.items():
        if isinstance(member, type):
            continue
        template = getattr(member, PATH_ATTR, None)
        if template is None:
            # staticmethod/classmethod wrapping an annotated function
            template = getattr(getattr(member, "__func__", None), PATH_ATTR, None)
        if template is None:
            continue
        yield Endpoint(join_paths(base, template), getattr(service, name))
