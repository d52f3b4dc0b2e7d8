"""Router import resolution — resolves ``"module:attribute"`` strings to routers.

Shared by ``pathrouter routes`` and ``pathrouter match`` to locate a route
table from a user-supplied import string.
"""

import importlib
from typing import Any

from pathrouter.routing.router import PatternPathRouter
from pathrouter.runner import ServiceRunner
from pathrouter.service import iter_endpoints


def _as_router(obj: Any) -> PatternPathRouter[Any] | None:
    if isinstance(obj, ServiceRunner):
        return obj.router
    if isinstance(obj, PatternPathRouter):
        return obj
    if not isinstance(obj, type) and any(True for _ in iter_endpoints(obj)):
        return ServiceRunner().deploy(obj).router
    return None


def resolve_router(import_string: str) -> PatternPathRouter[Any]:
    """Resolve an import string to a populated router.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"runner"``. The attribute may be a
    ``ServiceRunner``, a ``PatternPathRouter``, an object with ``@path``
    endpoints (deployed on a fresh runner), or a factory returning one of
    those.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is none of the accepted kinds.
        TemplateError: If a service's templates do not compile.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "runner"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    router = _as_router(obj)
    if router is None and callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc
        router = _as_router(obj)

    if router is None:
        msg = (
            f"{import_string!r} resolved to {type(obj).__name__}, "
            "not a ServiceRunner, PatternPathRouter, or service"
        )
        raise TypeError(msg)

    return router
