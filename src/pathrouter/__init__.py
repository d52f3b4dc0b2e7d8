"""pathrouter — URI path-template routing for microservice dispatch.

Registers path templates with named and constrained parameters, then
returns every template a request path matches, with the values it binds.

Basic usage::

    from pathrouter import PatternPathRouter

    router = PatternPathRouter.create()
    router.add("/users/{id:[0-9]+}", "show-user")
    router.get_destinations("/users/42")
    # [RouteMatch(destination='show-user', parameters={'id': '42'})]

Service dispatch::

    from pathrouter import ServiceRunner, path

    @path("/users")
    class Users:
        @path("/{id}")
        def show(self, id: int): ...

    runner = ServiceRunner().deploy(Users())
    await runner.dispatch("/users/42")
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "CompiledRoute",
    "ConfigurationError",
    "NotFound",
    "PathRouterError",
    "PatternPathRouter",
    "RouteMatch",
    "RouterConfig",
    "ServiceRunner",
    "TemplateError",
    "compile_template",
    "path",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "CompiledRoute": "pathrouter.routing.route",
    "ConfigurationError": "pathrouter.errors",
    "NotFound": "pathrouter.errors",
    "PathRouterError": "pathrouter.errors",
    "PatternPathRouter": "pathrouter.routing.router",
    "RouteMatch": "pathrouter.routing.route",
    "RouterConfig": "pathrouter.config",
    "ServiceRunner": "pathrouter.runner",
    "TemplateError": "pathrouter.errors",
    "compile_template": "pathrouter.routing.template",
    "path": "pathrouter.service",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathrouter`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
