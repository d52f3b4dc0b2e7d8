"""pathrouter exception hierarchy.

Shared across the template compiler, the router, and the service runner
so every module raises and catches the same types.
"""

from dataclasses import dataclass


class PathRouterError(Exception):
    """Base for all pathrouter-specific errors."""


class ConfigurationError(PathRouterError):
    """Raised when router or service configuration is invalid.

    Surfaces at registration or deploy time, never while serving.
    """


class TemplateError(ConfigurationError):
    """A path template could not be compiled.

    Carries the offending template so misconfigured endpoints can be
    found from the startup log alone.
    """

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid path template {template!r}: {reason}")


@dataclass(frozen=True, slots=True)
class NotFound(PathRouterError):  # noqa: N818 — conventional name in web frameworks
    """No registered endpoint matched the request path.

    Raised by ``ServiceRunner.dispatch()`` only. The router itself signals
    "no match" with an empty result list.
    """

    path: str

    def __str__(self) -> str:
        return f"No route matches {self.path!r}"
