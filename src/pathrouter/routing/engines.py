"""Regex engine selection for compiled templates.

``re`` is the standard library engine. ``re2`` is google-re2, which
matches in linear time, so a constraint like ``{x:(a+)+b}`` cannot stall
a worker on a hostile path. re2 rejects backreferences and lookaround;
those surface as ``TemplateError`` at registration.
"""

import importlib
import re
from types import ModuleType
from typing import Any, Protocol

from pathrouter.errors import ConfigurationError

ENGINES = ("re", "re2")


class CompiledPattern(Protocol):
    """The slice of a compiled regex the router relies on."""

    @property
    def pattern(self) -> str: ...

    @property
    def groups(self) -> int: ...

    def fullmatch(self, string: str) -> Any: ...


def load_engine(name: str) -> ModuleType:
    """Return the module implementing regex engine *name*.

    Raises ``ConfigurationError`` for an unknown name, or when ``"re2"`` is
    requested without ``google-re2`` installed.
    """
    if name not in ENGINES:
        msg = f"Unknown regex engine {name!r}. Expected one of: {', '.join(ENGINES)}"
        raise ConfigurationError(msg)
    if name == "re":
        return re
    try:
        return importlib.import_module("re2")
    except ModuleNotFoundError as exc:
        msg = "regex_engine='re2' requires google-re2: pip install pathrouter[re2]"
        raise ConfigurationError(msg) from exc


def capture_count(engine: ModuleType, pattern: str) -> int:
    """Number of capturing groups in *pattern*.

    Raises the engine's own error type if *pattern* does not compile.
    """
    return engine.compile(pattern).groups
