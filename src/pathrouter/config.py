"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

RegexEngine = Literal["re", "re2"]


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    The defaults validate templates at registration and treat literal
    segments as exact text. Override what you need::

        config = RouterConfig(regex_engine="re2")
    """

    # Template compilation
    strict: bool = True  # Reject malformed templates instead of degrading
    escape_literals: bool = True  # "a.b" matches only "a.b", not "axb"

    # Request path normalization
    collapse_slashes: bool = True  # "//user///42" looks up as "/user/42"

    # "re" (stdlib) or "re2" (google-re2, linear-time matching)
    regex_engine: RegexEngine = "re"

    @classmethod
    def compat(cls) -> RouterConfig:
        """Settings that reproduce the permissive legacy router.

        Malformed parameters fall back to a catch-all segment, literal
        segments are spliced into the pattern unescaped, and request paths
        only lose their trailing slash.
        """
        return cls(strict=False, escape_literals=False, collapse_slashes=False)
