"""TemplateSegment, CompiledTemplate, CompiledRoute and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from pathrouter.routing.engines import CompiledPattern

SegmentKind = Literal["literal", "param", "wildcard"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class TemplateSegment:
    """A parsed segment of a path template.

    Literal:     ``users``           (kind="literal")
    Param:       ``{id}``            (kind="param", name="id")
    Constrained: ``{id:[0-9]+}``     (kind="param", name="id", pattern="[0-9]+")
    Wildcard:    ``**``              (kind="wildcard")
    """

    value: str
    kind: SegmentKind = "literal"
    name: str | None = None
    pattern: str | None = None


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """A path template compiled to a full-match regex.

    ``group_indexes[i]`` is the capturing group holding the value of
    ``param_names[i]``. They differ from ``i + 1`` only when a permissive
    constraint carries capturing groups of its own.
    """

    source: str
    regex: CompiledPattern
    param_names: tuple[str, ...]
    group_indexes: tuple[int, ...]
    # Exact text every matching path starts with ("" when unknown)
    prefix: str = ""

    def match(self, path: str) -> dict[str, str] | None:
        """Match a normalized path; return its parameters or None.

        Duplicate parameter names keep the last occurrence.
        """
        if not path.startswith(self.prefix):
            return None
        try:
            m = self.regex.fullmatch(path)
        except UnicodeEncodeError:
            # re2 matches UTF-8; a lone surrogate cannot be encoded.
            return None
        if m is None:
            return None
        return {
            name: m.group(index)
            for name, index in zip(self.param_names, self.group_indexes, strict=True)
        }


@dataclass(frozen=True, slots=True)
class CompiledRoute(Generic[T]):
    """A registered template paired with its destination.

    Created by ``PatternPathRouter.add()``; lives as long as the router.
    """

    template: CompiledTemplate
    destination: T

    @property
    def source(self) -> str:
        return self.template.source

    @property
    def param_names(self) -> tuple[str, ...]:
        return self.template.param_names


@dataclass(frozen=True, slots=True)
class RouteMatch(Generic[T]):
    """One destination matched by a request path, with its parameters."""

    destination: T
    parameters: dict[str, str]
