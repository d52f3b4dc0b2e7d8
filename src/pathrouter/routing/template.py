"""Path template compiler.

Turns a template such as ``/users/{id:[0-9]+}/files/**`` into a
full-match regular expression plus the ordered names of its parameters.

Syntax::

    {name}            one or more non-slash characters, non-greedy
    {name:pattern}    constrained to *pattern* (may contain "/" and "{m,n}")
    **                any text, slashes included, non-greedy; not captured
    anything else     literal text

Strict mode rejects malformed templates with ``TemplateError``. Permissive
mode keeps the legacy behaviour: a parameter that cannot be parsed becomes
a catch-all segment named after its raw text, and a warning is logged.
"""

import logging
import re
from types import ModuleType

from pathrouter.config import RouterConfig
from pathrouter.errors import TemplateError
from pathrouter.routing.engines import capture_count, load_engine
from pathrouter.routing.route import CompiledTemplate, TemplateSegment

logger = logging.getLogger("pathrouter.routing")

WILDCARD = "**"
DEFAULT_PARAM_PATTERN = "[^/]+?"
WILDCARD_PATTERN = ".*?"

_MULTI_SLASH = re.compile(r"/+")
_VARIABLE = re.compile(r"(\w[-\w.]*[ ]*)(:(.+))?", re.DOTALL)
_GROUP_NAME = "_pathrouter_p"


def normalize_template(template: str) -> str:
    """Collapse repeated slashes and drop one trailing slash (root excepted)."""
    path = _MULTI_SLASH.sub("/", template)
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path


def split_segments(template: str) -> list[str]:
    """Split on slashes that are not inside ``{...}``.

    Falls back to a plain split when the braces never balance, so an
    unterminated parameter reaches the parser as its own segment.
    """
    segments: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(template):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth = max(depth - 1, 0)
        elif ch == "/" and depth == 0:
            segments.append(template[start:i])
            start = i + 1
    if depth:
        return template.split("/")
    segments.append(template[start:])
    return segments


def _braces_balanced(text: str) -> bool:
    depth = 0
    for ch in text:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def _parse_param(template: str, segment: str, *, strict: bool) -> TemplateSegment:
    inner = segment[1:-1]
    if not strict and len(inner) >= 2 and inner.startswith("{") and inner.endswith("}"):
        # Legacy templates unwrap "{{id}}" to "id".
        inner = inner[1:-1]
    inner = inner.strip()
    if not _braces_balanced(inner):
        if strict:
            raise TemplateError(template, f"unbalanced braces in segment {segment!r}")
        logger.warning("Template %r: unbalanced braces in %r", template, segment)
        return TemplateSegment(value=segment, kind="param", name=inner)

    m = _VARIABLE.fullmatch(inner)
    if m is None:
        if strict:
            if not inner or inner.startswith(":"):
                raise TemplateError(template, "empty parameter name")
            raise TemplateError(template, f"malformed parameter {segment!r}")
        logger.warning(
            "Template %r: malformed parameter %r, matching any segment", template, segment
        )
        return TemplateSegment(value=segment, kind="param", name=inner)

    name = m.group(1).strip()
    pattern = m.group(3).strip() if m.group(3) is not None else None
    if pattern == "":
        pattern = None
    return TemplateSegment(value=segment, kind="param", name=name, pattern=pattern)


def parse_template(template: str, *, strict: bool = True) -> list[TemplateSegment]:
    """Parse a template into segments, after normalization.

    Examples::

        "/users"            -> [literal "", literal "users"]
        "/users/{id}"       -> [..., param id]
        "/users/{id:\\d+}"  -> [..., param id pattern "\\d+"]
        "/files/**"         -> [..., wildcard]
    """
    path = normalize_template(template)
    segments: list[TemplateSegment] = []
    seen: set[str] = set()

    for part in split_segments(path):
        if len(part) >= 2 and part.startswith("{") and part.endswith("}"):
            seg = _parse_param(template, part, strict=strict)
            assert seg.name is not None
            if seg.name in seen:
                if strict:
                    raise TemplateError(template, f"duplicate parameter name {seg.name!r}")
                logger.warning(
                    "Template %r: duplicate parameter %r, last value wins", template, seg.name
                )
            seen.add(seg.name)
            segments.append(seg)
        elif part == WILDCARD:
            segments.append(TemplateSegment(value=part, kind="wildcard"))
        else:
            if strict and ("{" in part or "}" in part):
                raise TemplateError(template, f"unterminated or stray brace in {part!r}")
            segments.append(TemplateSegment(value=part))

    return segments


def _literal_prefix(segments: list[TemplateSegment]) -> str:
    """Exact text every path matching *segments* must start with."""
    leading: list[str] = []
    for seg in segments:
        if seg.kind != "literal":
            return "/".join(leading) + "/" if leading else ""
        leading.append(seg.value)
    return "/".join(leading)


def _count_groups(engine: ModuleType, template: str, pattern: str) -> int:
    try:
        return capture_count(engine, pattern)
    except engine.error as exc:
        raise TemplateError(template, f"invalid constraint {pattern!r}: {exc}") from exc


def compile_template(template: str, config: RouterConfig | None = None) -> CompiledTemplate:
    """Compile *template* into a full-match regex and its parameter names.

    Raises ``TemplateError`` when the template is rejected (strict mode) or
    when the resulting pattern does not compile (any mode).
    """
    config = config or RouterConfig()
    engine = load_engine(config.regex_engine)
    segments = parse_template(template, strict=config.strict)

    pieces: list[str] = []
    # Same pattern with each parameter as a named group, to locate its index.
    named_pieces: list[str] = []
    names: list[str] = []

    for seg in segments:
        if seg.kind == "param":
            assert seg.name is not None
            pattern = seg.pattern if seg.pattern is not None else DEFAULT_PARAM_PATTERN
            if _count_groups(engine, template, pattern) and config.strict:
                msg = (
                    f"constraint {seg.pattern!r} for {seg.name!r} has capturing groups; "
                    "use (?:...) instead"
                )
                raise TemplateError(template, msg)
            pieces.append(f"({pattern})")
            named_pieces.append(f"(?P<{_GROUP_NAME}{len(names)}>{pattern})")
            names.append(seg.name)
        elif seg.kind == "wildcard":
            pieces.append(WILDCARD_PATTERN)
            named_pieces.append(WILDCARD_PATTERN)
        else:
            # Unescaped, the literal is itself a regex fragment.
            literal = re.escape(seg.value) if config.escape_literals else seg.value
            pieces.append(literal)
            named_pieces.append(literal)

    source = "/".join(pieces)
    try:
        regex = engine.compile(source)
        groupindex = engine.compile("/".join(named_pieces)).groupindex
    except engine.error as exc:
        raise TemplateError(template, f"pattern {source!r} does not compile: {exc}") from exc

    prefix = _literal_prefix(segments) if config.escape_literals else ""
    return CompiledTemplate(
        source=template,
        regex=regex,
        param_names=tuple(names),
        group_indexes=tuple(groupindex[f"{_GROUP_NAME}{i}"] for i in range(len(names))),
        prefix=prefix,
    )
