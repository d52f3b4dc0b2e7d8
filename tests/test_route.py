"""Tests for pathrouter.routing.route — TemplateSegment, CompiledTemplate, CompiledRoute, RouteMatch."""

import re

import pytest

from pathrouter.routing.route import CompiledRoute, CompiledTemplate, RouteMatch, TemplateSegment


def _template(source: str = "/users/{id}") -> CompiledTemplate:
    return CompiledTemplate(
        source=source,
        regex=re.compile(r"/users/([^/]+?)"),
        param_names=("id",),
        group_indexes=(1,),
        prefix="/users/",
    )


class TestTemplateSegment:
    def test_literal_defaults(self) -> None:
        seg = TemplateSegment(value="users")
        assert seg.kind == "literal"
        assert seg.name is None
        assert seg.pattern is None

    def test_param(self) -> None:
        seg = TemplateSegment(value="{id:\\d+}", kind="param", name="id", pattern="\\d+")
        assert seg.name == "id"
        assert seg.pattern == "\\d+"

    def test_frozen(self) -> None:
        seg = TemplateSegment(value="users")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestCompiledTemplate:
    def test_match(self) -> None:
        assert _template().match("/users/42") == {"id": "42"}

    def test_prefix_short_circuits(self) -> None:
        assert _template().match("/posts/42") is None

    def test_no_match(self) -> None:
        assert _template().match("/users/4/2") is None


class TestCompiledRoute:
    def test_properties(self) -> None:
        route = CompiledRoute(template=_template(), destination="handler")
        assert route.source == "/users/{id}"
        assert route.param_names == ("id",)
        assert route.destination == "handler"

    def test_frozen(self) -> None:
        route = CompiledRoute(template=_template(), destination="handler")
        with pytest.raises(AttributeError):
            route.destination = "other"  # type: ignore[misc]


class TestRouteMatch:
    def test_creation(self) -> None:
        match = RouteMatch(destination="handler", parameters={"id": "42"})
        assert match.destination == "handler"
        assert match.parameters == {"id": "42"}

    def test_repr_names_fields(self) -> None:
        match = RouteMatch(destination="handler", parameters={"id": "42"})
        assert "destination='handler'" in repr(match)
        assert "parameters={'id': '42'}" in repr(match)

    def test_frozen(self) -> None:
        match = RouteMatch(destination="handler", parameters={})
        with pytest.raises(AttributeError):
            match.destination = "other"  # type: ignore[misc]
