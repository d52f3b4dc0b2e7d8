"""Tests for pathrouter.service — @path annotation and endpoint discovery."""

import pytest

from pathrouter.service import PATH_ATTR, Endpoint, iter_endpoints, join_paths, path


@path("/users")
class UserService:
    @path("/{id}")
    def show(self, id: str) -> str:
        return f"user {id}"

    @path("/")
    def index(self) -> str:
        return "all users"

    def helper(self) -> str:
        return "not an endpoint"


class AdminUserService(UserService):
    @path("/{id}")
    def show(self, id: str) -> str:
        return f"admin {id}"

    @path("/audit")
    def audit(self) -> str:
        return "audit"


class Unrooted:
    @path("ping")
    def ping(self) -> str:
        return "pong"

    @path("/static")
    @staticmethod
    def static() -> str:
        return "static"


class TestPathDecorator:
    def test_sets_attribute(self) -> None:
        @path("/x")
        def handler() -> None: ...

        assert getattr(handler, PATH_ATTR) == "/x"

    def test_returns_same_object(self) -> None:
        def handler() -> None: ...

        assert path("/x")(handler) is handler


class TestJoinPaths:
    @pytest.mark.parametrize(
        ("parts", "expected"),
        [
            (("/users", "/{id}"), "/users/{id}"),
            (("/users/", "{id}"), "/users/{id}"),
            (("/users", "/"), "/users"),
            (("", "ping"), "/ping"),
            (("/",), "/"),
            ((), "/"),
        ],
    )
    def test_join(self, parts: tuple[str, ...], expected: str) -> None:
        assert join_paths(*parts) == expected


class TestIterEndpoints:
    def test_definition_order(self) -> None:
        endpoints = list(iter_endpoints(UserService()))
        assert [e.template for e in endpoints] == ["/users/{id}", "/users"]

    def test_handlers_are_bound(self) -> None:
        service = UserService()
        show, index = iter_endpoints(service)
        assert show.handler("7") == "user 7"
        assert index.handler() == "all users"
        assert show.handler.__self__ is service  # type: ignore[attr-defined]

    def test_unannotated_methods_skipped(self) -> None:
        names = [e.name for e in iter_endpoints(UserService())]
        assert "UserService.helper" not in names

    def test_subclass_inherits_base_path_and_overrides(self) -> None:
        endpoints = list(iter_endpoints(AdminUserService()))
        assert [e.template for e in endpoints] == ["/users/{id}", "/users", "/users/audit"]
        assert endpoints[0].handler("7") == "admin 7"

    def test_class_without_base_path(self) -> None:
        endpoints = list(iter_endpoints(Unrooted()))
        assert [e.template for e in endpoints] == ["/ping", "/static"]
        assert endpoints[1].handler() == "static"

    def test_plain_function(self) -> None:
        @path("/health")
        def health() -> str:
            return "ok"

        [endpoint] = iter_endpoints(health)
        assert endpoint == Endpoint("/health", health)

    def test_object_without_endpoints(self) -> None:
        assert list(iter_endpoints(object())) == []

    def test_unannotated_function(self) -> None:
        def nothing() -> None: ...

        assert list(iter_endpoints(nothing)) == []


class TestEndpoint:
    def test_name_is_qualname(self) -> None:
        [show, _] = iter_endpoints(UserService())
        assert show.name == "UserService.show"
