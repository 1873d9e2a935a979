"""Tests for routetrie.routing.route — PathSegment, RouteMatch and collapse."""

import pytest

from routetrie.errors import DuplicateParamError
from routetrie.routing.route import PathSegment, RouteMatch, SegmentKind, collapse


class TestPathSegment:
    def test_defaults_to_literal(self) -> None:
        segment = PathSegment("users")
        assert segment.kind is SegmentKind.LITERAL
        assert segment.is_param is False
        assert segment.is_wildcard is False

    def test_frozen(self) -> None:
        segment = PathSegment("users")
        with pytest.raises(AttributeError):
            segment.raw = "posts"  # type: ignore[misc]


class TestRouteMatch:
    def test_get(self) -> None:
        match = RouteMatch(path="/u/1", value="user", params={"id": 1})
        assert match.get("id") == 1
        assert match.get("nope") is None
        assert match.get("nope", "fallback") == "fallback"

    def test_contains(self) -> None:
        match = RouteMatch(path="/u/1", params={"id": 1})
        assert "id" in match
        assert "nope" not in match

    def test_frozen(self) -> None:
        match = RouteMatch(path="/")
        with pytest.raises(AttributeError):
            match.value = "other"  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        a = RouteMatch(path="/x", route_parts=("x",), value=1, params={"k": "v"})
        b = RouteMatch(path="/x", route_parts=("x",), value=1, params={"k": "v"})
        assert a == b


class TestCollapse:
    def test_prepends_key_and_adopts_value(self) -> None:
        downstream = RouteMatch(path="b", route_parts=("b",), value="leaf")
        result = collapse("/a/b", "a", downstream)

        assert result == RouteMatch(path="/a/b", route_parts=("a", "b"), value="leaf")

    def test_binds_capture_before_downstream_params(self) -> None:
        downstream = RouteMatch(path="x", route_parts=("{y}",), value=1, params={"y": "x"})
        result = collapse("/v/x", "{x}", downstream, ("x", "v"))

        assert list(result.params) == ["x", "y"]
        assert result.route_parts == ("{x}", "{y}")

    def test_does_not_mutate_downstream(self) -> None:
        downstream = RouteMatch(path="x", value=1, params={"y": "x"})
        collapse("/v/x", "{x}", downstream, ("x", "v"))
        assert downstream.params == {"y": "x"}

    def test_collision_raises(self) -> None:
        downstream = RouteMatch(path="b", value=1, params={"foo": "b"})
        with pytest.raises(DuplicateParamError) as exc_info:
            collapse("/a/b", "{foo}", downstream, ("foo", "a"))

        assert exc_info.value.name == "foo"
        assert exc_info.value.path == "/a/b"
