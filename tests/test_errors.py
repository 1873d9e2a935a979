"""Tests for routetrie.errors — exception hierarchy and error messages."""

import pytest

from routetrie.errors import (
    ConfigurationError,
    DuplicateParamError,
    RouteConflictError,
    RouteTrieError,
)
from routetrie.routing.trie import RouteTrie


class TestHierarchy:
    @pytest.mark.parametrize("cls", [ConfigurationError, RouteConflictError, DuplicateParamError])
    def test_subclasses_route_trie_error(self, cls: type[Exception]) -> None:
        assert issubclass(cls, RouteTrieError)

    def test_base_is_exception(self) -> None:
        assert issubclass(RouteTrieError, Exception)


class TestRouteConflictError:
    def test_attributes_and_message(self) -> None:
        err = RouteConflictError("/foo", "old", "new")
        assert err.path == "/foo"
        assert err.existing == "old"
        assert err.value == "new"
        assert str(err) == "Route '/foo' already has a value: 'old' => 'new'"

    def test_raised_by_trie(self) -> None:
        trie = RouteTrie()
        trie.add("/users/{id}", "a")
        with pytest.raises(RouteConflictError, match=r"'/users/\{id\}'"):
            trie.add("/users/{id}", "b")


class TestDuplicateParamError:
    def test_message(self) -> None:
        err = DuplicateParamError("foo", "/a/b")
        assert "'foo'" in str(err)
        assert "'/a/b'" in str(err)
        assert "cannot duplicate param names" in str(err)

    def test_catchable_as_base(self) -> None:
        trie = RouteTrie()
        trie.add("/{x}/{x}", 1)
        with pytest.raises(RouteTrieError):
            trie.match("/a/b")
