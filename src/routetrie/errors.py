"""routetrie exception hierarchy.

Shared by the trie, its nodes and the navigator so every module raises
and catches the same types.
"""

from typing import Any


class RouteTrieError(Exception):
    """Base for all routetrie-specific errors."""


class ConfigurationError(RouteTrieError):
    """Raised when a ``TrieConfig`` is invalid."""


class RouteConflictError(RouteTrieError):
    """A value is already registered at this path.

    Raised by ``RouteTrie.add``. Use ``RouteTrie.set`` to overwrite.
    """

    def __init__(self, path: str, existing: Any, value: Any) -> None:
        self.path = path
        self.existing = existing
        self.value = value
        super().__init__(f"Route {path!r} already has a value: {existing!r} => {value!r}")


class DuplicateParamError(RouteTrieError):
    """Two captures along one matched path share a parameter name."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(
            f"{name!r} param already exists in the route matched by {path!r}, "
            "cannot duplicate param names in a route path"
        )
