"""Route trie with three-tier path matching.

Paths are registered into a tree keyed by raw path segments and resolved
one segment at a time. At every node the exact literal child is tried
first, then parametric children, then wildcard children::

    trie = RouteTrie()
    trie.add("/users/me", "profile")
    trie.add("/users/{id:number}", "user")
    trie.add("/files/{path:*}", "file")

    trie.match("/users/42").params       # {"id": 42}
    trie.match("/files/a/b.txt").params  # {"path": "a/b.txt"}
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import replace
from typing import Any, TypeAlias

from routetrie.config import TrieConfig
from routetrie.errors import RouteConflictError
from routetrie.routing.params import convert_param, parse_segment, split_path
from routetrie.routing.route import PathSegment, RouteMatch, collapse

logger = logging.getLogger("routetrie")

RouteCallback: TypeAlias = Callable[[str, Any], None]


class RouteTrieNode:
    """One segment boundary in the trie.

    The root node has no segment. Every other node keeps the
    ``PathSegment`` parsed from the key it is stored under.
    """

    __slots__ = ("children", "config", "has_value", "segment", "value")

    def __init__(self, config: TrieConfig | None = None, segment: PathSegment | None = None) -> None:
        self.config = config or TrieConfig()
        self.segment = segment
        # Raw key -> child, insertion ordered
        self.children: dict[str, RouteTrieNode] = {}
        self.value: Any = None
        self.has_value = False

    def add(self, path: str, value: Any, *, overwrite: bool = False, route: str | None = None) -> None:
        """Store *value* at *path* below this node.

        Raises ``RouteConflictError`` if a value is already stored there
        and *overwrite* is false. *route* is the full registered path,
        used in the error message.
        """
        route = path if route is None else route
        head, remainder = split_path(path, self.config.path_separator)

        if not head:
            if self.has_value and not overwrite:
                logger.debug("Route conflict at %r", route)
                raise RouteConflictError(route, self.value, value)
            self.value = value
            self.has_value = True
            return

        child = self.children.get(head)
        if child is None:
            child = RouteTrieNode(self.config, parse_segment(head, self.config))
            self.children[head] = child

        child.add(remainder, value, overwrite=overwrite, route=route)

    def match(self, path: str) -> RouteMatch | None:
        """Resolve *path* below this node, or return ``None``.

        Raises ``DuplicateParamError`` if the resolved route binds the
        same parameter name twice.
        """
        separator = self.config.path_separator
        head, remainder = split_path(path, separator)

        # Nothing left to consume
        if not head:
            if not self.has_value:
                return None
            return RouteMatch(path=path, value=self.value)

        # 1. Exact literal child
        child = self.children.get(head)
        if child is not None:
            found = child.match(remainder)
            if found is not None:
                return collapse(path, head, found)

        # 2. Parametric children, first deeper success wins
        for key, child in self.children.items():
            segment = child.segment
            if segment is None or not segment.is_param:
                continue
            found = child.match(remainder)
            if found is not None:
                captured = (segment.name or "", convert_param(head, segment.param_type))
                return collapse(path, key, found, captured)

        # 3. Wildcard children consume the rest of the path
        for key, child in self.children.items():
            segment = child.segment
            if segment is None or not segment.is_wildcard or not child.has_value:
                continue
            rest = separator.join((head, remainder)) if remainder else head
            terminal = RouteMatch(path=remainder, value=child.value)
            return collapse(path, key, terminal, (segment.name or "", rest))

        return None


class RouteTrie:
    """Route trie facade: registration, matching and change callbacks.

    Usage::

        trie = RouteTrie()
        trie.add_callback(lambda path, value: print("changed", path))
        trie.add("/", "home")
        trie.set("/", "new home")  # overwrite
        match = trie.match("")     # RouteMatch(value="new home", ...)
    """

    __slots__ = ("_callbacks", "config", "root")

    def __init__(
        self,
        config: TrieConfig | None = None,
        *,
        path_separator: str | None = None,
        param_separator: str | None = None,
        wildcard_indicator: str | None = None,
    ) -> None:
        overrides = {
            name: token
            for name, token in (
                ("path_separator", path_separator),
                ("param_separator", param_separator),
                ("wildcard_indicator", wildcard_indicator),
            )
            if token is not None
        }
        config = config or TrieConfig()
        if overrides:
            config = replace(config, **overrides)

        self.config = config
        self.root = RouteTrieNode(config)
        self._callbacks: list[RouteCallback] = []

    @property
    def callbacks(self) -> tuple[RouteCallback, ...]:
        """Registered callbacks, in call order."""
        return tuple(self._callbacks)

    def add(self, path: str, value: Any) -> None:
        """Register *value* at *path*, refusing to replace an existing value."""
        self.root.add(path, value)
        logger.debug("Route added: %r", path)
        self._trigger_callbacks(path, value)

    def set(self, path: str, value: Any) -> None:
        """Register *value* at *path*, replacing any existing value."""
        self.root.add(path, value, overwrite=True)
        logger.debug("Route set: %r", path)
        self._trigger_callbacks(path, value)

    def match(self, path: str) -> RouteMatch | None:
        """Find the value and params for *path*, or ``None`` if nothing matches."""
        return self.root.match(path)

    def add_callback(self, callback: RouteCallback) -> None:
        """Call *callback* with ``(path, value)`` after every add or set."""
        self._callbacks.append(callback)

    def remove_callback(self, callback: RouteCallback) -> None:
        """Remove every registration of *callback*. Unknown callbacks are ignored."""
        self._callbacks = [item for item in self._callbacks if item is not callback]

    def _trigger_callbacks(self, path: str, value: Any) -> None:
        # Snapshot: changes made by a callback apply from the next pass
        for callback in tuple(self._callbacks):
            callback(path, value)

    @property
    def routes(self) -> list[tuple[str, Any]]:
        """Return every registered ``(path, value)`` pair.

        Paths are rebuilt from the stored route keys, depth first in
        insertion order. Useful for introspection and debugging.
        """
        return list(self._collect_routes(self.root, ()))

    def _collect_routes(self, node: RouteTrieNode, keys: tuple[str, ...]) -> Iterator[tuple[str, Any]]:
        separator = self.config.path_separator
        if node.has_value:
            yield separator + separator.join(keys), node.value
        for key, child in node.children.items():
            yield from self._collect_routes(child, (*keys, key))

    def __len__(self) -> int:
        return len(self.routes)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        node: RouteTrieNode | None = self.root
        remainder = path
        while node is not None:
            head, remainder = split_path(remainder, self.config.path_separator)
            if not head:
                return node.has_value
            node = node.children.get(head)
        return False
