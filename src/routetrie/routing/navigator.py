"""Headless navigation state on top of a route trie.

A ``Navigator`` tracks the current path and its match, keeps a history of
visited paths and re-resolves the current path whenever routes are added
or overwritten::

    trie = RouteTrie()
    with Navigator(trie, "/users/7") as nav:
        trie.add("/users/{id:number}", "user page")
        nav.value        # "user page"
        nav.navigate("/about")
        nav.back()       # True, back on "/users/7"
"""

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any, TypeAlias

from routetrie.routing.route import RouteMatch
from routetrie.routing.trie import RouteTrie

logger = logging.getLogger("routetrie")

MatchListener: TypeAlias = Callable[[RouteMatch | None], None]


class Navigator:
    """Current path, current match and history for one ``RouteTrie``."""

    __slots__ = ("_callback", "_closed", "_history", "_listeners", "_match", "_path", "trie")

    def __init__(self, trie: RouteTrie, path: str = "") -> None:
        self.trie = trie
        self._path = path
        self._history: list[str] = []
        self._listeners: list[MatchListener] = []
        self._match: RouteMatch | None = trie.match(path)
        self._closed = False
        # Bound once so removal by identity finds the same object
        self._callback = self._on_route_change
        trie.add_callback(self._callback)

    @property
    def path(self) -> str:
        return self._path

    @property
    def match(self) -> RouteMatch | None:
        return self._match

    @property
    def value(self) -> Any:
        """The matched route value, or ``None`` when nothing matches."""
        if self._match is None:
            return None
        return self._match.value

    @property
    def history(self) -> tuple[str, ...]:
        """Previously visited paths, oldest first."""
        return tuple(self._history)

    def navigate(self, path: str) -> RouteMatch | None:
        """Move to *path*, remembering the current path for ``back()``."""
        self._history.append(self._path)
        self._path = path
        return self.refresh()

    def back(self) -> bool:
        """Return to the previous path. ``False`` if there is none."""
        if not self._history:
            return False
        self._path = self._history.pop()
        self.refresh()
        return True

    def set_route(self, path: str, value: Any) -> None:
        """Register or overwrite a route on the underlying trie."""
        self.trie.set(path, value)

    def refresh(self) -> RouteMatch | None:
        """Re-resolve the current path and notify listeners."""
        self._match = self.trie.match(self._path)
        logger.debug("Route changed: %r -> %r", self._path, self._match.route_parts if self._match else None)
        for listener in tuple(self._listeners):
            listener(self._match)
        return self._match

    def add_listener(self, listener: MatchListener) -> None:
        """Call *listener* with the new match after every re-resolve."""
        self._listeners.append(listener)

    def remove_listener(self, listener: MatchListener) -> None:
        self._listeners = [item for item in self._listeners if item is not listener]

    def close(self) -> None:
        """Stop following route changes on the trie."""
        if self._closed:
            return
        self.trie.remove_callback(self._callback)
        self._closed = True

    def _on_route_change(self, path: str, value: Any) -> None:
        self.refresh()

    def __enter__(self) -> "Navigator":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
