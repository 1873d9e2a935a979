"""routetrie: resolve URL-like paths to registered values with a segment trie.

Exact literal segments win over ``{name}`` / ``{name:type}`` parameters,
which win over ``{name:*}`` wildcards.

Basic usage::

    from routetrie import RouteTrie

    trie = RouteTrie()
    trie.add("/users/{id:number}", "user")

    match = trie.match("/users/42")
    match.value         # "user"
    match.get("id")     # 42
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateParamError",
    "Navigator",
    "PathSegment",
    "RouteConflictError",
    "RouteMatch",
    "RouteTrie",
    "RouteTrieError",
    "RouteTrieNode",
    "SegmentKind",
    "TrieConfig",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "routetrie.errors",
    "DuplicateParamError": "routetrie.errors",
    "Navigator": "routetrie.routing.navigator",
    "PathSegment": "routetrie.routing.route",
    "RouteConflictError": "routetrie.errors",
    "RouteMatch": "routetrie.routing.route",
    "RouteTrie": "routetrie.routing.trie",
    "RouteTrieError": "routetrie.errors",
    "RouteTrieNode": "routetrie.routing.trie",
    "SegmentKind": "routetrie.routing.route",
    "TrieConfig": "routetrie.config",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routetrie`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
