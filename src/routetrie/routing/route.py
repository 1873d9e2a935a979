"""PathSegment and RouteMatch frozen dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from routetrie.errors import DuplicateParamError

ParamValue = str | int | float | bool


class SegmentKind(Enum):
    """How a route key takes part in matching."""

    LITERAL = "literal"
    PARAM = "param"
    WILDCARD = "wildcard"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A route key, parsed once when its node is created.

    Literal:   ``users``          (kind=LITERAL)
    Param:     ``{id}``           (kind=PARAM, name="id", param_type="string")
    Typed:     ``{id:number}``    (kind=PARAM, name="id", param_type="number")
    Wildcard:  ``{rest:*}``       (kind=WILDCARD, name="rest", param_type="*")
    """

    raw: str
    kind: SegmentKind = SegmentKind.LITERAL
    name: str | None = None
    param_type: str = "string"

    @property
    def is_param(self) -> bool:
        return self.kind is SegmentKind.PARAM

    @property
    def is_wildcard(self) -> bool:
        return self.kind is SegmentKind.WILDCARD


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful trie match.

    ``route_parts`` holds the route keys that were walked (``{id}``, not
    ``42``). ``params`` must not be mutated once the match is returned.
    """

    path: str
    route_parts: tuple[str, ...] = ()
    value: Any = None
    params: dict[str, ParamValue] = field(default_factory=dict)

    def get(self, name: str, default: ParamValue | None = None) -> ParamValue | None:
        """Return the value captured under *name*, or *default*."""
        return self.params.get(name, default)

    def __contains__(self, name: object) -> bool:
        return name in self.params


def collapse(
    path: str,
    key: str,
    downstream: RouteMatch,
    captured: tuple[str, ParamValue] | None = None,
) -> RouteMatch:
    """Build the match for *path* from a successful match one level down.

    Prepends *key* to the walked route keys, binds *captured* (if any) and
    merges the downstream params after it. Raises ``DuplicateParamError``
    when a name is bound twice.
    """
    params: dict[str, ParamValue] = {}
    if captured is not None:
        name, value = captured
        params[name] = value

    for name, value in downstream.params.items():
        if name in params:
            raise DuplicateParamError(name, path)
        params[name] = value

    return RouteMatch(
        path=path,
        route_parts=(key, *downstream.route_parts),
        value=downstream.value,
        params=params,
    )
