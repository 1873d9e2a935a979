"""Path normalization, route key parsing and parameter conversion.

Route keys like ``{id:number}`` are parsed into ``PathSegment`` values
when they are inserted. Captured segments are converted by declared type
when they are matched.
"""

import math
import re
from collections.abc import Callable
from functools import lru_cache

from routetrie.config import TrieConfig
from routetrie.routing.route import ParamValue, PathSegment, SegmentKind


def _to_number(value: str) -> int | float:
    text = value.strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def _to_boolean(value: str) -> bool:
    return value in ("true", "1")


# Declared type -> converter. Unknown types fall back to the raw string.
CONVERTERS: dict[str, Callable[[str], ParamValue]] = {
    "string": str,
    "number": _to_number,
    "boolean": _to_boolean,
}


def convert_param(value: str, param_type: str | None) -> ParamValue:
    """Convert a captured path segment to its declared type.

    Never raises: ``number`` yields ``nan`` for non-numeric text and
    ``boolean`` is ``True`` only for ``"true"`` and ``"1"``.
    """
    converter = CONVERTERS.get(param_type or "string")
    if converter is None:
        return value
    return converter(value)


def normalize_path(path: str, separator: str = "/") -> str:
    """Strip surrounding whitespace, then leading and trailing separators.

    Examples::

        " /users/42/ " -> "users/42"
        "/"            -> ""
    """
    path = path.strip()
    while path.startswith(separator):
        path = path[len(separator) :]
    while path.endswith(separator):
        path = path[: -len(separator)]
    return path


def split_path(path: str, separator: str = "/") -> tuple[str, str]:
    """Split a normalized path into its first segment and the remainder."""
    head, _, remainder = normalize_path(path, separator).partition(separator)
    return head, remainder


@lru_cache(maxsize=32)
def param_pattern(param_separator: str) -> re.Pattern[str]:
    """Compile the ``{name[<sep>type]}`` key grammar for a separator."""
    sep = re.escape(param_separator)
    return re.compile(rf"^{{(?P<name>[^{sep}}}]+)(?:{sep})?(?P<type>[^}}]*)}}$")


def parse_segment(key: str, config: TrieConfig | None = None) -> PathSegment:
    """Parse a raw route key into a ``PathSegment``.

    Examples::

        "users"        -> PathSegment("users")
        "{id}"         -> PathSegment("{id}", PARAM, "id", "string")
        "{id:number}"  -> PathSegment("{id:number}", PARAM, "id", "number")
        "{rest:*}"     -> PathSegment("{rest:*}", WILDCARD, "rest", "*")

    Brace syntax that does not fit the grammar stays a literal key.
    """
    config = config or TrieConfig()
    found = param_pattern(config.param_separator).match(key)
    if found is None:
        return PathSegment(raw=key)

    name = found.group("name")
    param_type = found.group("type") or "string"
    if param_type == config.wildcard_indicator:
        return PathSegment(raw=key, kind=SegmentKind.WILDCARD, name=name, param_type=param_type)
    return PathSegment(raw=key, kind=SegmentKind.PARAM, name=name, param_type=param_type)
