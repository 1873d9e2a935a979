"""Trie configuration.

TrieConfig is a frozen dataclass, immutable after creation and validated
on construction.
"""

from dataclasses import dataclass

from routetrie.errors import ConfigurationError

# Characters reserved by the parameter key grammar.
_RESERVED = frozenset("{}")


@dataclass(frozen=True, slots=True)
class TrieConfig:
    """Tokens used to split paths and parse route keys.

    Override what you need::

        config = TrieConfig(path_separator=".", param_separator="|")
    """

    path_separator: str = "/"
    param_separator: str = ":"
    wildcard_indicator: str = "*"

    def __post_init__(self) -> None:
        tokens = {
            "path_separator": self.path_separator,
            "param_separator": self.param_separator,
            "wildcard_indicator": self.wildcard_indicator,
        }
        for field_name, token in tokens.items():
            if not isinstance(token, str) or not token:
                msg = f"{field_name} must be a non-empty string, got {token!r}"
                raise ConfigurationError(msg)

        if len(set(tokens.values())) != len(tokens):
            msg = (
                "path_separator, param_separator and wildcard_indicator must differ, "
                f"got {self.path_separator!r}, {self.param_separator!r}, "
                f"{self.wildcard_indicator!r}"
            )
            raise ConfigurationError(msg)

        for field_name in ("path_separator", "param_separator"):
            if _RESERVED & set(tokens[field_name]):
                msg = f"{field_name} cannot contain '{{' or '}}', got {tokens[field_name]!r}"
                raise ConfigurationError(msg)
