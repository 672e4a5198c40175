"""``--set SECTION.KEY=VALUE`` overrides layered on top of the loaded Config.

Values are read as JSON where possible, so ``--set typebridge.freeze_registry=false``
yields a boolean and ``--set typebridge.default_ownership=borrowed`` a string.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Types :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed override: section, dotted key path below it, and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    @property
    def path(self) -> tuple[str, ...]:
        return (self.section, *self.key_path)


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as JSON; anything that is not JSON stays a string.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("owned")
        (True, 42, 'owned')
        >>> coerce_value("")
        ''
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except ValueError:  # orjson.JSONDecodeError is a ValueError
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``; the value may itself contain ``=``.

    Raises:
        ValueError: No ``=``, no dot in the path, or an empty component.

    Examples:
        >>> parse_override("typebridge.default_ownership=borrowed")
        ConfigOverride(section='typebridge', key_path=('default_ownership',), value='borrowed')
        >>> parse_override("typebridge.freeze_registry=false").value
        False
        >>> parse_override("no_equals_sign")
        Traceback (most recent call last):
        ...
        ValueError: Invalid override 'no_equals_sign': must contain '='
    """
    dotted, equals, value = raw.partition("=")
    if not equals:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, keys = dotted.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(keys.split("."))
    if "" in key_path:
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section, key_path, coerce_value(value))


def _as_tree(overrides: Iterable[ConfigOverride]) -> dict[str, object]:
    """Fold overrides into one nested mapping; later overrides win."""
    tree: dict[str, object] = {}
    for override in overrides:
        *parents, leaf = override.path
        node = tree
        for key in parents:
            child = node.setdefault(key, {})
            if not isinstance(child, dict):
                raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
            node = cast("dict[str, object]", child)
        node[leaf] = override.value
    return tree


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with the parsed overrides deep-merged on top.

    The input Config is left untouched; with no overrides it is returned
    as is.

    Raises:
        ValueError: An override string is malformed.

    Example:
        >>> cfg = Config({"typebridge": {"freeze_registry": True}}, {})
        >>> apply_overrides(cfg, ("typebridge.freeze_registry=false",))["typebridge"]["freeze_registry"]
        False
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    return config.with_overrides(_as_tree(parse_override(raw) for raw in raw_overrides))


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
