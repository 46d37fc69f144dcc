"""Parse ``--set SECTION.KEY=VALUE`` options and merge them into a Config.

The root group applies these to the loaded configuration before any
subcommand reads its ``[generator]`` or ``[fold]`` settings, so
``--set generator.high=6`` changes what ``closurekit generate`` draws.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` option.

    Attributes:
        section: Top-level table, e.g. ``generator``.
        key_path: Keys below the section, outermost first.
        value: Decoded value to assign.
    """

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    The first ``=`` ends the dotted path; the first dot ends the section.
    Values are decoded by :func:`coerce_value`.

    Args:
        raw: Raw option value, e.g. ``generator.low=0``.

    Returns:
        The section, key path and decoded value.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or any path
            component is empty.

    Examples:
        >>> override = parse_override("generator.high=6")
        >>> override.section, override.key_path, override.value
        ('generator', ('high',), 6)

        >>> parse_override("fold.combiner=multiply").value
        'multiply'

        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)

    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path_part.split(".")
    key_parts = tuple(keys)

    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_parts, value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, falling back to the string itself.

    ``orjson`` handles numbers, booleans, ``null``, arrays and objects, so
    ``generator.seed=null`` clears a seed while ``fold.combiner=add`` stays
    a string.

    Args:
        raw: Value text after the first ``=``.

    Returns:
        The decoded JSON value, or ``raw`` when it is not valid JSON.

    Examples:
        >>> coerce_value("3")
        3
        >>> coerce_value("false")
        False
        >>> coerce_value("null")
        >>> coerce_value("[1, 2]")
        [1, 2]
        >>> coerce_value("add")
        'add'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Insert ``override`` into ``target``, creating intermediate tables.

    The finished mapping is handed to ``Config.with_overrides``.

    Args:
        target: Override tables being built, keyed by section.
        override: Parsed override to insert.

    Raises:
        TypeError: If an intermediate key already holds a non-table value.

    Examples:
        >>> tables: dict[str, dict[str, object]] = {}
        >>> _nest_override(tables, ConfigOverride(section="generator", key_path=("low",), value=0))
        >>> tables
        {'generator': {'low': 0}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged in.

    Returns the same instance when ``raw_overrides`` is empty.

    Args:
        config: Loaded layered configuration.
        raw_overrides: ``--set`` strings in command-line order; later
            entries win for the same key.

    Returns:
        A new Config with the overrides merged in.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"generator": {"low": 1, "high": 3}}, {})
        >>> apply_overrides(cfg, ("generator.high=9",))["generator"]["high"]
        9
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
