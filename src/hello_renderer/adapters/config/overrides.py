"""``--set SECTION.KEY=VALUE``: one configuration value changed from the command line.

Root-group overrides are applied before any command reads ``[renderer]``,
so ``--set renderer.message=Hi`` reaches ``hello`` and ``render`` alike.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""What a ``--set`` value decodes to."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``SECTION.KEY[.SUBKEY...]=VALUE`` assignment."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split a raw ``--set`` argument into section, key path and value.

    Everything before the first ``=`` is the dotted path; its first component
    names the section.

    Raises:
        ValueError: If ``=`` or the dot is missing, or a path component is empty.

    Examples:
        >>> override = parse_override("renderer.message=Hi there")
        >>> override.section, override.key_path, override.value
        ('renderer', ('message',), 'Hi there')

        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path, has_value, value = raw.partition("=")
    if not has_value:
        raise ValueError(f"needs a value, as in SECTION.KEY=VALUE: {raw!r}")
    section, has_key, dotted_keys = path.partition(".")
    if not has_key:
        raise ValueError(f"names no key, as in SECTION.KEY=VALUE: {raw!r}")
    if not section:
        raise ValueError(f"empty section name: {raw!r}")
    key_path = tuple(dotted_keys.split("."))
    if "" in key_path:
        raise ValueError(f"empty key in the path: {raw!r}")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, keeping the plain string when that fails.

    Examples:
        >>> coerce_value("42"), coerce_value("true"), coerce_value("null")
        (42, True, None)
        >>> coerce_value("Hello World")
        'Hello World'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _place_override(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Store ``override.value`` in ``tree`` under its section and key path.

    Raises:
        ValueError: If an earlier override already put a value where this one
            needs a table.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _place_override(tree, ConfigOverride("renderer", ("target_id",), "out"))
        >>> tree
        {'renderer': {'target_id': 'out'}}
    """
    table = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for key in parents:
        child = table.setdefault(key, {})
        if not isinstance(child, dict):
            dotted = ".".join((override.section, *override.key_path))
            raise ValueError(f"{key!r} already holds a {type(child).__name__}, so {dotted!r} cannot be set")
        table = cast("dict[str, object]", child)
    table[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge every ``--set`` override into ``config``.

    Returns:
        A new Config, or ``config`` itself when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"renderer": {"message": "Hello World"}}, {})
        >>> apply_overrides(cfg, ("renderer.message=Bonjour",))["renderer"]["message"]
        'Bonjour'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _place_override(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "parse_override",
    "coerce_value",
    "apply_overrides",
]
