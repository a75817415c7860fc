"""Parsing for ``-L``/``--logger-level``.

The option takes NAME=LEVEL pairs, repeated or packed into one value with
commas or spaces (the form ``WPUTILS_LOGGER_LEVELS`` uses).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_ITEM_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Split every chunk of *value* on commas and whitespace."""
    if value is None:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _ITEM_SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Turn NAME=LEVEL pairs into a logger-name to level mapping.

    The result starts from `DEFAULT_LIB_LEVELS`; later pairs win.

    Raises:
        click.BadParameter: For a pair without ``=`` or a name, or an unknown
            level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
