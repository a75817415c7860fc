"""Color math over RGBA values.

An RGBA value is either a sequence ``[red, green, blue, alpha]`` or a mapping
with long or short channel names (``red``/``r``, ``green``/``g``,
``blue``/``b``, ``alpha``/``a``; positional keys ``0``-``3`` also work).
Color channels are integers in ``[0, 255]`` and alpha a float in ``[0, 1]``.

Note:
    `hex_str_to_rgba_array` reports the alpha of an 8-digit hex string as the
    raw decoded byte (``0``-``255``), while every other helper treats alpha as
    a ``[0, 1]`` fraction. `rgba_to_hex` scales alpha up before encoding.
"""

import math
import re
import warnings
from collections.abc import Mapping, Sequence
from itertools import zip_longest
from typing import Any

from .values import min_max

RGBAValue = Sequence[Any] | Mapping[Any, Any]

CHANNELS = ("red", "green", "blue", "alpha")
CHANNEL_ALIASES = {"red": "r", "green": "g", "blue": "b", "alpha": "a"}

WHITE = (255, 255, 255)
GREY = (128, 128, 128)
BLACK = (0, 0, 0)

# WCAG 2.x relative luminance
LUMINANCE_COEFFICIENTS = (0.2126, 0.7152, 0.0722)
LINEARIZE_THRESHOLD = 0.04045
LEGACY_LINEARIZE_THRESHOLD = 0.03928

RENDER_DEFAULT_CHANNEL = 127

RGBA_STR_PATTERN = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([01]\.?[0-9]*)\s*)?\)"
)
HEX_DIGITS = re.compile(r"^[0-9a-f]*$")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _channel(rgba: RGBAValue, name: str, default: Any) -> Any:
    """Look up a channel by long name, short name, then position."""
    index = CHANNELS.index(name)
    if isinstance(rgba, Mapping):
        for key in (name, CHANNEL_ALIASES[name], index):
            if rgba.get(key) is not None:
                return rgba[key]
        return default
    if index < len(rgba) and rgba[index] is not None:
        return rgba[index]
    return default


def _as_int(value: Any) -> int:
    return int(float(value))


# --- Parsing ---


def hex_str_to_rgba_array(
    hex_color: str, alpha_fallback: float = 1.0
) -> dict[str, int | float]:
    """Parse a hexadecimal color string.

    Accepts 3, 6 or 8 hex digits with an optional leading ``#``. Each digit of
    the 3-digit form is doubled (``#fa0`` is ``#ffaa00``).

    Args:
        hex_color: Color such as ``"#fff"``, ``"ff8800"`` or ``"#ff000080"``.
        alpha_fallback: Alpha used when the string has no alpha byte.

    Returns:
        dict: ``red``, ``green``, ``blue`` and ``alpha`` keys. The alpha of an
        8-digit string is the raw byte value (``0``-``255``). An empty dict is
        returned for unsupported lengths or non-hex digits.
    """
    hex_color = hex_color.strip().lower().removeprefix("#")
    if not HEX_DIGITS.match(hex_color):
        return {}
    alpha: int | float = alpha_fallback
    match len(hex_color):
        case 8 | 6:
            pairs = [hex_color[i : i + 2] for i in range(0, len(hex_color), 2)]
            if len(pairs) == 4:
                alpha = int(pairs[3], 16)
        case 3:
            pairs = [digit * 2 for digit in hex_color]
        case _:
            return {}
    red, green, blue = (int(pair, 16) for pair in pairs[:3])
    return {"red": red, "green": green, "blue": blue, "alpha": alpha}


def rgba_str_to_rgba_array(rgba_str: str) -> dict[str, int | float]:
    """Parse a CSS ``rgb(r,g,b)`` or ``rgba(r,g,b,a)`` string.

    Returns:
        dict: Integer ``red``/``green``/``blue`` and float ``alpha`` (default
        ``1.0``), or an empty dict if the string does not match.
    """
    match = RGBA_STR_PATTERN.search(rgba_str.strip().lower())
    if not match:
        return {}
    red, green, blue, alpha = match.groups()
    return {
        "red": int(red),
        "green": int(green),
        "blue": int(blue),
        "alpha": float(alpha) if alpha is not None else 1.0,
    }


def parse_color_str(color: str) -> dict[str, int | float]:
    """Parse either CSS ``rgb()``/``rgba()`` syntax or a hex color string.

    Returns:
        dict: The parsed channels, or an empty dict if neither form matches.
    """
    return rgba_str_to_rgba_array(color) or hex_str_to_rgba_array(color)


# --- Normalization ---


def rgba_array_to_sequence(rgba: RGBAValue) -> list[int | float]:
    """Normalize RGBA information to ``[red, green, blue, alpha]``.

    Missing color channels default to ``0`` and a missing alpha to ``1.0``.
    """
    return [
        _as_int(_channel(rgba, "red", 0)),
        _as_int(_channel(rgba, "green", 0)),
        _as_int(_channel(rgba, "blue", 0)),
        float(_channel(rgba, "alpha", 1)),
    ]


def rgba_array_to_assoc(rgba: RGBAValue) -> dict[str, int | float]:
    """Normalize RGBA information to a ``red``/``green``/``blue``/``alpha`` dict.

    Missing color channels default to ``0`` and a missing alpha to ``1.0``.
    """
    return dict(zip(CHANNELS, rgba_array_to_sequence(rgba)))


# --- Luminance ---


def _linearize(value: float, threshold: float) -> float:
    value = value / 255
    if value < threshold:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def _weighted_luminance(rgba: RGBAValue | str, threshold: float) -> float:
    if isinstance(rgba, str):
        rgba = parse_color_str(rgba)
    red, green, blue, _ = rgba_array_to_sequence(rgba)
    linear = (_linearize(c, threshold) for c in (red, green, blue))
    return float(sum(k * c for k, c in zip(LUMINANCE_COEFFICIENTS, linear)))


def rgba_to_luminance(rgba: RGBAValue | str) -> float:
    """Calculate the WCAG relative luminance of a color.

    Each channel is scaled to ``[0, 1]``, linearized (divided by 12.92 below
    0.04045, otherwise ``((c + 0.055) / 1.055) ** 2.4``), then weighted
    ``0.2126 R + 0.7152 G + 0.0722 B``. Alpha is ignored.

    Args:
        rgba: RGBA value, or a color string accepted by `parse_color_str`.

    Returns:
        float: Luminance from ``0.0`` (black) to ``1.0`` (white).
    """
    return _weighted_luminance(rgba, LINEARIZE_THRESHOLD)


def rgba_to_luma(rgba: RGBAValue | str) -> float:
    """Calculate approximate luma using the legacy 0.03928 threshold.

    Deprecated:
        Use `rgba_to_luminance`. Kept for reproducing values computed by
        older releases; results differ only for very dark channels.
    """
    warnings.warn(
        "rgba_to_luma() is deprecated; use rgba_to_luminance() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return _weighted_luminance(rgba, LEGACY_LINEARIZE_THRESHOLD)


# --- Mixing ---


def mix_rgb(
    rgb_color_1: RGBAValue = BLACK,
    rgb_color_2: RGBAValue = BLACK,
    weight: float = 0.5,
) -> list[int]:
    """Mix two colors channel by channel, discarding alpha.

    Each channel is ``round(weight * c1 + (1 - weight) * c2)`` with halves
    rounded up.

    Args:
        rgb_color_1: First color, weighted by *weight*.
        rgb_color_2: Second color, weighted by ``1 - weight``.
        weight: Share of the first color, usually in ``[0, 1]``.

    Returns:
        list[int]: ``[red, green, blue]``.
    """
    first = rgba_array_to_sequence(rgb_color_1)[:3]
    second = rgba_array_to_sequence(rgb_color_2)[:3]
    return [
        round_half_up(weight * x + (1 - weight) * y)
        for x, y in zip_longest(first, second, fillvalue=0)
    ]


def _mix_keep_alpha(
    color: RGBAValue, toward: tuple[int, int, int], weight: float
) -> list[int | float]:
    *rgb, alpha = rgba_array_to_sequence(color)
    return [*mix_rgb(rgb, toward, weight), alpha]


def tint_rgba(color: RGBAValue, weight: float = 0.5) -> list[int | float]:
    """Mix white into a color, keeping its alpha.

    Args:
        color: RGBA value.
        weight: Share of the original color kept (``1`` leaves it unchanged,
            ``0`` gives white).

    Returns:
        list: ``[red, green, blue, alpha]``.
    """
    return _mix_keep_alpha(color, WHITE, weight)


def tone_rgba(color: RGBAValue, weight: float = 0.5) -> list[int | float]:
    """Mix 50% grey into a color, keeping its alpha.

    Args:
        color: RGBA value.
        weight: Share of the original color kept.

    Returns:
        list: ``[red, green, blue, alpha]``.
    """
    return _mix_keep_alpha(color, GREY, weight)


def shade_rgba(color: RGBAValue, weight: float = 0.5) -> list[int | float]:
    """Mix black into a color, keeping its alpha.

    Args:
        color: RGBA value.
        weight: Share of the original color kept.

    Returns:
        list: ``[red, green, blue, alpha]``.
    """
    return _mix_keep_alpha(color, BLACK, weight)


# --- Rendering ---


def rgba_to_hex(rgba_values: RGBAValue, strip_alpha: bool = False) -> str:
    """Encode RGBA information as a ``#rrggbbaa`` string.

    Channels are clamped to ``[0, 255]``; alpha is scaled from ``[0, 1]``
    first. Missing color channels default to ``127``, missing alpha to ``1``.

    Args:
        rgba_values: RGBA value.
        strip_alpha: Return ``#rrggbb`` only.

    Returns:
        str: Lowercase, zero-padded hex color.
    """
    red, green, blue = (
        int(min_max(float(_channel(rgba_values, name, RENDER_DEFAULT_CHANNEL)), 0, 255))
        for name in CHANNELS[:3]
    )
    alpha = math.floor(min_max(float(_channel(rgba_values, "alpha", 1)) * 255, 0, 255))
    hex_str = f"#{red:02x}{green:02x}{blue:02x}{alpha:02x}"
    return hex_str[:7] if strip_alpha else hex_str


def render_rgba_array(rgba_values: RGBAValue) -> str:
    """Render RGBA information as CSS, e.g. ``rgba(255,0,0,0.500)``.

    Missing color channels default to ``127``, missing alpha to ``1``.
    """
    red, green, blue = (
        _as_int(_channel(rgba_values, name, RENDER_DEFAULT_CHANNEL))
        for name in CHANNELS[:3]
    )
    alpha = float(_channel(rgba_values, "alpha", 1))
    return f"rgba({red},{green},{blue},{alpha:.3f})"
