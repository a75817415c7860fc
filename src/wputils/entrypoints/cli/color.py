"""``wputils color``: inspect and adjust a color."""

import logging

import click

from wputils.utils.colors import (
    hex_str_to_rgba_array,
    render_rgba_array,
    rgba_array_to_sequence,
    rgba_str_to_rgba_array,
    rgba_to_hex,
    rgba_to_luminance,
    shade_rgba,
    tint_rgba,
    tone_rgba,
)

from .helpers import error, warn

logger = logging.getLogger(__name__)

ALPHA_HEX_DIGITS = 8

WEIGHT = click.FloatRange(0, 1)


def parse_cli_color(color: str) -> dict[str, int | float]:
    """Parse a CSS ``rgb()``/``rgba()`` or hex color with alpha as a fraction.

    Returns:
        dict: The channels, or an empty dict if the color is not recognized.
    """
    if rgba := rgba_str_to_rgba_array(color):
        return rgba
    rgba = hex_str_to_rgba_array(color)
    if rgba and len(color.strip().removeprefix("#")) == ALPHA_HEX_DIGITS:
        rgba["alpha"] = rgba["alpha"] / 255
    return rgba


@click.command()
@click.argument("color")
@click.option("--tint", type=WEIGHT, help="Mix with white, keeping this share.")
@click.option("--tone", type=WEIGHT, help="Mix with grey, keeping this share.")
@click.option("--shade", type=WEIGHT, help="Mix with black, keeping this share.")
@click.option("--no-alpha", is_flag=True, help="Print the hex color without alpha.")
@click.pass_context
def color(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    color: str,  # pylint: disable=redefined-outer-name
    tint: float | None,
    tone: float | None,
    shade: float | None,
    no_alpha: bool,
) -> None:
    """Print CSS, hex and luminance of COLOR (hex or rgb()/rgba()).

    Adjustments apply in the order tint, tone, shade.
    """
    rgba = parse_cli_color(color)
    if not rgba:
        error(f"Unrecognized color: {color!r}")
        ctx.exit(1)
    value: list[int | float] | dict[str, int | float] = rgba
    for weight, adjust in ((tint, tint_rgba), (tone, tone_rgba), (shade, shade_rgba)):
        if weight is not None:
            value = adjust(value, weight)
            logger.debug("%s(%s) -> %s", adjust.__name__, weight, value)
    click.echo(f"css: {render_rgba_array(value)}")
    if no_alpha and (alpha := rgba_array_to_sequence(value)[3]) < 1:
        warn(f"Alpha {alpha:.3f} dropped from hex output.")
    click.echo(f"hex: {rgba_to_hex(value, strip_alpha=no_alpha)}")
    click.echo(f"luminance: {rgba_to_luminance(value):.4f}")
