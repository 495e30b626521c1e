"""Parser for ``hsl(h, s%, l%)`` color expressions and the HSL to RGB
conversion behind it.
"""

from math import floor
from typing import Tuple

from ..colors import Color
from ..config import CHANNEL_MAX, HUE_PERIOD
from ..errors import UnsupportedFormatError
from .utils import find_arguments, parse_real, split_arguments

__all__ = ("hsl_to_rgb", "parse_hsl_color")


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _parse_percentage(component: str) -> float:
    if not component.endswith("%"):
        raise UnsupportedFormatError()
    try:
        return parse_real(component[:-1])
    except ValueError:
        raise UnsupportedFormatError() from None


def _hue_to_fraction(p: float, q: float, t: float) -> float:
    t %= 1.0
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _to_channel(fraction: float) -> int:
    # round half away from zero; fraction is never negative here
    value = floor(fraction * CHANNEL_MAX + 0.5)
    return int(_clamp(value, 0, CHANNEL_MAX))


def hsl_to_rgb(
    hue: float, saturation: float, lightness: float
) -> Tuple[int, int, int]:
    """Converts a color from the HSL color space to RGB.

    Parameters:
        hue: the hue, between 0 (inclusive) and 1 (exclusive)
        saturation: the saturation, between 0 and 1
        lightness: the lightness, between 0 and 1

    Returns:
        the red, green and blue channels, each between 0 and 255
    """
    if lightness < 0.5:
        q = lightness * (1 + saturation)
    else:
        q = lightness + saturation - lightness * saturation
    p = 2 * lightness - q

    return (
        _to_channel(_hue_to_fraction(p, q, hue + 1 / 3)),
        _to_channel(_hue_to_fraction(p, q, hue)),
        _to_channel(_hue_to_fraction(p, q, hue - 1 / 3)),
    )


def parse_hsl_color(string: str) -> Color:
    """Parses an ``hsl(h, s%, l%)`` expression.

    The hue is given in degrees and may be any finite number; it is reduced
    modulo 360. Saturation and lightness are percentages and are clamped
    into 0%..100%.

    Raises:
        UnsupportedFormatError: if the expression is malformed in any way
    """
    arguments = find_arguments(string)
    if arguments is None:
        raise UnsupportedFormatError()

    components = split_arguments(arguments, 3)
    if components is None:
        raise UnsupportedFormatError()

    try:
        hue = parse_real(components[0])
    except ValueError:
        raise UnsupportedFormatError() from None
    saturation = _parse_percentage(components[1])
    lightness = _parse_percentage(components[2])

    hue = (hue % HUE_PERIOD) / HUE_PERIOD
    saturation = _clamp(saturation / 100, 0.0, 1.0)
    lightness = _clamp(lightness / 100, 0.0, 1.0)

    return Color(*hsl_to_rgb(hue, saturation, lightness))
