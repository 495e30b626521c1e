"""Parser for ``rgb(r, g, b)`` color expressions."""

from ..colors import Color
from ..config import CHANNEL_MAX
from ..errors import (
    RgbComponentOutOfRangeError,
    RgbComponentParseError,
    RgbInvalidFormatError,
)
from .utils import find_arguments, parse_int32, split_arguments

__all__ = ("parse_rgb_color",)


def _parse_channel(component: str) -> int:
    try:
        value = parse_int32(component)
    except ValueError:
        raise RgbComponentParseError(component) from None

    if value < 0 or value > CHANNEL_MAX:
        raise RgbComponentOutOfRangeError(value)

    return value


def parse_rgb_color(string: str) -> Color:
    """Parses an ``rgb(r, g, b)`` expression where each component is a
    decimal integer between 0 and 255, inclusive. Whitespace is allowed
    around the components.

    Components are validated left to right; the first invalid component
    determines the error.

    Raises:
        RgbInvalidFormatError: if the parentheses are missing or empty or
            the number of components is not three
        RgbComponentParseError: if a component is not an integer
        RgbComponentOutOfRangeError: if a component is outside 0..255
    """
    arguments = find_arguments(string)
    if arguments is None:
        raise RgbInvalidFormatError()

    components = split_arguments(arguments, 3)
    if components is None:
        raise RgbInvalidFormatError()

    r, g, b = [_parse_channel(component) for component in components]
    return Color(r, g, b)
