"""Entry points of the color parser that dispatch to the parser of the
appropriate color format.
"""

from typing import Union

from .colors import Color, known_colors
from .errors import ColorParseError
from .formats import ColorFormat
from .logger import log
from .parsers import parse_hex_color, parse_hsl_color, parse_rgb_color

__all__ = ("ParseOutcome", "parse_color", "try_parse_color")


ParseOutcome = Union[Color, ColorParseError]
"""Type specification for the result of parsing a single color expression"""


def parse_color(string: str) -> Color:
    """Parses a CSS color expression and returns the corresponding color.

    Supported formats are color names (see ``known_colors``), hex codes in
    ``#RRGGBB`` or ``#RGB`` form, ``rgb(r, g, b)`` and ``hsl(h, s%, l%)``.
    Leading and trailing whitespace is stripped; color names and function
    names are case insensitive.

    Raises:
        ColorParseError: if the string cannot be parsed; the exact subclass
            tells which rule was violated first
    """
    string = string.strip()
    format = ColorFormat.detect(string)

    if format is ColorFormat.NAMED:
        return known_colors[string.lower()]
    elif format is ColorFormat.HEX:
        return parse_hex_color(string[1:])
    elif format is ColorFormat.RGB:
        return parse_rgb_color(string)
    else:
        return parse_hsl_color(string)


def try_parse_color(string: str) -> ParseOutcome:
    """Parses a CSS color expression like ``parse_color()`` but returns the
    error instead of raising it.
    """
    try:
        return parse_color(string)
    except ColorParseError as ex:
        log.debug("Failed to parse color {0!r}: {1}".format(string, ex))
        return ex
