"""Parser for hex color codes like ``#1A2B3C`` and ``#FA0``."""

from ..colors import Color
from ..errors import ComponentParseError, InvalidLengthError
from .utils import parse_hex_byte

__all__ = ("parse_hex_color",)


def _parse_component(component: str) -> int:
    try:
        return parse_hex_byte(component)
    except ValueError as ex:
        raise ComponentParseError(component, ex) from ex


def parse_hex_color(string: str) -> Color:
    """Parses the part of a hex color code after the ``#`` sign.

    Three-digit codes are expanded by duplicating each digit, so ``FA0`` is
    the same as ``FFAA00``.

    Raises:
        InvalidLengthError: if the code is not 3 or 6 characters long
        ComponentParseError: if one of the components is not a valid
            hexadecimal number
    """
    length = len(string)
    if length == 3:
        pairs = [ch * 2 for ch in string]
    elif length == 6:
        pairs = [string[0:2], string[2:4], string[4:6]]
    else:
        raise InvalidLengthError(length)

    r, g, b = (_parse_component(pair) for pair in pairs)
    return Color(r, g, b)
