"""Enum corresponding to the color formats supported by the parser."""

from enum import Enum

from .colors import lookup_named_color
from .errors import MissingHashPrefixError

__all__ = ("ColorFormat",)


class ColorFormat(Enum):
    """Enum representing the possible color formats supported by the
    parser.
    """

    NAMED = "named"
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"

    @staticmethod
    def detect(string: str) -> "ColorFormat":
        """Proposes a color format to use for parsing the given string.

        The string is expected to be stripped of leading and trailing
        whitespace already. Color names take precedence over everything
        else, followed by hex codes, ``rgb()`` and ``hsl()``.

        Parameters:
            string: the color specification

        Returns:
            the proposed format of the color specification

        Raises:
            MissingHashPrefixError: if the string does not look like any of
                the supported formats
        """
        lowercase = string.lower()

        if lookup_named_color(lowercase) is not None:
            return ColorFormat.NAMED
        elif string.startswith("#"):
            return ColorFormat.HEX
        elif lowercase.startswith("rgb("):
            return ColorFormat.RGB
        elif lowercase.startswith("hsl("):
            return ColorFormat.HSL
        else:
            raise MissingHashPrefixError()
