"""
============
rcp-palette
============
---------------------------
CSS color expression parser
---------------------------
"""

from .colors import Color, known_colors
from .errors import (
    ColorParseError,
    ComponentParseError,
    InvalidLengthError,
    MissingHashPrefixError,
    RgbComponentOutOfRangeError,
    RgbComponentParseError,
    RgbInvalidFormatError,
    UnsupportedFormatError,
)
from .formats import ColorFormat
from .parser import ParseOutcome, parse_color, try_parse_color
from .version import __author__, __email__, __version_info__, __version__

__all__ = (
    "__author__",
    "__email__",
    "__version_info__",
    "__version__",
    "Color",
    "ColorFormat",
    "ColorParseError",
    "ComponentParseError",
    "InvalidLengthError",
    "MissingHashPrefixError",
    "ParseOutcome",
    "RgbComponentOutOfRangeError",
    "RgbComponentParseError",
    "RgbInvalidFormatError",
    "UnsupportedFormatError",
    "known_colors",
    "parse_color",
    "try_parse_color",
)
