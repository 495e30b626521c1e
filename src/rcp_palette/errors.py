"""Exceptions thrown by the color parser."""

from typing import Optional

__all__ = (
    "ColorParseError",
    "ComponentParseError",
    "InvalidLengthError",
    "MissingHashPrefixError",
    "RgbComponentOutOfRangeError",
    "RgbComponentParseError",
    "RgbInvalidFormatError",
    "UnsupportedFormatError",
)


class ColorParseError(RuntimeError):
    """Base class for all errors thrown by the color parser."""

    pass


class InvalidLengthError(ColorParseError):
    """Exception thrown when the part of a hex color code after the ``#``
    sign is neither 3 nor 6 characters long."""

    def __init__(self, length: int, message: Optional[str] = None):
        self.length = length
        message = message or (
            "Invalid hex code length: {0} characters, expected 3 or 6".format(length)
        )
        super().__init__(message)


class ComponentParseError(ColorParseError):
    """Exception thrown when a two-character component of a hex color code
    is not a valid hexadecimal number."""

    def __init__(
        self, component: str, cause: ValueError, message: Optional[str] = None
    ):
        self.component = component
        self.cause = cause
        message = message or "Invalid hex component {0!r}: {1}".format(
            component, cause
        )
        super().__init__(message)


class MissingHashPrefixError(ColorParseError):
    """Exception thrown when the input is neither a color name, nor a hex
    color code starting with ``#``, nor an ``rgb()`` or ``hsl()`` expression.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or "Color must start with '#'; unsupported color format"
        )


class UnsupportedFormatError(ColorParseError):
    """Exception thrown when an ``hsl()`` expression is malformed."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Unsupported color format")


class RgbInvalidFormatError(ColorParseError):
    """Exception thrown when an ``rgb()`` expression has missing or empty
    parentheses or the wrong number of components."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Invalid rgb() format, expected rgb(r, g, b)")


class RgbComponentParseError(ColorParseError):
    """Exception thrown when a component of an ``rgb()`` expression is not
    a decimal integer."""

    def __init__(self, component: str, message: Optional[str] = None):
        self.component = component
        message = message or "Invalid numeric rgb() component: {0!r}".format(
            component
        )
        super().__init__(message)


class RgbComponentOutOfRangeError(ColorParseError):
    """Exception thrown when a component of an ``rgb()`` expression is an
    integer outside the range 0..255."""

    def __init__(self, value: int, message: Optional[str] = None):
        self.value = value
        message = message or "rgb() component out of range 0..255: {0}".format(
            value
        )
        super().__init__(message)
