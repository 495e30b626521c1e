"""Low-level numeric helpers shared by the color format parsers."""

import re

from math import isfinite
from typing import List, Optional, Tuple

__all__ = (
    "find_arguments",
    "parse_hex_byte",
    "parse_int32",
    "parse_real",
    "split_arguments",
)

_HEX_BYTE = re.compile(r"[0-9A-Fa-f]{2}")
_INT = re.compile(r"[+-]?[0-9]+")
_REAL = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")

_INT32_MIN, _INT32_MAX = -(2 ** 31), 2 ** 31 - 1


def parse_hex_byte(value: str) -> int:
    """Parses a string of exactly two hexadecimal digits as an unsigned
    8-bit integer.

    Signs, whitespace and underscores are rejected even though ``int()``
    would accept them.

    Raises:
        ValueError: if the string is not made of two hexadecimal digits
    """
    if not _HEX_BYTE.fullmatch(value):
        if len(value) != 2:
            raise ValueError(
                "expected two hex digits, got {0} characters".format(len(value))
            )
        raise ValueError("invalid digit found in {0!r}".format(value))
    return int(value, 16)


def parse_int32(value: str) -> int:
    """Parses a base-10 integer with an optional sign that must fit into a
    signed 32-bit integer.

    Raises:
        ValueError: if the string is not a valid integer or it is too large
    """
    if not _INT.fullmatch(value):
        raise ValueError("invalid integer literal: {0!r}".format(value))
    result = int(value, 10)
    if result < _INT32_MIN or result > _INT32_MAX:
        raise ValueError("integer literal out of 32-bit range: {0!r}".format(value))
    return result


def parse_real(value: str) -> float:
    """Parses a decimal real number with an optional sign and an optional
    fractional part. Exponents, ``inf``, ``nan`` and literals too large to
    be represented as a finite float are rejected.

    Raises:
        ValueError: if the string is not a valid real number
    """
    if not _REAL.fullmatch(value):
        raise ValueError("invalid real literal: {0!r}".format(value))

    result = float(value)
    if not isfinite(result):
        raise ValueError("real literal out of range: {0!r}".format(value))
    return result


def find_arguments(value: str) -> Optional[str]:
    """Returns the part of a functional notation like ``rgb(...)`` between
    the first opening and the last closing parenthesis.

    Returns:
        the text between the parentheses or ``None`` if one of them is
        missing or there is nothing between them
    """
    open_index = value.find("(")
    close_index = value.rfind(")")
    if open_index < 0 or close_index < 0 or close_index <= open_index + 1:
        return None
    return value[open_index + 1 : close_index]


def split_arguments(value: str, count: int) -> Optional[Tuple[str, ...]]:
    """Splits a comma-separated argument list and strips whitespace from
    each item.

    Returns:
        the stripped items or ``None`` if the number of items is not equal
        to ``count``
    """
    parts: List[str] = [part.strip() for part in value.split(",")]
    return tuple(parts) if len(parts) == count else None
