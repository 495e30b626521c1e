"""Color value type and the table of known color names."""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

__all__ = ("BLACK", "WHITE", "Color", "known_colors", "lookup_named_color")


class Color(NamedTuple):
    """Immutable RGB color with three 8-bit channels.

    The constructor does not range-check the channels; the parsers only ever
    produce colors whose channels are between 0 and 255, inclusive.
    """

    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        """Returns the canonical ``#rrggbb`` representation of the color.

        The result parses back to the same color only if every channel is
        between 0 and 255.
        """
        return "#{0:02x}{1:02x}{2:02x}".format(self.r, self.g, self.b)

    def to_rgb(self) -> str:
        """Returns the ``rgb(r, g, b)`` representation of the color."""
        return "rgb({0}, {1}, {2})".format(self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.to_hex()


BLACK = Color(0, 0, 0)
"""The black color"""

WHITE = Color(255, 255, 255)
"""The white color"""


known_colors: Mapping[str, Color] = MappingProxyType(
    {
        "black": BLACK,
        "white": WHITE,
        "red": Color(255, 0, 0),
        "green": Color(0, 128, 0),
        "blue": Color(0, 0, 255),
        "yellow": Color(255, 255, 0),
        "cyan": Color(0, 255, 255),
        "magenta": Color(255, 0, 255),
        "gray": Color(128, 128, 128),
        "grey": Color(128, 128, 128),
        "rebeccapurple": Color(102, 51, 153),
    }
)
"""Read-only mapping from lowercase CSS color names to their values"""


def lookup_named_color(name: str) -> Optional[Color]:
    """Looks up a color by its CSS name.

    Color names are case insensitive. Leading and trailing whitespace is
    stripped.

    Returns:
        the color or ``None`` if the name is not known
    """
    return known_colors.get(name.strip().lower())
