from .hex import parse_hex_color
from .hsl import hsl_to_rgb, parse_hsl_color
from .rgb import parse_rgb_color

__all__ = ("hsl_to_rgb", "parse_hex_color", "parse_hsl_color", "parse_rgb_color")
