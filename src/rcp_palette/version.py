"""Version and package metadata of rcp-palette."""

__version_info__ = (0, 3, 0)
__version__ = ".".join("{0}".format(x) for x in __version_info__)
__author__ = "The rcp-palette developers"
__email__ = None
__license__ = "MIT"
__description__ = "Parser for CSS color expressions: hex, rgb(), hsl() and named colors"
__url__ = None
