"""Logger of rcp-palette."""

import logging

__all__ = ("log",)

log = logging.getLogger("rcp_palette")
