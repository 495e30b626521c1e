"""Default configuration values of rcp-palette."""

DEFAULT_ENCODING = "utf-8"
"""Encoding used when reading color expressions from a file"""

PROGRESS_BAR_FORMAT = "{desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt}{postfix}"
"""Format of the progress bar shown by the ``file`` command"""

CHANNEL_MAX = 255
"""Largest value of a single color channel"""

HUE_PERIOD = 360.0
"""Hue values are taken modulo this number of degrees"""
