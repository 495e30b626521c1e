"""Utility functions for rcp-palette."""

import sys

__all__ = ("error",)


def error(message: str, fatal: bool = False) -> None:
    """Prints an error message to stderr.

    Parameters:
        message: The message to print
        fatal: Whether to terminate the script after the error message
    """
    print(message, file=sys.stderr)
    if fatal:
        sys.exit(1)
