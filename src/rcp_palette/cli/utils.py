import sys

from typing import IO, Optional, Sequence, Tuple

from tqdm import tqdm

from rcp_palette.config import PROGRESS_BAR_FORMAT
from rcp_palette.errors import (
    ColorParseError,
    InvalidLengthError,
    MissingHashPrefixError,
)
from rcp_palette.parser import try_parse_color

__all__ = ("describe_error", "parse_lines_and_write")


def describe_error(ex: ColorParseError) -> str:
    """Returns the message to show to the user for a color that failed to
    parse in a file. The two most common mistakes get a short, fixed
    message; the others are shown with their full description.
    """
    if isinstance(ex, MissingHashPrefixError):
        return "color must start with '#'"
    elif isinstance(ex, InvalidLengthError):
        return "invalid hex code length"
    else:
        return str(ex)


def parse_lines_and_write(
    lines: Sequence[str],
    output: IO[str],
    errors: Optional[IO[str]] = None,
    *,
    progress: bool = False,
    description: Optional[str] = None
) -> Tuple[int, int]:
    """Parses each non-blank line of a color file as a color expression and
    writes the outcome of each line in human-readable format.

    Parameters:
        lines: the lines of the input file
        output: stream to write the successfully parsed colors to
        errors: stream to write the lines that failed to parse to; `None`
            means the standard error stream
        progress: whether to show a progress bar while parsing the lines
        description: a short string to display next to the progress bar

    Returns:
        the number of successfully parsed and failed lines
    """
    errors = errors or sys.stderr
    num_parsed, num_failed = 0, 0

    with tqdm(
        total=len(lines),
        desc=description,
        disable=not progress,
        bar_format=PROGRESS_BAR_FORMAT,
    ) as progress_bar:
        for index, line in enumerate(lines, 1):
            progress_bar.update(1)

            line = line.strip()
            if not line:
                continue

            outcome = try_parse_color(line)
            if isinstance(outcome, ColorParseError):
                num_failed += 1
                message = "Line {0}: ERROR {1} -> Error: {2}".format(
                    index, line, describe_error(outcome)
                )
                progress_bar.write(message, file=errors)
            else:
                num_parsed += 1
                message = "Line {0}: OK {1} -> RGB: r:{2.r}, g:{2.g}, b:{2.b}".format(
                    index, line, outcome
                )
                progress_bar.write(message, file=output)

        progress_bar.set_postfix_str("done.")

    return num_parsed, num_failed
