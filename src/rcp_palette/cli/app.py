"""Main application class for rcp-palette"""

import click
import click_log

from rcp_palette import version
from rcp_palette.config import DEFAULT_ENCODING
from rcp_palette.errors import ColorParseError
from rcp_palette.logger import log
from rcp_palette.parser import parse_color
from rcp_palette.utils import error

from .utils import parse_lines_and_write

click_log.basic_config(log)


@click.group()
@click_log.simple_verbosity_option(log)
@click.version_option(version.__version__, prog_name="rcp-palette")
def cli():
    """Parses CSS colors: hex (#RRGGBB, #RGB), rgb(R, G, B), hsl(H, S%, L%)
    and color names.
    """
    pass


@cli.command()
@click.argument("color", required=True)
def parse(color):
    """Parses a single color expression and prints its channels."""
    click.echo("--- Parsing color: {0} ---".format(color))

    try:
        result = parse_color(color)
    except ColorParseError as ex:
        error("Failed to parse color: {0}".format(ex), fatal=True)

    click.echo("Color parsed successfully!")
    click.echo("   > Input: {0}".format(color))
    click.echo("   > Color: r: {0.r}, g: {0.g}, b: {0.b}".format(result))


@cli.command()
@click.option(
    "-o",
    "--output",
    type=click.File("w"),
    help="name of the output file for the successfully parsed colors",
    default="-",
)
@click.option(
    "-e",
    "--encoding",
    metavar="ENCODING",
    help="the encoding of the input file (default: {0})".format(DEFAULT_ENCODING),
    default=DEFAULT_ENCODING,
)
@click.option(
    "-p",
    "--progress",
    default=False,
    is_flag=True,
    help="Show the progress of the parsing process with a progress bar.",
)
@click.option(
    "--strict",
    default=False,
    is_flag=True,
    help="Exit with a non-zero status code if any of the lines failed to parse.",
)
@click.argument(
    "path", required=True, type=click.Path(exists=True, dir_okay=False)
)
def file(path, output, encoding, progress, strict):
    """\
    Parses a file containing one color expression per line.

    Blank lines are skipped. Successfully parsed colors are written to the
    output with their 1-based line numbers; lines that fail to parse are
    reported on the standard error stream.
    """
    click.echo("--- Reading and parsing colors from file: {0} ---".format(path))

    try:
        with open(path, encoding=encoding, newline="") as fp:
            lines = fp.read().split("\n")
    except (OSError, UnicodeDecodeError) as ex:
        error("Failed to read file {0}: {1}".format(path, ex), fatal=True)

    num_parsed, num_failed = parse_lines_and_write(
        lines, output, progress=progress, description=path
    )

    click.echo("--- Finished parsing file ---")
    log.info("{0} parsed, {1} failed".format(num_parsed, num_failed))

    if strict and num_failed:
        error("{0} line(s) failed to parse".format(num_failed), fatal=True)


@cli.command()
def author():
    """Prints information about the author and the package."""
    click.echo("--- rcp-palette (CSS Color Parser) ---")
    click.echo("Author: {0}".format(version.__author__))
    click.echo("Version: {0}".format(version.__version__))
    click.echo("License: {0}".format(version.__license__))
    click.echo("Description: {0}".format(version.__description__))
    click.echo("Repository: {0}".format(version.__url__ or "n/a"))


def main():
    """Main entry point of the color parser."""
    cli()
