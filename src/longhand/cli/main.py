"""longhand CLI entry point: Click group with one subcommand per pass."""

import logging

import click

from longhand import __version__


@click.group()
@click.version_option(version=__version__, prog_name="longhand")
@click.option("-v", "--verbose", is_flag=True, help="Log every rewritten declaration.")
def cli(verbose: bool) -> None:
    """longhand - explode CSS shorthands, fill their defaults and add units to zeros."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from longhand.cli.explode import explode  # noqa: E402
from longhand.cli.add_defaults import add_defaults  # noqa: E402
from longhand.cli.add_units import add_units  # noqa: E402
from longhand.cli.normalize import normalize  # noqa: E402

cli.add_command(explode)
cli.add_command(add_defaults)
cli.add_command(add_units)
cli.add_command(normalize)
