"""Options and file handling shared by every longhand subcommand."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import click

from longhand.stylesheet import ParseError

input_option = click.option(
    "-i",
    "--input",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Stylesheet to read.",
)
output_option = click.option(
    "-o",
    "--output",
    "output_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Where to write the result; '-' for stdout.",
)
ignore_option = click.option(
    "--ignore",
    default="",
    metavar="PROPS",
    help="Comma-separated properties to leave alone, e.g. 'margin,opacity'.",
)


def run_pass(
    input_path: str,
    output_path: str,
    convert: Callable[[str], str],
    ignore: frozenset[str] = frozenset(),
) -> None:
    """Read *input_path*, run *convert* over it and write *output_path*.

    Exits with status 1 when the stylesheet cannot be parsed.
    """
    source = Path(input_path).read_text(encoding="utf-8")
    try:
        result = convert(source)
    except ParseError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_path == "-":
        click.echo(result, nl=False)
        return

    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(result, encoding="utf-8")
    click.echo(f"Processed {input_path} -> {output_path}")
    if ignore:
        click.echo(f"Ignored properties: {', '.join(sorted(ignore))}")
