"""CLI command: longhand explode -- replace shorthands by their longhands."""

from __future__ import annotations

import click

from longhand.cli.common import ignore_option, input_option, output_option, run_pass
from longhand.config import normalize_ignore
from longhand.pipeline import explode as explode_css


@click.command()
@input_option
@output_option
@ignore_option
def explode(input_path: str, output_path: str, ignore: str) -> None:
    """Explode margin, padding, columns and border shorthands."""
    names = normalize_ignore(ignore)
    run_pass(input_path, output_path, lambda css: explode_css(css, ignore=names), names)
