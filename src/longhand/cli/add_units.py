"""CLI command: longhand add-units -- give bare zeros their property's unit."""

from __future__ import annotations

import click

from longhand.cli.common import ignore_option, input_option, output_option, run_pass
from longhand.config import normalize_ignore
from longhand.pipeline import add_units as add_units_css


@click.command("add-units")
@input_option
@output_option
@ignore_option
def add_units(input_path: str, output_path: str, ignore: str) -> None:
    """Rewrite `0` as `0px`, `0s` or `0deg` where the property implies a unit."""
    names = normalize_ignore(ignore)
    run_pass(input_path, output_path, lambda css: add_units_css(css, ignore=names), names)
