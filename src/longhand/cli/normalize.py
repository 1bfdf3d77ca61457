"""CLI command: longhand normalize -- run all passes in sequence."""

from __future__ import annotations

import click

from longhand.cli.common import ignore_option, input_option, output_option, run_pass
from longhand.config import NormalizeConfig, normalize_ignore
from longhand.pipeline import normalize as normalize_css


@click.command()
@input_option
@output_option
@ignore_option
@click.option("--no-explode", is_flag=True, help="Skip the explode pass.")
@click.option("--no-defaults", is_flag=True, help="Skip the add-defaults pass.")
@click.option("--no-units", is_flag=True, help="Skip the add-units pass.")
def normalize(
    input_path: str,
    output_path: str,
    ignore: str,
    no_explode: bool,
    no_defaults: bool,
    no_units: bool,
) -> None:
    """Explode, add defaults, then add units."""
    config = NormalizeConfig(
        ignore=normalize_ignore(ignore),
        explode=not no_explode,
        add_defaults=not no_defaults,
        add_units=not no_units,
    )
    run_pass(
        input_path,
        output_path,
        lambda css: normalize_css(css, config=config),
        config.ignore,
    )
