"""CLI command: longhand add-defaults -- fill omitted shorthand components."""

from __future__ import annotations

import click

from longhand.cli.common import ignore_option, input_option, output_option, run_pass
from longhand.config import normalize_ignore
from longhand.pipeline import add_defaults as add_defaults_css


@click.command("add-defaults")
@input_option
@output_option
@ignore_option
def add_defaults(input_path: str, output_path: str, ignore: str) -> None:
    """Write every slot of animation, transition, font, flex and friends."""
    names = normalize_ignore(ignore)
    run_pass(
        input_path, output_path, lambda css: add_defaults_css(css, ignore=names), names
    )
