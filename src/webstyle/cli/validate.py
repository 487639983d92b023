"""CLI command: webstyle validate -- parse and validate a style sheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from webstyle.cli._common import load_sheet
from webstyle.config import WebStyleConfig
from webstyle.validation import summarize
from webstyle.validation import validate as run_validate


@click.command()
@click.argument("sheetfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Treat warnings as errors.")
@click.pass_context
def validate(ctx: click.Context, sheetfile: str, strict: bool) -> None:
    """Parse and validate a style sheet.

    Prints diagnostics in source order and exits with code 0 if no errors
    are found, or code 1 if there are errors. With --strict (here or on the
    webstyle group) warnings count as errors.
    """
    config: WebStyleConfig = ctx.obj or WebStyleConfig()
    sheet_path = Path(sheetfile)

    sheet = load_sheet(sheetfile)
    diagnostics = run_validate(sheet, strict=strict or config.strict)

    if not diagnostics:
        click.echo(f"OK: {sheet_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(summarize(diagnostics))

    sys.exit(1 if any(d.is_error for d in diagnostics) else 0)
