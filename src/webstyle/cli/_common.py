"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from webstyle.errors import SheetSyntaxError, StyleValueError
from webstyle.sheet import Sheet, compile_sheet, parse_sheet
from webstyle.validation import validate


def load_sheet(path: str) -> Sheet:
    """Read and parse a sheet file, exiting with status 1 on a syntax error."""
    source = Path(path).read_text(encoding="utf-8")
    try:
        return parse_sheet(source)
    except SheetSyntaxError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line and exc.line > 0 else ""
        click.echo(f"Parse error{location}: {exc}", err=True)
        sys.exit(1)


def compile_or_exit(sheet: Sheet, strict: bool = False) -> list[str]:
    """Compile *sheet*, exiting with status 1 on a style error.

    When *strict*, the sheet is validated first and any warning or error
    stops compilation.
    """
    if strict:
        errors = [d for d in validate(sheet, strict=True) if d.is_error]
        if errors:
            for diag in errors:
                click.echo(str(diag), err=True)
            sys.exit(1)
    try:
        return compile_sheet(sheet)
    except StyleValueError as exc:
        location = f" (line {exc.line})" if exc.line and exc.line > 0 else ""
        click.echo(f"Style error{location}: {exc}", err=True)
        sys.exit(1)
