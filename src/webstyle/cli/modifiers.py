"""CLI command: webstyle modifiers -- list breakpoints and states with prefixes."""

from __future__ import annotations

import click

from webstyle.modifiers import BREAKPOINTS, Modifier


@click.command()
@click.option(
    "--kind",
    type=click.Choice(["all", "breakpoint", "state"]),
    default="all",
    show_default=True,
    help="Which modifiers to list.",
)
def modifiers(kind: str) -> None:
    """List the known modifiers and the prefix each one adds."""
    for modifier in Modifier:
        is_breakpoint = modifier in BREAKPOINTS
        if kind == "breakpoint" and not is_breakpoint:
            continue
        if kind == "state" and is_breakpoint:
            continue
        label = "breakpoint" if is_breakpoint else "state"
        click.echo(f"{modifier.value:<16} {modifier.prefix:<18} {label}")
