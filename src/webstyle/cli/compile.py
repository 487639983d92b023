"""CLI commands: webstyle compile / webstyle render -- turn a sheet into classes."""

from __future__ import annotations

import click

from webstyle.cli._common import compile_or_exit, load_sheet
from webstyle.config import WebStyleConfig
from webstyle.elements import Element
from webstyle.styling import Styled


@click.command("compile")
@click.argument("sheetfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--separator", default=None, help="Text placed between tokens (default: one space).")
@click.option("--lines", is_flag=True, help="Print one token per line.")
@click.pass_context
def compile_cmd(ctx: click.Context, sheetfile: str, separator: str | None, lines: bool) -> None:
    """Compile a style sheet and print its class tokens in order."""
    config: WebStyleConfig = ctx.obj or WebStyleConfig()
    if lines:
        separator = "\n"
    if separator is not None:
        config = WebStyleConfig(
            separator=separator, strict=config.strict, log_level=config.log_level
        )

    tokens = compile_or_exit(load_sheet(sheetfile), strict=config.strict)
    click.echo(config.join(tokens))


@click.command()
@click.argument("sheetfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--tag", default="div", show_default=True, help="Element tag to render.")
@click.option("--text", default="", help="Text content of the element.")
@click.option("--class", "classes", multiple=True, help="Existing class on the element (repeatable).")
@click.pass_context
def render(
    ctx: click.Context, sheetfile: str, tag: str, text: str, classes: tuple[str, ...]
) -> None:
    """Render an element with the sheet's classes merged into it."""
    config: WebStyleConfig = ctx.obj or WebStyleConfig()
    tokens = compile_or_exit(load_sheet(sheetfile), strict=config.strict)
    element = Element(tag, classes=classes, children=(text,) if text else ())
    click.echo(Styled(element, tuple(tokens)).render())
