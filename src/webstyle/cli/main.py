"""webstyle CLI entry point: Click group with subcommands."""

import logging

import click

from webstyle import __version__
from webstyle.config import WebStyleConfig


@click.group()
@click.version_option(version=__version__, prog_name="webstyle")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostic output on stderr.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Validate sheets before compiling, treating warnings as errors.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, strict: bool) -> None:
    """webstyle - compile typed style descriptors to utility-class tokens."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = WebStyleConfig(strict=strict, log_level=log_level.upper())


# Import and register subcommands
from webstyle.cli.compile import compile_cmd, render  # noqa: E402
from webstyle.cli.modifiers import modifiers  # noqa: E402
from webstyle.cli.validate import validate  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(render)
cli.add_command(validate)
cli.add_command(modifiers)
