"""Main CLI callback: global flags shared by every command."""

import typer

from commitflow import __version__
from commitflow.cli.utils import configure_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitflow {__version__}")
        raise typer.Exit(0)


def main_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print debug logs to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate commit messages with a local model and review diffs in the terminal."""
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)
