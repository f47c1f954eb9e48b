"""CLI command for cleaning up raw model output."""

from pathlib import Path
from typing import Optional

import typer

from commitflow.cli.utils import read_input
from commitflow.message import resolve_commit_message


def sanitize_command(
    raw_file: Optional[Path] = typer.Argument(
        None,
        help="File containing raw model output (reads stdin if omitted or '-')",
    ),
    fallback: Optional[str] = typer.Option(
        None,
        "--fallback",
        "-f",
        help="Message to print when nothing usable can be extracted",
    ),
) -> None:
    """Extract a clean commit message from raw model output."""
    raw = read_input(raw_file, "model output")

    message, used_fallback = resolve_commit_message(raw, fallback)
    if used_fallback:
        typer.echo("No usable message in the input; using fallback.", err=True)

    typer.echo(message)
