"""Shared utility functions for CLI commands."""

import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Optional

import typer

from commitflow import config
from commitflow.global_config import GlobalConfigError


def configure_logging(verbose: bool) -> None:
    """Send debug logs to stderr when --verbose is given."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def load_config_or_exit() -> None:
    """Load global configuration, exiting with an error if it is broken."""
    try:
        config.load_config()
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def read_input(path: Optional[Path], what: str = "diff") -> str:
    """Read text from a file, or from stdin when no file is given.

    Args:
        path: File to read, or None / "-" for stdin.
        what: Name of the content for error messages.

    Returns:
        The text read.

    Raises:
        typer.Exit: If the file cannot be read or stdin is a terminal.
    """
    if path is None or str(path) == "-":
        if sys.stdin.isatty():
            typer.echo(f"Error: No {what} given. Pass a file or pipe it on stdin.", err=True)
            raise typer.Exit(1)
        return sys.stdin.read()

    if not path.exists():
        typer.echo(f"Error: File not found: {path}", err=True)
        raise typer.Exit(1)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error reading {path}: {e}", err=True)
        raise typer.Exit(1)


def show_in_pager(text: str) -> None:
    """Display text in a scrollable pager.

    Uses the system pager (less) which supports arrow-key scrolling
    and q/Q to quit. Falls back to direct output if pager is unavailable.

    Args:
        text: The text to display.
    """
    # noinspection PyArgumentList
    less_path = shutil.which("less")
    if less_path:
        try:
            proc = subprocess.Popen(
                [less_path, "-R", "--quit-if-one-screen"],
                stdin=subprocess.PIPE,
                encoding="utf-8",
            )
            proc.communicate(input=text)
            return
        except (OSError, BrokenPipeError):
            pass

    typer.echo(text)
