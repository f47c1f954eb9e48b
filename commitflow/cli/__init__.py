"""CLI entry point for commitflow.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitflow.cli.config import config_app
from commitflow.cli.main import main_command
from commitflow.cli.message import message_command
from commitflow.cli.sanitize import sanitize_command
from commitflow.cli.show import show_command

# Main application
app = typer.Typer(
    name="commitflow",
    help="commitflow: commit messages from a local model, plus a readable diff viewer",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("message")(message_command)
app.command("show")(show_command)
app.command("sanitize")(sanitize_command)

# Set the main callback for global flags (--verbose, --version)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
    "message_command",
    "sanitize_command",
    "show_command",
]
