"""CLI command for viewing a diff with line numbers and collapsed context."""

from pathlib import Path
from typing import Optional

import typer

from commitflow import config
from commitflow.cli.utils import load_config_or_exit, read_input, show_in_pager
from commitflow.diff import RenderOptions, format_rows, parse_diff, render_hunks


def show_command(
    diff_file: Optional[Path] = typer.Argument(
        None,
        help="File containing a unified diff (reads stdin if omitted or '-')",
    ),
    line_numbers: Optional[bool] = typer.Option(
        None,
        "--line-numbers/--no-line-numbers",
        "-n/-N",
        help="Show old/new line number columns (default from config)",
    ),
    collapse: Optional[bool] = typer.Option(
        None,
        "--collapse/--no-collapse",
        help="Fold long runs of unchanged context lines (default from config)",
    ),
    color: bool = typer.Option(
        True,
        "--color/--no-color",
        help="Colorize output like git diff",
    ),
    pager: bool = typer.Option(
        False,
        "--pager",
        "-p",
        help="Show the diff in a scrollable pager",
    ),
) -> None:
    """Render a unified diff for review."""
    load_config_or_exit()

    text = read_input(diff_file, "diff")

    options = RenderOptions(
        show_line_numbers=config.SHOW_LINE_NUMBERS if line_numbers is None else line_numbers,
        collapse_context=config.COLLAPSE_CONTEXT if collapse is None else collapse,
    )

    hunks = parse_diff(text)
    if not hunks:
        typer.echo("No diff content.", err=True)
        raise typer.Exit(1)

    rows = render_hunks(hunks, options)
    output = format_rows(rows, options, color=color)

    if pager:
        show_in_pager(output)
    else:
        typer.echo(output)

    collapsed = sum(row.hidden_count for row in rows if row.is_collapsed)
    if options.collapse_context and collapsed > 0:
        typer.echo(f"({collapsed} unchanged lines hidden; use --no-collapse to show them)", err=True)
