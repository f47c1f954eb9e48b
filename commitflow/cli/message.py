"""CLI command for generating a commit message from a diff."""

from pathlib import Path
from typing import Optional

import typer

from commitflow import config
from commitflow.cli.utils import load_config_or_exit, read_input
from commitflow.exceptions import EmptyDiffError
from commitflow.llm import LLMError, ModelNotFoundError, ModelTimeoutError, get_runner
from commitflow.message import generate_commit_message, load_custom_diff


def message_command(
    diff_file: Optional[Path] = typer.Argument(
        None,
        help="File containing a unified diff (reads stdin if omitted or '-')",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Ollama model to use (overrides config)",
    ),
    fallback: Optional[str] = typer.Option(
        None,
        "--fallback",
        "-f",
        help="Message to use when the model output is unusable",
    ),
    staged: bool = typer.Option(
        False,
        "--staged",
        help="Mark the input as staged changes (e.g., piped from 'git diff --cached')",
    ),
    show_raw: bool = typer.Option(
        False,
        "--raw",
        help="Also print the raw model output to stderr",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the full result as JSON",
    ),
) -> None:
    """Generate a commit message for a diff with a local Ollama model."""
    load_config_or_exit()

    text = read_input(diff_file, "diff")

    try:
        source = load_custom_diff(text, limit=config.DIFF_LIMIT)
        if staged:
            source = source.model_copy(update={"context": "staged"})

        if source.truncated:
            typer.echo(
                f"Warning: Diff truncated to {config.DIFF_LIMIT} characters before sending to the model.",
                err=True,
            )

        runner = get_runner(model=model)
        typer.echo(f"Generating commit message with {runner.model}...", err=True)

        if fallback is None and source.context == "custom":
            fallback = config.CUSTOM_DIFF_FALLBACK_MESSAGE
        result = generate_commit_message(source, runner=runner, fallback_message=fallback)

    except EmptyDiffError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except ModelNotFoundError as e:
        typer.echo(f"Model error: {e}", err=True)
        raise typer.Exit(1)
    except ModelTimeoutError as e:
        typer.echo(f"Timeout: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    if show_raw:
        typer.echo("\n[RAW MODEL OUTPUT]", err=True)
        typer.echo(result.raw or "(empty)", err=True)
        typer.echo("", err=True)

    if result.used_fallback:
        typer.echo("Fallback message used (model output was empty).", err=True)

    typer.echo(result.message)
