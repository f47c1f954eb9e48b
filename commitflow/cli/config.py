"""CLI commands for global configuration management."""

from typing import Optional

import typer

from commitflow import config, global_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitflow configuration in ~/.commitflow/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        cfg = global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if not global_config.is_configured():
        typer.echo("No configuration file found; using defaults.")
        typer.echo()

    display = cfg.get("display") or {}

    typer.echo("Current commitflow configuration (~/.commitflow/config.yaml):")
    typer.echo()
    typer.echo(f"  Model: {cfg.get('model', config.DEFAULT_MODEL)}")
    typer.echo(f"  Host: {cfg.get('host', config.DEFAULT_OLLAMA_HOST)}")
    typer.echo(f"  Timeout: {cfg.get('timeout', config.DEFAULT_TIMEOUT)}s")
    typer.echo(f"  Fallback Message: {cfg.get('fallback_message', config.DEFAULT_FALLBACK_MESSAGE)}")
    typer.echo(f"  Show Line Numbers: {display.get('show_line_numbers', config.DEFAULT_SHOW_LINE_NUMBERS)}")
    typer.echo(f"  Collapse Context: {display.get('collapse_context', config.DEFAULT_COLLAPSE_CONTEXT)}")
    typer.echo()


@config_app.command("set-model")
def config_set_model(
    model: str = typer.Argument(..., help="Ollama model name (e.g., llama3.1:8b)"),
) -> None:
    """Set the Ollama model used for generation."""
    try:
        global_config.set_model(model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Model set to {model}")


@config_app.command("set-host")
def config_set_host(
    host: str = typer.Argument(..., help="Ollama base URL (e.g., http://localhost:11434)"),
) -> None:
    """Set the Ollama server URL."""
    try:
        global_config.set_host(host)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Host set to {host.rstrip('/')}")


@config_app.command("set-display")
def config_set_display(
    line_numbers: Optional[bool] = typer.Option(
        None,
        "--line-numbers/--no-line-numbers",
        help="Show line numbers by default",
    ),
    collapse: Optional[bool] = typer.Option(
        None,
        "--collapse/--no-collapse",
        help="Collapse long unchanged context runs by default",
    ),
) -> None:
    """Set default diff display options."""
    if line_numbers is None and collapse is None:
        typer.echo("Nothing to set. Pass --line-numbers/--no-line-numbers or --collapse/--no-collapse.", err=True)
        raise typer.Exit(1)

    try:
        if line_numbers is not None:
            global_config.set_display_option("show_line_numbers", line_numbers)
            typer.echo(f"✓ show_line_numbers = {line_numbers}")
        if collapse is not None:
            global_config.set_display_option("collapse_context", collapse)
            typer.echo(f"✓ collapse_context = {collapse}")
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
