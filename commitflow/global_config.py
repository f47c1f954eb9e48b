"""Global configuration management for commitflow.

Handles user-level configuration stored in ~/.commitflow/config.yaml:
- model: Ollama model used for generation
- host: Base URL of the Ollama server
- timeout: Request timeout in seconds
- fallback_message: Message used when the model output is unusable
- display: Diff viewer defaults (show_line_numbers, collapse_context)
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".commitflow"


def get_global_config_dir() -> Path:
    """Get the global commitflow configuration directory.

    Returns:
        Path to ~/.commitflow/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.commitflow/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.commitflow/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.commitflow/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be read or parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}") from e

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Invalid config in {config_file}: expected a mapping")
    display = config.get("display")
    if display is not None and not isinstance(display, dict):
        raise GlobalConfigError(f"Invalid config in {config_file}: 'display' must be a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.commitflow/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}") from e


def get_active_model() -> Optional[str]:
    """Get the configured model name, or None if not set."""
    return load_global_config().get("model")


def set_model(model: str) -> None:
    """Set the Ollama model in global config.

    Args:
        model: Model name as known to Ollama (e.g., "llama3.1:8b").
    """
    config = load_global_config()
    config["model"] = model
    save_global_config(config)


def get_host() -> Optional[str]:
    """Get the configured Ollama host, or None if not set."""
    return load_global_config().get("host")


def set_host(host: str) -> None:
    """Set the Ollama base URL in global config.

    Args:
        host: Base URL (e.g., "http://localhost:11434").
    """
    config = load_global_config()
    config["host"] = host.rstrip("/")
    save_global_config(config)


def get_display_config() -> dict:
    """Get the diff display section from global config.

    Returns:
        Dictionary with display configuration.
    """
    return load_global_config().get("display") or {}


def set_display_option(name: str, value: bool) -> None:
    """Set a single diff display option.

    Args:
        name: Option name (show_line_numbers or collapse_context).
        value: New value.
    """
    config = load_global_config()
    if not config.get("display"):
        config["display"] = {}
    config["display"][name] = value
    save_global_config(config)


def is_configured() -> bool:
    """Check if commitflow has a config file.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
