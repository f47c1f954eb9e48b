"""Configuration for commitflow.

Configuration is loaded from ~/.commitflow/config.yaml, with the
OLLAMA_HOST and COMMITFLOW_MODEL environment variables taking precedence.
Use 'commitflow config' commands to modify settings.
"""

import os


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.commitflow/config.yaml doesn't exist

DEFAULT_MODEL = "llama3.1:8b"
DEFAULT_OLLAMA_HOST = "http://localhost:11434"
DEFAULT_TIMEOUT = 120  # seconds
DEFAULT_FALLBACK_MESSAGE = "chore: update files"
CUSTOM_DIFF_FALLBACK_MESSAGE = "chore: test diff (manual input)"

# Diffs longer than this are cut before being sent to the model
DIFF_LIMIT = 100_000

DEFAULT_SHOW_LINE_NUMBERS = True
DEFAULT_COLLAPSE_CONTEXT = True

# Environment variables overriding the config file
MODEL_ENV_VAR = "COMMITFLOW_MODEL"
HOST_ENV_VAR = "OLLAMA_HOST"


# ============================================================
# ACTIVE CONFIGURATION (loaded from global config)
# ============================================================

# Initially set to defaults - will be overridden by load_config()
ACTIVE_MODEL = DEFAULT_MODEL
OLLAMA_HOST = DEFAULT_OLLAMA_HOST
TIMEOUT = DEFAULT_TIMEOUT
FALLBACK_MESSAGE = DEFAULT_FALLBACK_MESSAGE
SHOW_LINE_NUMBERS = DEFAULT_SHOW_LINE_NUMBERS
COLLAPSE_CONTEXT = DEFAULT_COLLAPSE_CONTEXT


def load_config() -> None:
    """Load configuration from the global config file and environment.

    This should be called by the CLI before using the model runner.
    """
    global ACTIVE_MODEL, OLLAMA_HOST, TIMEOUT, FALLBACK_MESSAGE
    global SHOW_LINE_NUMBERS, COLLAPSE_CONTEXT

    # Import here to avoid circular dependency
    from commitflow import global_config

    config = global_config.load_global_config()
    display = config.get("display") or {}

    if config.get("model"):
        ACTIVE_MODEL = config["model"]
    if config.get("host"):
        OLLAMA_HOST = config["host"]
    if config.get("timeout") is not None:
        TIMEOUT = config["timeout"]
    if config.get("fallback_message"):
        FALLBACK_MESSAGE = config["fallback_message"]
    if display.get("show_line_numbers") is not None:
        SHOW_LINE_NUMBERS = bool(display["show_line_numbers"])
    if display.get("collapse_context") is not None:
        COLLAPSE_CONTEXT = bool(display["collapse_context"])

    ACTIVE_MODEL = os.getenv(MODEL_ENV_VAR) or ACTIVE_MODEL
    OLLAMA_HOST = os.getenv(HOST_ENV_VAR) or OLLAMA_HOST
