"""Model runner module for commitflow.

This module sends prompts to a locally running language model.
The active model and host are configured in commitflow/config.py.
"""

from typing import Optional

from dotenv import load_dotenv

from commitflow.llm.base import BaseModelRunner
from commitflow.llm.exceptions import LLMError, ModelNotFoundError, ModelTimeoutError
from commitflow.llm.ollama_runner import OllamaRunner
from commitflow.llm.prompts import COMMIT_PROMPT, build_prompt

# Load environment variables from .env file
load_dotenv()


def get_runner(model: Optional[str] = None, host: Optional[str] = None) -> BaseModelRunner:
    """Get a model runner instance.

    Args:
        model: The model to use. Defaults to ACTIVE_MODEL from config.
        host: The Ollama base URL. Defaults to OLLAMA_HOST from config.

    Returns:
        An OllamaRunner instance.
    """
    return OllamaRunner(model=model, host=host)


# Export commonly used items
__all__ = [
    "BaseModelRunner",
    "LLMError",
    "ModelNotFoundError",
    "ModelTimeoutError",
    "OllamaRunner",
    "COMMIT_PROMPT",
    "build_prompt",
    "get_runner",
]
