"""Ollama runner implementation.

Sends a single non-streaming request to the Ollama HTTP API
(POST /api/generate) and returns the raw response text.
"""

import logging
from typing import Optional

import requests

from commitflow import config
from commitflow.llm.base import BaseModelRunner
from commitflow.llm.exceptions import LLMError, ModelNotFoundError, ModelTimeoutError

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"


def normalize_host(host: str) -> str:
    """Normalize an Ollama host value to a base URL.

    OLLAMA_HOST is often given without a scheme (e.g., "127.0.0.1:11434").
    """
    host = host.strip().rstrip("/")
    if "://" not in host:
        host = f"http://{host}"
    return host


class OllamaRunner(BaseModelRunner):
    """Model runner backed by a local Ollama server."""

    def __init__(
        self,
        model: Optional[str] = None,
        host: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the Ollama runner.

        Args:
            model: The model to use. Defaults to ACTIVE_MODEL from config.
            host: Ollama base URL. Defaults to OLLAMA_HOST from config.
            timeout: Request timeout in seconds. Defaults to TIMEOUT from config.
        """
        self.model = model or config.ACTIVE_MODEL
        self.host = normalize_host(host or config.OLLAMA_HOST)
        self.timeout = timeout if timeout is not None else config.TIMEOUT

    @property
    def generate_url(self) -> str:
        return f"{self.host}{GENERATE_PATH}"

    def run(self, prompt: str) -> str:
        """Generate a reply with Ollama.

        Args:
            prompt: The full prompt string.

        Returns:
            The raw "response" field of the Ollama reply.

        Raises:
            ModelNotFoundError: If Ollama does not know the model.
            ModelTimeoutError: If the request times out.
            LLMError: For connection failures and malformed replies.
        """
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
        }
        logger.debug("POST %s model=%s prompt_chars=%d", self.generate_url, self.model, len(prompt))

        try:
            response = requests.post(self.generate_url, json=payload, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise ModelTimeoutError(
                f"Ollama did not respond within {self.timeout} seconds: {e}"
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise LLMError(
                f"Cannot reach Ollama at {self.host}. Is 'ollama serve' running?\n{e}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise LLMError(f"Ollama request failed: {e}") from e

        if response.status_code == 404:
            raise ModelNotFoundError(
                f"Model '{self.model}' not found on {self.host}. "
                f"Pull it first with: ollama pull {self.model}"
            )

        try:
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.HTTPError as e:
            raise LLMError(f"Ollama returned an error: {e}") from e
        except ValueError as e:
            raise LLMError(f"Ollama returned a non-JSON reply: {e}") from e

        if not isinstance(data, dict):
            raise LLMError(f"Unexpected Ollama reply: {data!r}")
        if data.get("error"):
            raise LLMError(f"Ollama error: {data['error']}")

        raw = data.get("response") or ""
        logger.debug("Ollama replied with %d characters", len(raw))
        return raw
