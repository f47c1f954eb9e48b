"""Base class for model runners."""

from abc import ABC, abstractmethod


class BaseModelRunner(ABC):
    """Abstract base class for text-generation backends."""

    model: str

    @abstractmethod
    def run(self, prompt: str) -> str:
        """Send a prompt to the model and return its raw text reply.

        Args:
            prompt: The full prompt string.

        Returns:
            The raw response text, possibly empty.

        Raises:
            ModelNotFoundError: If the model or runtime is not available.
            ModelTimeoutError: If the request times out.
            LLMError: For other model-related errors.
        """
        pass
