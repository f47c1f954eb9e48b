"""Model runner exception classes.

Contains all exception classes for model runner operations:
- LLMError: Base exception for model-related errors
- ModelNotFoundError: Raised when the model or runtime is not available
- ModelTimeoutError: Raised when the model does not answer in time
"""


class LLMError(Exception):
    """Base exception for model-related errors."""

    pass


class ModelNotFoundError(LLMError):
    """Raised when the requested model is not installed or the runtime is missing."""

    pass


class ModelTimeoutError(LLMError):
    """Raised when the model request times out."""

    pass
