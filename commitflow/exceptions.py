"""Host-level exception classes.

Contains the exceptions raised around the diff engine and sanitizer:
- CommitFlowError: Base exception for commitflow errors
- EmptyDiffError: Raised when the supplied diff is blank
- GenerationInProgressError: Raised when a generation is already running
"""


class CommitFlowError(Exception):
    """Base exception for commitflow errors."""

    pass


class EmptyDiffError(CommitFlowError):
    """Raised when the diff content is empty."""

    pass


class GenerationInProgressError(CommitFlowError):
    """Raised when a new generation is requested while one is running."""

    pass
