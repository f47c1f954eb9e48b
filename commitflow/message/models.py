"""Data models for commit message generation.

Contains Pydantic models passed between the host and the generator:
- DiffSource: A diff handed over by a diff provider
- CommitMessageResult: The outcome of one generation
"""

from typing import Literal

from pydantic import BaseModel, computed_field

DiffContext = Literal["staged", "custom"]
MessageSource = Literal["model", "fallback"]


class DiffSource(BaseModel):
    """A diff supplied to the generator.

    Attributes:
        diff: Unified diff text, already cut to the character limit.
        truncated: Whether the diff was cut.
        context: Where the diff came from.
    """

    diff: str
    truncated: bool = False
    context: DiffContext = "custom"


class CommitMessageResult(BaseModel):
    """Result of a commit message generation."""

    message: str
    raw: str
    source: MessageSource
    model: str
    truncated_diff: bool = False
    diff: str = ""
    context: DiffContext = "custom"

    @computed_field
    @property
    def used_fallback(self) -> bool:
        return self.source == "fallback"
