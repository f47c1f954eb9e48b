"""Commit message extraction and generation.

- models: DiffSource, CommitMessageResult
- sanitizer: sanitize_commit_message and its stages
- generator: load_custom_diff, resolve_commit_message, generate_commit_message,
             generate_commit_message_from_diff
"""

from commitflow.message.models import CommitMessageResult, DiffSource
from commitflow.message.sanitizer import (
    JSON_MESSAGE_FIELDS,
    extract_message_from_json,
    sanitize_commit_message,
    strip_code_fences,
    strip_empty_edges,
    strip_outer_quotes,
)
from commitflow.message.generator import (
    generate_commit_message,
    generate_commit_message_from_diff,
    load_custom_diff,
    resolve_commit_message,
)


__all__ = [
    # Models
    "CommitMessageResult",
    "DiffSource",
    # Sanitizer
    "JSON_MESSAGE_FIELDS",
    "extract_message_from_json",
    "sanitize_commit_message",
    "strip_code_fences",
    "strip_empty_edges",
    "strip_outer_quotes",
    # Generator
    "generate_commit_message",
    "generate_commit_message_from_diff",
    "load_custom_diff",
    "resolve_commit_message",
]
