"""Cleanup of raw model output into a commit message.

Local models wrap their answer in code fences, JSON objects or quotes
despite being told not to. Each stage below peels off one kind of
wrapping and hands its output to the next one:
- strip_empty_edges: Drop blank leading/trailing lines and trailing spaces
- strip_code_fences: Drop one opening and one closing ``` line
- extract_message_from_json: Pull the message out of a JSON reply
- strip_outer_quotes: Drop quote characters around the message
- sanitize_commit_message: Run the whole pipeline
"""

import json
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

# Object fields that may hold the message, tried in order
JSON_MESSAGE_FIELDS = ("message", "commit", "response", "text", "content")

# Straight, curly and guillemet quotes plus backticks
_QUOTE_CHARS = "`\"'“”‘’«»"
_LEADING_QUOTES_RE = re.compile(f"^[{_QUOTE_CHARS}]+")
_TRAILING_QUOTES_RE = re.compile(f"[{_QUOTE_CHARS}]+$")

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def strip_empty_edges(value: str) -> str:
    """Drop blank lines at both ends and trailing whitespace on every line.

    Args:
        value: The text to clean.

    Returns:
        The cleaned text, or an empty string if nothing remains.
    """
    lines = _LINE_SPLIT_RE.split(value)
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(line.rstrip() for line in lines)


def _is_fence(line: str) -> bool:
    return line.strip().startswith("```")


def strip_code_fences(value: str) -> str:
    """Drop a ``` line at the start and at the end of the text.

    Only the outermost fence is removed; fences inside the text stay.
    """
    lines = _LINE_SPLIT_RE.split(value)
    if lines and _is_fence(lines[0]):
        lines = lines[1:]
    if lines and _is_fence(lines[-1]):
        lines = lines[:-1]
    return "\n".join(lines)


def strip_outer_quotes(value: str) -> str:
    """Remove runs of quote characters from both ends of the text."""
    value = _LEADING_QUOTES_RE.sub("", value)
    return _TRAILING_QUOTES_RE.sub("", value)


def extract_message_from_json(value: str) -> Optional[str]:
    """Extract the commit message from a JSON reply.

    A JSON string is used as is. For a JSON object, the first field from
    JSON_MESSAGE_FIELDS holding a non-blank string is used.

    Args:
        value: Text that may be a JSON document.

    Returns:
        The trimmed message, or None if the text is not usable JSON.
    """
    try:
        parsed = json.loads(value)
    except (ValueError, RecursionError):
        logger.debug("Model output looked like JSON but failed to parse")
        return None

    if isinstance(parsed, str):
        return parsed.strip()

    if isinstance(parsed, dict):
        for field in JSON_MESSAGE_FIELDS:
            candidate = parsed.get(field)
            if isinstance(candidate, str) and candidate.strip():
                return candidate.strip()

    return None


def sanitize_commit_message(raw: Optional[str]) -> Optional[str]:
    """Turn raw model output into a clean commit message.

    Args:
        raw: The raw text returned by the model.

    Returns:
        The cleaned message, or None if nothing usable is left.
    """
    if not raw:
        return None

    text = strip_empty_edges(raw)
    if not text:
        return None

    text = strip_code_fences(text).strip()
    if not text:
        return None

    if text.lstrip().startswith("{"):
        from_json = extract_message_from_json(text)
        if from_json:
            text = from_json

    text = strip_outer_quotes(text)
    text = strip_empty_edges(text)

    if not text:
        logger.debug("Model output was empty after sanitizing")
        return None
    return text
