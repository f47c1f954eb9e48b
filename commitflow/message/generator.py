"""Commit message generation.

Contains:
- load_custom_diff: Wrap user-supplied diff text as a DiffSource
- resolve_commit_message: Pick the sanitized message or a fallback
- generate_commit_message: Prompt the model and clean up its reply
- generate_commit_message_from_diff: Same, starting from raw diff text
"""

import logging
from typing import Optional

from commitflow import config
from commitflow.exceptions import EmptyDiffError
from commitflow.llm import BaseModelRunner, build_prompt, get_runner
from commitflow.message.models import CommitMessageResult, DiffSource
from commitflow.message.sanitizer import sanitize_commit_message

logger = logging.getLogger(__name__)


def load_custom_diff(text: str, limit: int = config.DIFF_LIMIT) -> DiffSource:
    """Wrap diff text supplied by the user, cutting it to the limit.

    Args:
        text: The diff text.
        limit: Maximum number of characters kept.

    Returns:
        A DiffSource with context "custom".

    Raises:
        EmptyDiffError: If the text is blank.
    """
    if not text or not text.strip():
        raise EmptyDiffError("Diff content is empty.")

    truncated = len(text) > limit
    return DiffSource(
        diff=text[:limit] if truncated else text,
        truncated=truncated,
        context="custom",
    )


def resolve_commit_message(raw: Optional[str], fallback: Optional[str] = None) -> tuple[str, bool]:
    """Choose the final commit message for a raw model reply.

    Args:
        raw: The raw model output.
        fallback: Message to use when the output is unusable.

    Returns:
        Tuple of (message, used_fallback). When the reply is unusable the
        fallback is returned verbatim if non-blank, otherwise
        DEFAULT_FALLBACK_MESSAGE.
    """
    sanitized = sanitize_commit_message(raw)
    if sanitized:
        return sanitized, False

    if fallback and fallback.strip():
        return fallback, True
    return config.DEFAULT_FALLBACK_MESSAGE, True


def generate_commit_message(
    source: DiffSource,
    runner: Optional[BaseModelRunner] = None,
    fallback_message: Optional[str] = None,
) -> CommitMessageResult:
    """Generate a commit message for a diff.

    Args:
        source: The diff to describe.
        runner: Model runner to use. Defaults to get_runner().
        fallback_message: Message used when the model output is unusable.
            Defaults to FALLBACK_MESSAGE from config.

    Returns:
        A CommitMessageResult.

    Raises:
        EmptyDiffError: If the diff is blank.
        LLMError: If the model call fails.
    """
    if not source.diff.strip():
        raise EmptyDiffError("Unable to read diff: content is empty.")

    runner = runner or get_runner()
    if fallback_message is None:
        fallback_message = config.FALLBACK_MESSAGE

    prompt = build_prompt(source.diff, source.truncated)
    raw = runner.run(prompt)
    message, used_fallback = resolve_commit_message(raw, fallback_message)

    if used_fallback:
        logger.info("Model output was unusable; using fallback message")

    return CommitMessageResult(
        message=message,
        raw=raw,
        source="fallback" if used_fallback else "model",
        model=runner.model,
        truncated_diff=source.truncated,
        diff=source.diff,
        context=source.context,
    )


def generate_commit_message_from_diff(
    diff_text: str,
    runner: Optional[BaseModelRunner] = None,
    fallback_message: Optional[str] = None,
) -> CommitMessageResult:
    """Generate a commit message for diff text supplied by the user.

    Args:
        diff_text: Raw diff text; cut to DIFF_LIMIT if longer.
        runner: Model runner to use. Defaults to get_runner().
        fallback_message: Message used when the model output is unusable.
            Defaults to CUSTOM_DIFF_FALLBACK_MESSAGE.

    Returns:
        A CommitMessageResult with context "custom".
    """
    source = load_custom_diff(diff_text)
    if not (fallback_message and fallback_message.strip()):
        fallback_message = config.CUSTOM_DIFF_FALLBACK_MESSAGE
    return generate_commit_message(source, runner=runner, fallback_message=fallback_message)
