"""Prompt template for commit message generation.

The model is asked for plain text; the sanitizer still handles replies
that ignore the instructions.
"""

from commitflow.config import DIFF_LIMIT

COMMIT_PROMPT = "\n".join(
    [
        "Write ONLY a Conventional Commits style message in English for this git diff.",
        "Rules:",
        "- Output plain text ONLY (no JSON, no code fences, no quotes, no backticks).",
        "- Format: <type>(<optional scope>): <title>",
        "- type ∈ {feat, fix, refactor, docs, test, chore, perf, build, ci}",
        "- Title ≤72 characters.",
        "- Optionally add 1–3 short body lines if needed.",
        "- Do NOT include explanations or metadata.",
        "",
        "Diff:",
        "",
    ]
)


def build_prompt(diff: str, truncated: bool, limit: int = DIFF_LIMIT) -> str:
    """Build the full prompt for a diff.

    Args:
        diff: The (possibly truncated) diff text.
        truncated: Whether the diff was cut to the character limit.
        limit: The limit the diff was cut to, quoted in the notice.

    Returns:
        The prompt string.
    """
    prompt = f"{COMMIT_PROMPT}{diff}"
    if truncated:
        return f"{prompt}\n\n[Diff truncated to {limit} characters]"
    return prompt
