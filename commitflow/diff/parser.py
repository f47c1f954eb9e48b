"""Unified diff parser.

Contains functions for turning unified diff text into hunks:
- parse_diff: Parse diff text into a list of Hunk objects
- parse_hunk_header: Extract the old/new start lines from an @@ header

The parser is line oriented and lenient. Numbers are assigned per sigil
(removed lines advance the old counter, added lines the new counter) and
hunk length fields are not validated against the body.
"""

import logging
import re
from typing import Optional

from commitflow.diff.models import DiffLine, Hunk, LineKind

logger = logging.getLogger(__name__)

# Format: @@ -old_start[,old_len] +new_start[,new_len] @@ optional context
HUNK_HEADER_RE = re.compile(r"@@ -(\d+)(?:,\d+)? \+(\d+)(?:,\d+)? @@")

# File header prefixes; these never carry line numbers
FILE_HEADER_PREFIXES = ("diff ", "index ", "--- ", "+++ ")


def parse_hunk_header(line: str) -> Optional[tuple[int, int]]:
    """Parse an @@ hunk header line.

    Args:
        line: A line starting with '@@'.

    Returns:
        Tuple of (old_start, new_start), or None if the line does not match.
    """
    match = HUNK_HEADER_RE.match(line)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def _split_lines(text: str) -> list[str]:
    """Split diff text into lines.

    CRLF is normalized and a single trailing newline is dropped, so text
    ending in '\\n' does not produce an extra empty context line.
    """
    text = text.replace("\r\n", "\n")
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def parse_diff(text: str) -> list[Hunk]:
    """Parse unified diff text into hunks.

    A hunk collects header lines followed by body lines. An @@ line starts
    the next hunk once the current hunk has its own @@ line or numbered body
    lines. File headers are never boundaries: they join the current hunk.
    Never raises: unrecognized lines are kept as context lines without line
    numbers.

    Args:
        text: Raw unified diff text.

    Returns:
        List of Hunk objects in input order.
    """
    hunks: list[Hunk] = []
    if not text:
        return hunks

    current: Optional[Hunk] = None
    # Whether the current hunk has an @@ line or numbered body lines
    started = False
    old_no = 0
    new_no = 0

    for line in _split_lines(text):
        if line.startswith("@@"):
            if current is None or started:
                current = Hunk()
                hunks.append(current)
            started = True
            header = parse_hunk_header(line)
            if header:
                old_no, new_no = header
            current.meta.append(line)
            continue

        if current is None:
            current = Hunk()
            hunks.append(current)

        if line.startswith(FILE_HEADER_PREFIXES):
            current.meta.append(line)
        elif line.startswith("+"):
            current.lines.append(DiffLine(LineKind.ADDED, line, new_line_number=new_no))
            new_no += 1
            started = True
        elif line.startswith("-"):
            current.lines.append(DiffLine(LineKind.REMOVED, line, old_line_number=old_no))
            old_no += 1
            started = True
        elif line.startswith(" ") or line == "":
            current.lines.append(
                DiffLine(LineKind.CONTEXT, line or " ", old_line_number=old_no, new_line_number=new_no)
            )
            old_no += 1
            new_no += 1
            started = True
        elif line.startswith("\\"):
            # "\ No newline at end of file"
            current.lines.append(DiffLine(LineKind.META, line))
        else:
            # Includes git extended headers such as "new file mode 100644"
            current.lines.append(DiffLine(LineKind.CONTEXT, line))

    logger.debug("Parsed %d hunk(s) from %d characters", len(hunks), len(text))
    return hunks
