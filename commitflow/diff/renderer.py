"""Diff renderer.

Turns parsed hunks into display rows. Long runs of unchanged context are
folded into a single collapsed row that keeps the hidden lines, so the
same parsed hunks can be re-rendered whenever the display options change.

Contains:
- render_hunks: Render hunks into DisplayRow objects
- expand_collapsed: Splice a collapsed row's hidden lines back in
- expand_all: Expand every collapsed row
"""

import logging
from typing import Iterable, Optional

from commitflow.diff.models import DiffLine, DisplayRow, Hunk, LineKind, RenderOptions, RowKind

logger = logging.getLogger(__name__)

# Context runs longer than this are collapsed
COLLAPSE_THRESHOLD = 20

# Rows kept visible at each end of a collapsed run
COLLAPSE_WINDOW = 3


def _flush_context_run(run: list[DiffLine], collapse: bool) -> list[DisplayRow]:
    """Render a run of consecutive context lines."""
    if collapse and len(run) > COLLAPSE_THRESHOLD:
        head = run[:COLLAPSE_WINDOW]
        hidden = run[COLLAPSE_WINDOW:-COLLAPSE_WINDOW]
        tail = run[-COLLAPSE_WINDOW:]
        rows = [DisplayRow.from_line(line) for line in head]
        rows.append(
            DisplayRow(
                kind=RowKind.COLLAPSED,
                text=f"{len(hidden)} unchanged lines",
                hidden=tuple(hidden),
            )
        )
        rows.extend(DisplayRow.from_line(line) for line in tail)
        return rows
    return [DisplayRow.from_line(line) for line in run]


def render_hunks(hunks: Iterable[Hunk], options: Optional[RenderOptions] = None) -> list[DisplayRow]:
    """Render parsed hunks into display rows.

    For each hunk, header lines come first, then the body in order. Runs of
    more than COLLAPSE_THRESHOLD context lines are folded into head rows, one
    collapsed row and tail rows when options.collapse_context is set.

    Args:
        hunks: Parsed hunks from parse_diff().
        options: Display options. Defaults to RenderOptions().

    Returns:
        List of DisplayRow objects.

    Raises:
        TypeError: If hunks is None.
    """
    if hunks is None:
        raise TypeError("render_hunks() requires a sequence of hunks, got None")
    options = options or RenderOptions()

    rows: list[DisplayRow] = []
    for hunk in hunks:
        rows.extend(DisplayRow(kind=RowKind.META, text=meta) for meta in hunk.meta)

        run: list[DiffLine] = []
        for line in hunk.lines:
            if line.kind is LineKind.CONTEXT:
                run.append(line)
                continue
            rows.extend(_flush_context_run(run, options.collapse_context))
            run = []
            rows.append(DisplayRow.from_line(line))
        rows.extend(_flush_context_run(run, options.collapse_context))

    logger.debug(
        "Rendered %d row(s) (line_numbers=%s, collapse=%s)",
        len(rows),
        options.show_line_numbers,
        options.collapse_context,
    )
    return rows


def expand_collapsed(rows: list[DisplayRow], index: int) -> list[DisplayRow]:
    """Replace the collapsed row at index with the rows it hides.

    Args:
        rows: Rendered rows.
        index: Position of a collapsed row.

    Returns:
        A new list of rows; the input list is not modified.

    Raises:
        IndexError: If index is out of range.
        ValueError: If the row at index is not a collapsed row.
    """
    row = rows[index]
    if not row.is_collapsed:
        raise ValueError(f"Row {index} is not a collapsed row (kind={row.kind.value})")
    expanded = [DisplayRow.from_line(line) for line in row.hidden]
    return rows[:index] + expanded + rows[index + 1:]


def expand_all(rows: list[DisplayRow]) -> list[DisplayRow]:
    """Expand every collapsed row in place order."""
    result: list[DisplayRow] = []
    for row in rows:
        if row.is_collapsed:
            result.extend(DisplayRow.from_line(line) for line in row.hidden)
        else:
            result.append(row)
    return result
