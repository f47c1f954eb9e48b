"""Terminal presentation of rendered diff rows.

Lays rows out as `OLD NEW TEXT` columns and colors them like git diff:
- Red for removed lines (-)
- Green for added lines (+)
- Cyan for hunk headers (@@)
- Bold for diff/file header lines
- Dim for collapsed-run markers
"""

from typing import Optional

from commitflow.diff.models import DisplayRow, RenderOptions, RowKind

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"


def _number_width(rows: list[DisplayRow]) -> int:
    """Width of the widest line number, at least 3 characters."""
    numbers = [
        n
        for row in rows
        for n in (row.old_line_number, row.new_line_number)
        if n is not None
    ]
    if not numbers:
        return 3
    return max(3, len(str(max(numbers))))


def _color_for(row: DisplayRow) -> str:
    if row.kind is RowKind.ADDED:
        return GREEN
    if row.kind is RowKind.REMOVED:
        return RED
    if row.kind is RowKind.COLLAPSED:
        return DIM
    if row.kind is RowKind.META:
        if row.text.startswith("@@"):
            return CYAN
        if row.text.startswith(("diff ", "index ", "--- ", "+++ ")):
            return BOLD
    return ""


def format_row_text(row: DisplayRow) -> str:
    """Get the code column text for a row."""
    if row.is_collapsed:
        return f"... {row.hidden_count} unchanged lines hidden ..."
    return row.text


def format_rows(
    rows: list[DisplayRow],
    options: Optional[RenderOptions] = None,
    color: bool = True,
) -> str:
    """Format rendered rows for terminal output.

    Args:
        rows: Rows from render_hunks().
        options: Display options; only show_line_numbers is used here.
        color: Add ANSI color codes.

    Returns:
        The formatted text, one row per line.
    """
    options = options or RenderOptions()
    width = _number_width(rows)

    lines = []
    for row in rows:
        text = format_row_text(row)
        if options.show_line_numbers:
            old = "" if row.old_line_number is None else str(row.old_line_number)
            new = "" if row.new_line_number is None else str(row.new_line_number)
            text = f"{old:>{width}} {new:>{width}} {text}"

        code = _color_for(row) if color else ""
        lines.append(f"{code}{text}{RESET}" if code else text)
    return "\n".join(lines)
