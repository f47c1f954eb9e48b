"""Diff engine for commitflow.

This package parses unified diff text and renders it for display:
- models: LineKind, DiffLine, Hunk, RowKind, DisplayRow, RenderOptions
- parser: parse_diff, parse_hunk_header
- renderer: render_hunks, expand_collapsed, expand_all
- terminal: format_rows (ANSI-colored column layout)
"""

from commitflow.diff.models import (
    DiffLine,
    DisplayRow,
    Hunk,
    LineKind,
    RenderOptions,
    RowKind,
)
from commitflow.diff.parser import parse_diff, parse_hunk_header
from commitflow.diff.renderer import (
    COLLAPSE_THRESHOLD,
    COLLAPSE_WINDOW,
    expand_all,
    expand_collapsed,
    render_hunks,
)
from commitflow.diff.terminal import format_rows


__all__ = [
    # Models
    "DiffLine",
    "DisplayRow",
    "Hunk",
    "LineKind",
    "RenderOptions",
    "RowKind",
    # Parser
    "parse_diff",
    "parse_hunk_header",
    # Renderer
    "COLLAPSE_THRESHOLD",
    "COLLAPSE_WINDOW",
    "expand_all",
    "expand_collapsed",
    "render_hunks",
    # Terminal
    "format_rows",
]
