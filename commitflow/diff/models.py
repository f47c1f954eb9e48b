"""Data models for the diff engine.

Contains:
- LineKind: Classification of a parsed diff line
- DiffLine: One logical line of a diff body
- Hunk: Header lines plus the body lines that follow them
- RowKind: Classification of a rendered display row
- DisplayRow: One display-ready row produced by the renderer
- RenderOptions: Display toggles for the renderer
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class LineKind(Enum):
    """Kinds of lines produced by the parser."""

    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"
    META = "meta"


class RowKind(Enum):
    """Kinds of rows produced by the renderer."""

    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"
    META = "meta"
    COLLAPSED = "collapsed"


@dataclass(frozen=True)
class DiffLine:
    """One logical line of a diff body.

    Attributes:
        kind: The line classification.
        text: The raw line, leading sigil included.
        old_line_number: Line number in the old file (removed/context lines).
        new_line_number: Line number in the new file (added/context lines).
    """

    kind: LineKind
    text: str
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None


@dataclass
class Hunk:
    """A group of header lines followed by body lines."""

    meta: list[str] = field(default_factory=list)
    lines: list[DiffLine] = field(default_factory=list)


@dataclass(frozen=True)
class DisplayRow:
    """One row of rendered output.

    Collapsed rows carry the hidden context lines so they can be expanded
    back into their original rows later.
    """

    kind: RowKind
    text: str
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None
    hidden: tuple[DiffLine, ...] = ()

    @property
    def hidden_count(self) -> int:
        return len(self.hidden)

    @property
    def is_collapsed(self) -> bool:
        return self.kind is RowKind.COLLAPSED

    @classmethod
    def from_line(cls, line: DiffLine) -> "DisplayRow":
        """Build a row for a parsed diff line."""
        return cls(
            kind=RowKind(line.kind.value),
            text=line.text,
            old_line_number=line.old_line_number,
            new_line_number=line.new_line_number,
        )


@dataclass(frozen=True)
class RenderOptions:
    """Display toggles for the renderer.

    Attributes:
        show_line_numbers: Show the old/new number columns. Numbers stay in
            the row data either way.
        collapse_context: Fold long runs of unchanged context lines.
    """

    show_line_numbers: bool = True
    collapse_context: bool = True
