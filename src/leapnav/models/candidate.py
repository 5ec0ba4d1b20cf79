"""Candidate jump targets."""

from __future__ import annotations

from dataclasses import dataclass

from leapnav.models.text import Position


@dataclass(frozen=True)
class Candidate:
    """One anchor occurrence in one view.

    Identity is the composite ``(view_id, line, start_column, end_column)``
    key. ``end_column`` is ``start_column`` plus the context length for
    ordinary occurrences and equals ``start_column`` for the end-of-line
    target emitted for all-space anchors.
    """

    view_id: str
    line: int
    start_column: int
    end_column: int

    @property
    def start(self) -> Position:
        return Position(self.line, self.start_column)

    @property
    def end(self) -> Position:
        return Position(self.line, self.end_column)

    @property
    def is_zero_width(self) -> bool:
        return self.start_column == self.end_column
