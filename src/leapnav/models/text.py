"""Positions, selections and line ranges inside a text view."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line/column pair, ordered by line then column."""

    line: int
    column: int


@dataclass(frozen=True)
class Selection:
    """A selection between ``anchor`` and ``active`` (the caret side)."""

    anchor: Position
    active: Position

    @classmethod
    def caret(cls, position: Position) -> Selection:
        return cls(position, position)

    @property
    def start(self) -> Position:
        return min(self.anchor, self.active)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.active)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active


@dataclass(frozen=True)
class LineRange:
    """Inclusive range of line numbers, as reported for a visible viewport."""

    start: int
    end: int

    def lines(self) -> range:
        return range(self.start, self.end + 1)
