"""Plain-text editor widget exposing the text view interface."""

from __future__ import annotations

from PySide6.QtCore import QRect, Signal
from PySide6.QtGui import QFocusEvent, QTextCursor
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from leapnav.models.text import LineRange, Position, Selection


class EditorView(QPlainTextEdit):
    """A ``QPlainTextEdit`` that reports its viewport, caret and identity."""

    focused = Signal(object)  # EditorView

    def __init__(
        self,
        view_id: str,
        document_id: str,
        text: str,
        *,
        view_column: int | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._view_id = view_id
        self._document_id = document_id
        self._view_column = view_column
        self.setPlainText(text)
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)

    @property
    def view_id(self) -> str:
        return self._view_id

    @property
    def document_id(self) -> str:
        return self._document_id

    @property
    def view_column(self) -> int | None:
        return self._view_column

    def set_view_column(self, column: int | None) -> None:
        self._view_column = column

    def visible_line_ranges(self) -> list[LineRange]:
        """Runs of visible blocks that intersect the viewport."""
        ranges: list[LineRange] = []
        height = self.viewport().height()
        offset = self.contentOffset()
        block = self.firstVisibleBlock()
        run_start: int | None = None
        last = -1
        while block.isValid():
            top = self.blockBoundingGeometry(block).translated(offset).top()
            if top > height:
                break
            if block.isVisible():
                if run_start is None:
                    run_start = block.blockNumber()
                last = block.blockNumber()
            elif run_start is not None:
                ranges.append(LineRange(run_start, last))
                run_start = None
            block = block.next()
        if run_start is not None:
            ranges.append(LineRange(run_start, last))
        return ranges

    def line_text(self, line: int) -> str:
        return self.document().findBlockByNumber(line).text()

    def selection(self) -> Selection:
        cursor = self.textCursor()
        return Selection(self._position(cursor.anchor()), self._position(cursor.position()))

    def set_selection(self, selection: Selection) -> None:
        cursor = QTextCursor(self.document())
        cursor.setPosition(self._offset(selection.anchor))
        cursor.setPosition(self._offset(selection.active), QTextCursor.MoveMode.KeepAnchor)
        self.setTextCursor(cursor)
        self.ensureCursorVisible()

    def rect_at(self, position: Position) -> QRect:
        """Viewport rectangle of the character cell at ``position``."""
        cursor = QTextCursor(self.document())
        cursor.setPosition(self._offset(position))
        return self.cursorRect(cursor)

    def focusInEvent(self, event: QFocusEvent) -> None:
        super().focusInEvent(event)
        self.focused.emit(self)

    def _position(self, offset: int) -> Position:
        block = self.document().findBlock(offset)
        return Position(block.blockNumber(), offset - block.position())

    def _offset(self, position: Position) -> int:
        block = self.document().findBlockByNumber(position.line)
        if not block.isValid():
            return max(self.document().characterCount() - 1, 0)
        return block.position() + min(position.column, block.length() - 1)
