"""Side-by-side comparison tab."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QSplitter, QVBoxLayout, QWidget

from leapnav.ui.editor import EditorView


class ComparisonPane(QWidget):
    """Two editors, original on the left and modified on the right.

    Neither side has a display column of its own; the pane remembers which
    side last had focus and can hand focus to the other one.
    """

    def __init__(
        self, original: EditorView, modified: EditorView, parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._sides = (original, modified)
        self._active_side = 0

        splitter = QSplitter(Qt.Orientation.Horizontal)
        for side in self._sides:
            side.set_view_column(None)
            side.focused.connect(self._on_side_focused)
            splitter.addWidget(side)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(splitter)

    @property
    def sides(self) -> tuple[EditorView, EditorView]:
        return self._sides

    @property
    def original(self) -> EditorView:
        return self._sides[0]

    @property
    def modified(self) -> EditorView:
        return self._sides[1]

    def focused_view(self) -> EditorView:
        return self._sides[self._active_side]

    def switch_side(self) -> EditorView:
        self._active_side = 1 - self._active_side
        view = self.focused_view()
        view.setFocus(Qt.FocusReason.OtherFocusReason)
        return view

    def _on_side_focused(self, view: EditorView) -> None:
        self._active_side = self._sides.index(view)
