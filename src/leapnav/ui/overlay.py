"""Label markers drawn over an editor viewport."""

from __future__ import annotations

from PySide6.QtWidgets import QLabel

from leapnav.models.text import Position
from leapnav.ui.editor import EditorView
from leapnav.ui.theme import label_style


class LabelOverlay(QLabel):
    """A label pinned over the characters right after an anchor occurrence."""

    def __init__(self, view: EditorView, position: Position, text: str) -> None:
        super().__init__(text, view.viewport())
        self._disposed = False
        self.setStyleSheet(label_style())
        self.setFont(view.font())
        self.adjustSize()
        rect = view.rect_at(position)
        self.move(rect.left(), rect.top())
        self.show()
        self.raise_()

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self.hide()
        self.deleteLater()
