"""Popup line edit the user types the live query into."""

from __future__ import annotations

from PySide6.QtCore import QPoint, Qt, Signal
from PySide6.QtGui import QHideEvent, QKeyEvent
from PySide6.QtWidgets import QLineEdit, QWidget

from leapnav.ui.theme import query_box_style


class QueryBox(QLineEdit):
    """Frameless popup; ``textChanged`` and ``returnPressed`` drive a session.

    Escape, clicking elsewhere or closing the popup all emit ``hidden``.
    """

    hidden = Signal()

    def __init__(self, parent: QWidget | None = None, placeholder: str = "Jump to…") -> None:
        super().__init__(parent)
        self._closed = False
        self.setWindowFlags(Qt.WindowType.Popup | Qt.WindowType.FramelessWindowHint)
        self.setPlaceholderText(placeholder)
        self.setStyleSheet(query_box_style())
        self.setFixedWidth(240)

    def popup(self, anchor: QWidget) -> None:
        """Show the box centered near the top of ``anchor``."""
        top_left = anchor.mapToGlobal(QPoint(0, 0))
        x = top_left.x() + (anchor.width() - self.width()) // 2
        self.move(x, top_left.y() + 48)
        self.show()
        self.setFocus(Qt.FocusReason.PopupFocusReason)

    def close(self) -> None:  # type: ignore[override]
        if self._closed:
            return
        self._closed = True
        self.blockSignals(True)
        self.hide()
        self.deleteLater()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Escape:
            self.hide()
            return
        super().keyPressEvent(event)

    def hideEvent(self, event: QHideEvent) -> None:
        super().hideEvent(event)
        self.hidden.emit()
