"""PySide6 application bootstrap: main window, shortcuts, run_app()."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QKeySequence, QShortcut
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QSplitter, QStatusBar

from leapnav.engine.controller import JumpController
from leapnav.engine.session import SearchSession
from leapnav.models.options import BIDIRECTIONAL, SearchOptions
from leapnav.ui.async_bridge import cancel_all_tasks, create_event_loop, schedule
from leapnav.ui.host import QtEditorHost
from leapnav.ui.query_box import QueryBox
from leapnav.ui.theme import build_stylesheet

if TYPE_CHECKING:
    from leapnav.config import Config

logger = logging.getLogger(__name__)

SHORTCUTS: tuple[tuple[str, SearchOptions], ...] = (
    ("Ctrl+;", SearchOptions.FORWARD),
    ("Ctrl+Shift+;", SearchOptions.BACKWARD),
    ("Ctrl+Alt+;", BIDIRECTIONAL | SearchOptions.ALL_EDITORS),
)


class LeapMainWindow(QMainWindow):
    """Editor groups side by side, with jump search bound to shortcuts."""

    def __init__(self, config: Config) -> None:
        super().__init__()
        self._config = config
        self.setWindowTitle("leapnav")
        self.setMinimumSize(900, 600)

        self._host = QtEditorHost(config)
        self._controller = JumpController(self._host, config=config, schedule=schedule)

        self._splitter = QSplitter(Qt.Orientation.Horizontal)
        self.setCentralWidget(self._splitter)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_label = QLabel("Ctrl+; jump forward  Ctrl+Shift+; backward  Ctrl+Alt+; all")
        self._status_bar.addWidget(self._status_label)

        for sequence, options in SHORTCUTS:
            shortcut = QShortcut(QKeySequence(sequence), self)
            shortcut.activated.connect(lambda o=options: self.start_search(o))

    @property
    def host(self) -> QtEditorHost:
        return self._host

    def open_files(self, paths: list[Path]) -> None:
        """Open each file in a group of its own."""
        for path in paths:
            group = self._host.new_group()
            self._host.add_editor(group, str(path.resolve()), _read_text(path), path.name)
            self._splitter.addWidget(group)

    def open_comparison(self, original: Path, modified: Path) -> None:
        group = self._host.new_group()
        self._host.add_comparison(
            group,
            (str(original.resolve()), _read_text(original)),
            (str(modified.resolve()), _read_text(modified)),
            f"{original.name} ↔ {modified.name}",
        )
        self._splitter.addWidget(group)

    def start_search(self, options: SearchOptions) -> SearchSession:
        box = QueryBox(self)
        session = self._controller.start(options, box)
        box.textChanged.connect(session.update)
        box.returnPressed.connect(session.accept)
        box.hidden.connect(session.on_hidden)
        box.popup(self)
        logger.debug("Started %s search", options)
        return session

    def closeEvent(self, event: QCloseEvent) -> None:
        self._controller.cancel()
        cancel_all_tasks()
        event.accept()
        app = QApplication.instance()
        if app is not None:
            app.quit()


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def run_app(
    config: Config,
    paths: list[Path],
    compare: tuple[Path, Path] | None = None,
    *,
    verbose: bool = False,
) -> None:
    """Entry point: create QApplication, event loop, main window, and run."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    app.setApplicationName("leapnav")
    app.setStyleSheet(build_stylesheet())

    loop = create_event_loop(app)

    window = LeapMainWindow(config)
    window.open_files(paths)
    if compare is not None:
        window.open_comparison(*compare)
    window.show()
    logger.info("Opened %d file(s)%s", len(paths), " and a comparison" if compare else "")

    with loop:
        loop.run_forever()
