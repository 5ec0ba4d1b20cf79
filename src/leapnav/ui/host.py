"""Qt implementation of the editor host: groups of tabs holding editors."""

from __future__ import annotations

import logging
from itertools import count

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QTabWidget, QWidget

from leapnav.config import DEFAULT_CONFIG, Config
from leapnav.models.candidate import Candidate
from leapnav.models.text import Position
from leapnav.models.views import ComparisonInput, HostCommand, TabInput, TextInput, ViewGroup
from leapnav.ui.async_bridge import settle
from leapnav.ui.comparison import ComparisonPane
from leapnav.ui.editor import EditorView
from leapnav.ui.overlay import LabelOverlay

logger = logging.getLogger(__name__)


class EditorGroup(QTabWidget):
    """A tab group; each tab is an ``EditorView`` or a ``ComparisonPane``."""

    def __init__(self, group_id: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.group_id = group_id
        self.setDocumentMode(True)
        self.setTabsClosable(False)

    def active_input(self) -> TabInput | None:
        page = self.currentWidget()
        if isinstance(page, ComparisonPane):
            return ComparisonInput(
                original=page.original.document_id, modified=page.modified.document_id
            )
        if isinstance(page, EditorView):
            return TextInput(document_id=page.document_id)
        return None

    def visible_views(self) -> list[EditorView]:
        page = self.currentWidget()
        if isinstance(page, ComparisonPane):
            return list(page.sides)
        if isinstance(page, EditorView):
            return [page]
        return []

    def focused_view(self) -> EditorView | None:
        page = self.currentWidget()
        if isinstance(page, ComparisonPane):
            return page.focused_view()
        if isinstance(page, EditorView):
            return page
        return None

    def page_of(self, view: EditorView) -> QWidget | None:
        for index in range(self.count()):
            page = self.widget(index)
            if page is view:
                return page
            if isinstance(page, ComparisonPane) and view in page.sides:
                return page
        return None


class QtEditorHost:
    """Implements ``EditorHostProtocol`` over ``EditorGroup`` widgets.

    Focus is tracked from the editors themselves so the active view survives
    the query popup taking keyboard focus.
    """

    def __init__(self, config: Config = DEFAULT_CONFIG) -> None:
        self._config = config
        self._groups: list[EditorGroup] = []
        self._active_group: EditorGroup | None = None
        self._active_view: EditorView | None = None
        self._view_ids = count(1)

    @property
    def groups(self) -> list[EditorGroup]:
        return list(self._groups)

    def new_group(self, parent: QWidget | None = None) -> EditorGroup:
        group = EditorGroup(f"group-{len(self._groups) + 1}", parent)
        group.currentChanged.connect(lambda _index, g=group: self._on_tab_changed(g))
        self._groups.append(group)
        if self._active_group is None:
            self._active_group = group
        return group

    def add_editor(self, group: EditorGroup, document_id: str, text: str, title: str) -> EditorView:
        view = self._make_view(document_id, text, view_column=self._groups.index(group) + 1)
        group.addTab(view, title)
        return view

    def add_comparison(
        self,
        group: EditorGroup,
        original: tuple[str, str],
        modified: tuple[str, str],
        title: str,
    ) -> ComparisonPane:
        """Add a comparison tab from ``(document_id, text)`` pairs."""
        pane = ComparisonPane(
            self._make_view(*original, view_column=None),
            self._make_view(*modified, view_column=None),
        )
        group.addTab(pane, title)
        return pane

    # ── views ──

    def visible_views(self) -> list[EditorView]:
        views: list[EditorView] = []
        for group in self._groups:
            views.extend(group.visible_views())
        return views

    def active_view(self) -> EditorView | None:
        if self._active_view is not None and self._active_view in self.visible_views():
            return self._active_view
        if self._active_group is not None:
            return self._active_group.focused_view()
        return None

    def view(self, view_id: str) -> EditorView | None:
        for view in self.visible_views():
            if view.view_id == view_id:
                return view
        return None

    def focus_view(self, view: EditorView) -> None:
        for group in self._groups:
            page = group.page_of(view)
            if page is not None:
                group.setCurrentWidget(page)
                self._activate(group, view)
                view.setFocus(Qt.FocusReason.OtherFocusReason)
                return
        logger.debug("View %s is not in any group", view.view_id)

    # ── groups and commands ──

    def view_groups(self) -> list[ViewGroup]:
        return [
            ViewGroup(group_id=group.group_id, active_input=group.active_input())
            for group in self._groups
        ]

    def active_group_id(self) -> str | None:
        return self._active_group.group_id if self._active_group is not None else None

    def active_document_id(self) -> str | None:
        view = self.active_view()
        return view.document_id if view is not None else None

    async def execute_command(self, command: HostCommand) -> None:
        if command is HostCommand.NEXT_GROUP:
            self._focus_next_group()
        elif command is HostCommand.SWITCH_SIDE:
            self._switch_side()
        await settle()

    def _focus_next_group(self) -> None:
        if not self._groups:
            return
        current = -1
        if self._active_group is not None:
            current = self._groups.index(self._active_group)
        group = self._groups[(current + 1) % len(self._groups)]
        view = group.focused_view()
        if view is None:
            self._active_group = group
            self._active_view = None
            return
        self._activate(group, view)
        view.setFocus(Qt.FocusReason.OtherFocusReason)

    def _switch_side(self) -> None:
        group = self._active_group
        if group is None:
            return
        page = group.currentWidget()
        if isinstance(page, ComparisonPane):
            self._activate(group, page.switch_side())

    # ── overlays ──

    def create_overlay(self, view: EditorView, candidate: Candidate, label: str) -> LabelOverlay:
        column = candidate.start_column
        if not candidate.is_zero_width:
            column += self._config.anchor_len
        return LabelOverlay(view, Position(candidate.line, column), label)

    # ── focus tracking ──

    def _make_view(self, document_id: str, text: str, *, view_column: int | None) -> EditorView:
        view = EditorView(
            f"view-{next(self._view_ids)}", document_id, text, view_column=view_column
        )
        view.focused.connect(self._on_view_focused)
        return view

    def _on_view_focused(self, view: EditorView) -> None:
        for group in self._groups:
            if group.page_of(view) is not None:
                self._activate(group, view)
                return

    def _on_tab_changed(self, group: EditorGroup) -> None:
        if group is self._active_group:
            self._active_view = group.focused_view()

    def _activate(self, group: EditorGroup, view: EditorView) -> None:
        self._active_group = group
        self._active_view = view
