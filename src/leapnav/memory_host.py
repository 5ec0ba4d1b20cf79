"""In-memory editor host: views over plain strings, for headless use and tests."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from leapnav.models.candidate import Candidate
from leapnav.models.text import LineRange, Position, Selection
from leapnav.models.views import ComparisonInput, HostCommand, TabInput, TextInput, ViewGroup

logger = logging.getLogger(__name__)


class MemoryView:
    """A text view over a list of lines with an optional viewport."""

    def __init__(
        self,
        view_id: str,
        text: str,
        *,
        document_id: str | None = None,
        view_column: int | None = 1,
        visible: list[LineRange] | None = None,
        caret: Position | None = None,
    ) -> None:
        self._view_id = view_id
        self._document_id = document_id or view_id
        self._view_column = view_column
        self.lines = text.split("\n")
        self.visible = visible
        self._selection = Selection.caret(caret or Position(0, 0))

    def __repr__(self) -> str:
        return f"MemoryView({self._view_id!r})"

    @property
    def view_id(self) -> str:
        return self._view_id

    @property
    def document_id(self) -> str:
        return self._document_id

    @property
    def view_column(self) -> int | None:
        return self._view_column

    def visible_line_ranges(self) -> list[LineRange]:
        if self.visible is not None:
            return list(self.visible)
        return [LineRange(0, len(self.lines) - 1)]

    def line_text(self, line: int) -> str:
        return self.lines[line]

    def selection(self) -> Selection:
        return self._selection

    def set_selection(self, selection: Selection) -> None:
        self._selection = selection


@dataclass
class MemoryOverlay:
    """Records the label a real host would draw."""

    view_id: str
    candidate: Candidate
    label: str
    disposed: bool = False
    dispose_calls: int = 0

    def dispose(self) -> None:
        self.dispose_calls += 1
        self.disposed = True


@dataclass
class MemoryGroup:
    """A view group: its tabs' views and which one is active.

    A comparison tab lists both sides in ``views``; ``side`` picks the one
    that currently has focus.
    """

    group_id: str
    views: list[MemoryView] = field(default_factory=list)
    comparison: bool = False
    side: int = 0

    @property
    def active_input(self) -> TabInput | None:
        if not self.views:
            return None
        if self.comparison and len(self.views) == 2:
            return ComparisonInput(
                original=self.views[0].document_id, modified=self.views[1].document_id
            )
        return TextInput(document_id=self.views[0].document_id)

    @property
    def focused_view(self) -> MemoryView | None:
        if not self.views:
            return None
        if self.comparison:
            return self.views[self.side % len(self.views)]
        return self.views[0]


class MemoryHost:
    """Implements ``EditorHostProtocol`` over in-memory groups."""

    def __init__(self, groups: list[MemoryGroup] | None = None) -> None:
        self.groups: list[MemoryGroup] = groups or []
        self.active_group_index: int | None = 0 if self.groups else None
        self.overlays: list[MemoryOverlay] = []
        self.commands: list[HostCommand] = []
        self.focus_requests: list[str] = []
        self.focus_lock = False

    @classmethod
    def single(cls, view: MemoryView) -> MemoryHost:
        return cls([MemoryGroup("group-1", [view])])

    @classmethod
    def from_views(cls, *views: MemoryView) -> MemoryHost:
        return cls([MemoryGroup(f"group-{n}", [view]) for n, view in enumerate(views, start=1)])

    # ── views ──

    def visible_views(self) -> list[MemoryView]:
        views: list[MemoryView] = []
        for group in self.groups:
            views.extend(group.views)
        return views

    def active_view(self) -> MemoryView | None:
        group = self._active_group()
        if group is None:
            return None
        return group.focused_view

    def view(self, view_id: str) -> MemoryView | None:
        for view in self.visible_views():
            if view.view_id == view_id:
                return view
        return None

    def focus_view(self, view: MemoryView) -> None:
        self.focus_requests.append(view.view_id)
        for index, group in enumerate(self.groups):
            if view in group.views:
                self.active_group_index = index
                if group.comparison:
                    group.side = group.views.index(view)
                return

    # ── groups and commands ──

    def view_groups(self) -> list[ViewGroup]:
        return [
            ViewGroup(group_id=group.group_id, active_input=group.active_input)
            for group in self.groups
        ]

    def active_group_id(self) -> str | None:
        group = self._active_group()
        return group.group_id if group is not None else None

    def active_document_id(self) -> str | None:
        view = self.active_view()
        return view.document_id if view is not None else None

    async def execute_command(self, command: HostCommand) -> None:
        self.commands.append(command)
        await asyncio.sleep(0)
        if self.focus_lock:
            logger.debug("Ignoring %s while focus is locked", command)
            return
        if command is HostCommand.NEXT_GROUP and self.groups:
            current = self.active_group_index or 0
            self.active_group_index = (current + 1) % len(self.groups)
        elif command is HostCommand.SWITCH_SIDE:
            group = self._active_group()
            if group is not None and group.comparison:
                group.side = (group.side + 1) % len(group.views)

    # ── overlays ──

    def create_overlay(self, view: MemoryView, candidate: Candidate, label: str) -> MemoryOverlay:
        overlay = MemoryOverlay(view.view_id, candidate, label)
        self.overlays.append(overlay)
        return overlay

    def live_overlays(self) -> list[MemoryOverlay]:
        return [overlay for overlay in self.overlays if not overlay.disposed]

    def _active_group(self) -> MemoryGroup | None:
        if self.active_group_index is None or not self.groups:
            return None
        return self.groups[self.active_group_index]


class MemoryQueryInput:
    """Query input stand-in that records when the session closed it."""

    def __init__(self) -> None:
        self.closed = False
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        self.closed = True
