"""Protocol definitions for the host an engine session runs inside."""

from __future__ import annotations

from typing import Protocol

from leapnav.models.candidate import Candidate
from leapnav.models.text import LineRange, Selection
from leapnav.models.views import HostCommand, ViewGroup


class TextViewProtocol(Protocol):
    """A text view the user can see and jump into."""

    @property
    def view_id(self) -> str: ...

    @property
    def document_id(self) -> str: ...

    @property
    def view_column(self) -> int | None:
        """Display column of the view, or None when the host cannot tell."""
        ...

    def visible_line_ranges(self) -> list[LineRange]: ...

    def line_text(self, line: int) -> str: ...

    def selection(self) -> Selection: ...

    def set_selection(self, selection: Selection) -> None: ...


class OverlayProtocol(Protocol):
    """A rendered label marker. ``dispose`` must be safe to call twice."""

    def dispose(self) -> None: ...


class QueryInputProtocol(Protocol):
    """The live query box. ``close`` stops further notifications."""

    def close(self) -> None: ...


class EditorHostProtocol(Protocol):
    """Interface for view enumeration, focus, commands and overlays."""

    def visible_views(self) -> list[TextViewProtocol]: ...

    def active_view(self) -> TextViewProtocol | None: ...

    def view(self, view_id: str) -> TextViewProtocol | None: ...

    def focus_view(self, view: TextViewProtocol) -> None: ...

    def view_groups(self) -> list[ViewGroup]: ...

    def active_group_id(self) -> str | None: ...

    def active_document_id(self) -> str | None: ...

    async def execute_command(self, command: HostCommand) -> None: ...

    def create_overlay(
        self, view: TextViewProtocol, candidate: Candidate, label: str
    ) -> OverlayProtocol: ...
