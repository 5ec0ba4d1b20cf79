"""Landing the caret on a candidate, including inside comparison views."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from result import Err, Ok, Result

from leapnav.config import DEFAULT_CONFIG, Config
from leapnav.models.navigation import NavigationFailure
from leapnav.models.text import Position, Selection
from leapnav.models.views import ComparisonInput, HostCommand, ViewGroup

if TYPE_CHECKING:
    from leapnav.engine.protocols import EditorHostProtocol, TextViewProtocol
    from leapnav.models.candidate import Candidate

logger = logging.getLogger(__name__)


def _always_live() -> bool:
    return True


class ViewNavigator:
    """Focuses the view that owns a candidate and moves its caret there.

    Views with a display column are focused directly. A view without one is
    one side of a comparison tab: the host offers no way to activate a
    specific group or side, so the navigator cycles groups and switches
    sides, each loop bounded, until the host reports the right document.
    """

    def __init__(self, host: EditorHostProtocol, config: Config = DEFAULT_CONFIG) -> None:
        self._host = host
        self._max_side_switches = config.max_side_switches

    async def jump_to(
        self,
        candidate: Candidate,
        *,
        is_live: Callable[[], bool] = _always_live,
    ) -> Result[Position, NavigationFailure]:
        view = self._host.view(candidate.view_id)
        if view is None:
            return Err(NavigationFailure.TARGET_NOT_FOUND)
        if view.view_column is not None:
            if not is_live():
                return Err(NavigationFailure.SESSION_CANCELLED)
            self._host.focus_view(view)
            return Ok(self._place_caret(view, candidate))
        return await self._jump_into_comparison(view, candidate, is_live)

    async def _jump_into_comparison(
        self,
        view: TextViewProtocol,
        candidate: Candidate,
        is_live: Callable[[], bool],
    ) -> Result[Position, NavigationFailure]:
        groups = self._host.view_groups()
        target = _find_comparison_group(groups, view.document_id)
        if target is None:
            return Err(NavigationFailure.TARGET_NOT_FOUND)

        attempts = 0
        while self._host.active_group_id() != target.group_id:
            if attempts >= len(groups):
                return Err(NavigationFailure.GROUP_RESOLUTION_TIMEOUT)
            await self._host.execute_command(HostCommand.NEXT_GROUP)
            attempts += 1
            if not is_live():
                return Err(NavigationFailure.SESSION_CANCELLED)
        logger.debug("Reached group %s after %d cycle(s)", target.group_id, attempts)

        attempts = 0
        while self._host.active_document_id() != view.document_id:
            if attempts >= self._max_side_switches:
                return Err(NavigationFailure.SIDE_RESOLUTION_TIMEOUT)
            await self._host.execute_command(HostCommand.SWITCH_SIDE)
            attempts += 1
            if not is_live():
                return Err(NavigationFailure.SESSION_CANCELLED)

        if not is_live():
            return Err(NavigationFailure.SESSION_CANCELLED)
        return Ok(self._place_caret(view, candidate))

    @staticmethod
    def _place_caret(view: TextViewProtocol, candidate: Candidate) -> Position:
        view.set_selection(Selection.caret(candidate.start))
        return candidate.start


def _find_comparison_group(groups: list[ViewGroup], document_id: str) -> ViewGroup | None:
    for group in groups:
        active_input = group.active_input
        if isinstance(active_input, ComparisonInput) and active_input.includes(document_id):
            return group
    return None
