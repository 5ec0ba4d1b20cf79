"""The search session state machine."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from enum import StrEnum
from typing import TYPE_CHECKING, Any, TypeAlias

from result import Err

from leapnav.config import DEFAULT_CONFIG, Config
from leapnav.engine.filter import MatchFilter
from leapnav.engine.index import MatchIndex
from leapnav.engine.navigator import ViewNavigator
from leapnav.engine.scanner import is_case_sensitive, relevant_views
from leapnav.models.options import SearchOptions, validate_options

if TYPE_CHECKING:
    from leapnav.engine.protocols import EditorHostProtocol, QueryInputProtocol
    from leapnav.models.candidate import Candidate
    from leapnav.models.text import Position

logger = logging.getLogger(__name__)

JumpTask: TypeAlias = "asyncio.Future[Position | None]"
Scheduler: TypeAlias = "Callable[[Coroutine[Any, Any, Position | None]], JumpTask]"


def run_or_schedule(coro: Coroutine[Any, Any, Position | None]) -> JumpTask:
    """Schedule ``coro`` on the running loop, or run it to completion if none is running."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        loop = asyncio.new_event_loop()
        try:
            task = loop.create_task(coro)
            loop.run_until_complete(task)
        finally:
            loop.close()
        return task
    return asyncio.ensure_future(coro)


class SessionState(StrEnum):
    IDLE = "idle"
    SCANNING = "scanning"
    NARROWING = "narrowing"
    JUMPED = "jumped"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.JUMPED, SessionState.CANCELLED)


class SearchSession:
    """One interactive search, from the first keystroke to jump or cancel.

    ``update`` runs synchronously for every query change: it rebuilds the
    index when the anchor changes, narrows the candidates and diffs the
    overlays. A single remaining match jumps immediately. Navigation runs as
    a scheduled task after the session has disposed its input and overlays;
    ``cancel`` makes that task stop before it touches a caret.
    """

    def __init__(
        self,
        host: EditorHostProtocol,
        options: SearchOptions,
        *,
        config: Config = DEFAULT_CONFIG,
        query_input: QueryInputProtocol | None = None,
        navigator: ViewNavigator | None = None,
        schedule: Scheduler | None = None,
    ) -> None:
        self._host = host
        self._options = validate_options(options)
        self._config = config
        self._query_input = query_input
        self._index = MatchIndex(config)
        self._filter = MatchFilter(self._index, host, self._options, config)
        self._navigator = navigator or ViewNavigator(host, config)
        self._schedule: Scheduler = schedule or run_or_schedule

        self._state = SessionState.IDLE
        self._query = ""
        self._anchor: str | None = None
        self._case_sensitive = False
        self._label_length = 0
        self._disposed = False
        self._cancelled = False
        self._jump_target: Candidate | None = None
        self._jump_task: JumpTask | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def options(self) -> SearchOptions:
        return self._options

    @property
    def query(self) -> str:
        return self._query

    @property
    def index(self) -> MatchIndex:
        return self._index

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def label_length(self) -> int:
        return self._label_length

    @property
    def jump_target(self) -> Candidate | None:
        return self._jump_target

    @property
    def jump_task(self) -> JumpTask | None:
        return self._jump_task

    @property
    def disposed(self) -> bool:
        return self._disposed

    def is_live(self) -> bool:
        return not self._cancelled

    def matches(self) -> list[Candidate]:
        """Candidates still reachable with the current query."""
        if len(self._query) < self._config.min_search_len:
            return []
        return self._filter.get_matches(self._query)

    def update(self, query: str) -> None:
        """Handle a change of the live query text."""
        if self._state.is_terminal:
            return
        self._query = query
        if len(query) < self._config.min_search_len:
            self._reset()
            return

        anchor = query[: self._config.anchor_len]
        if anchor != self._anchor or self._index.is_empty:
            self._rebuild(anchor)

        label_length = max(len(query) - self._config.anchor_len, 0) + 1
        matches = self._filter.get_matches(query)
        if len(matches) == 1:
            self._jump(matches[0])
            return
        self._render(matches, label_length)
        self._state = SessionState.NARROWING

    def accept(self) -> None:
        """Jump to the first remaining match, if any, and end the session."""
        if self._state.is_terminal:
            return
        matches = self.matches()
        if matches:
            self._jump(matches[0])
            return
        self._state = SessionState.CANCELLED
        self.dispose()

    def cancel(self) -> None:
        """End the session without navigating; stops an in-flight jump too."""
        self._cancelled = True
        if not self._state.is_terminal:
            self._state = SessionState.CANCELLED
        self.dispose()

    def on_hidden(self) -> None:
        """The host hid the query input; ignored once the session has ended."""
        if self._state.is_terminal:
            return
        self.cancel()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if not self._state.is_terminal:
            self._state = SessionState.CANCELLED
        if self._query_input is not None:
            self._query_input.close()
        self._index.invalidate()

    def _reset(self) -> None:
        self._index.invalidate()
        self._anchor = None
        self._label_length = 0
        self._state = SessionState.IDLE

    def _rebuild(self, anchor: str) -> None:
        self._state = SessionState.SCANNING
        self._index.invalidate()
        self._label_length = 0
        self._case_sensitive = is_case_sensitive(anchor, self._options)
        views = relevant_views(self._host, self._options)
        self._index.ensure_built(views, anchor, self._case_sensitive)
        self._anchor = anchor
        logger.debug("Indexed %d candidate(s) for anchor %r", len(self._index), anchor)

    def _render(self, matches: list[Candidate], label_length: int) -> None:
        if label_length != self._label_length:
            self._index.release_overlays()
            self._label_length = label_length

        wanted = set(matches)
        for candidate in self._index.visible_candidates():
            if candidate not in wanted:
                self._index.hide_overlay(candidate)

        for candidate in matches:
            if self._index.is_visible(candidate):
                continue
            view = self._host.view(candidate.view_id)
            if view is None:
                continue
            label = self._index.lookup_label(candidate, label_length) or ""
            self._index.show_overlay(candidate, self._host.create_overlay(view, candidate, label))

    def _jump(self, candidate: Candidate) -> None:
        self._state = SessionState.JUMPED
        self._jump_target = candidate
        self.dispose()
        self._jump_task = self._schedule(self._navigate(candidate))

    async def _navigate(self, candidate: Candidate) -> Position | None:
        try:
            result = await self._navigator.jump_to(candidate, is_live=self.is_live)
        except Exception:
            logger.exception("Jump to %s failed", candidate)
            return None
        if isinstance(result, Err):
            logger.info(
                "Jump to %s line %d column %d abandoned: %s",
                candidate.view_id,
                candidate.line,
                candidate.start_column,
                result.err_value,
            )
            return None
        return result.ok_value
