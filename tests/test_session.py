"""Tests for the search session state machine."""

from __future__ import annotations

import asyncio

import pytest

from leapnav.engine.session import SearchSession, SessionState
from leapnav.memory_host import MemoryGroup, MemoryHost, MemoryQueryInput, MemoryView
from leapnav.models.options import BIDIRECTIONAL, SearchOptions
from leapnav.models.text import Position, Selection


def _labels(host: MemoryHost) -> list[tuple[int, str]]:
    return [(o.candidate.start_column, o.label) for o in host.live_overlays()]


class TestNarrowing:
    def test_anchor_labels_every_occurrence(self, single_host: MemoryHost) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL)
        session.update("fo")
        assert session.state is SessionState.NARROWING
        assert _labels(single_host) == [(0, "a"), (8, "b")]
        assert [session.index.lookup_label(c) for c in session.matches()] == ["aa", "ba"]

    def test_first_character_already_labels(self, single_host: MemoryHost) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL)
        session.update("b")
        assert [c.start_column for c in session.matches()] == [4, 12]
        assert len(single_host.live_overlays()) == 2

    def test_same_query_twice_keeps_overlays(self, single_host: MemoryHost) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL)
        session.update("fo")
        created = len(single_host.overlays)
        session.update("fo")
        assert len(single_host.overlays) == created
        assert _labels(single_host) == [(0, "a"), (8, "b")]

    def test_discriminator_keeps_labels_and_widens_overlays(self) -> None:
        view = MemoryView("v", " ".join(["fo"] * 30))
        host = MemoryHost.single(view)
        session = SearchSession(host, BIDIRECTIONAL)
        session.update("fo")
        before = {c: session.index.lookup_label(c) for c in session.index.candidates()}
        assert len(host.live_overlays()) == 30

        session.update("foa")
        after = {c: session.index.lookup_label(c) for c in session.index.candidates()}
        assert after == before
        assert session.label_length == 2
        assert _labels(host) == [(0, "aa"), (78, "ab")]

    def test_anchor_change_starts_a_new_generation(self, single_host: MemoryHost) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL)
        session.update("fo")
        old_overlays = single_host.live_overlays()

        session.update("ba")
        assert all(overlay.disposed for overlay in old_overlays)
        matches = session.matches()
        assert [c.start_column for c in matches] == [4, 12]
        assert [session.index.lookup_label(c) for c in matches] == ["aa", "ba"]
        assert _labels(single_host) == [(4, "a"), (12, "b")]

    def test_clearing_the_query_returns_to_idle(self, single_host: MemoryHost) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL)
        session.update("fo")
        session.update("")
        assert session.state is SessionState.IDLE
        assert session.index.is_empty
        assert single_host.live_overlays() == []
        assert session.matches() == []

    def test_no_active_view_means_no_candidates(self, sample_view: MemoryView) -> None:
        host = MemoryHost([MemoryGroup("group-1", [sample_view])])
        host.active_group_index = None
        session = SearchSession(host, BIDIRECTIONAL)
        session.update("fo")
        assert session.matches() == []
        assert host.overlays == []
        assert session.state is SessionState.NARROWING

    def test_capital_anchor_is_case_sensitive(self) -> None:
        host = MemoryHost.single(MemoryView("v", "Foo foo Foo"))
        session = SearchSession(host, BIDIRECTIONAL)
        session.update("fo")
        assert len(session.matches()) == 3
        session.update("Fo")
        assert session.case_sensitive
        assert [c.start_column for c in session.matches()] == [0, 8]

    def test_rejects_options_without_direction(self, single_host: MemoryHost) -> None:
        with pytest.raises(ValueError):
            SearchSession(single_host, SearchOptions.ALL_EDITORS)


class TestJumping:
    @pytest.mark.asyncio
    async def test_unique_match_jumps_without_accept(
        self, single_host: MemoryHost, sample_view: MemoryView, query_input: MemoryQueryInput
    ) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL, query_input=query_input)
        session.update("fo")
        session.update("fob")
        assert session.state is SessionState.JUMPED
        assert session.disposed
        assert query_input.closed
        assert single_host.live_overlays() == []

        assert await session.jump_task == Position(0, 8)
        assert sample_view.selection() == Selection.caret(Position(0, 8))

    def test_unique_match_jumps_from_synchronous_caller(
        self, single_host: MemoryHost, sample_view: MemoryView, query_input: MemoryQueryInput
    ) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL, query_input=query_input)
        session.update("fo")
        session.update("fob")
        assert session.state is SessionState.JUMPED

        task = session.jump_task
        assert task is not None and task.done()
        assert task.result() == Position(0, 8)
        assert sample_view.selection() == Selection.caret(Position(0, 8))

    @pytest.mark.asyncio
    async def test_accept_picks_first_discovered(self, query_input: MemoryQueryInput) -> None:
        view = MemoryView("v", "x fo\nfo y", caret=Position(1, 4))
        host = MemoryHost.single(view)
        session = SearchSession(host, BIDIRECTIONAL, query_input=query_input)
        session.update("fo")
        assert len(session.matches()) == 2

        session.accept()
        assert session.state is SessionState.JUMPED
        assert await session.jump_task == Position(0, 2)
        assert view.selection() == Selection.caret(Position(0, 2))

    def test_accept_without_matches_cancels(
        self, single_host: MemoryHost, query_input: MemoryQueryInput
    ) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL, query_input=query_input)
        session.update("zz")
        session.accept()
        assert session.state is SessionState.CANCELLED
        assert session.jump_task is None
        assert query_input.closed

    def test_cancel_disposes_once(
        self, single_host: MemoryHost, query_input: MemoryQueryInput
    ) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL, query_input=query_input)
        session.update("fo")
        session.cancel()
        session.cancel()
        session.dispose()
        session.on_hidden()
        assert session.state is SessionState.CANCELLED
        assert query_input.close_calls == 1
        assert all(overlay.dispose_calls == 1 for overlay in single_host.overlays)

    def test_updates_after_end_are_ignored(self, single_host: MemoryHost) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL)
        session.cancel()
        session.update("fo")
        assert session.index.is_empty
        assert single_host.overlays == []

    @pytest.mark.asyncio
    async def test_hide_after_accept_keeps_the_jump(
        self, single_host: MemoryHost, sample_view: MemoryView
    ) -> None:
        session = SearchSession(single_host, BIDIRECTIONAL)
        session.update("fo")
        session.accept()
        session.on_hidden()
        assert await session.jump_task == Position(0, 0)
        assert session.state is SessionState.JUMPED

    @pytest.mark.asyncio
    async def test_cancel_before_probe_runs_is_a_no_op(self, sample_view: MemoryView) -> None:
        host = MemoryHost.single(sample_view)
        session = SearchSession(host, BIDIRECTIONAL)
        session.update("fob")
        session.cancel()
        assert await session.jump_task is None
        assert sample_view.selection() == Selection.caret(Position(0, 0))
        assert session.state is SessionState.JUMPED

    @pytest.mark.asyncio
    async def test_unresolvable_comparison_is_swallowed(
        self, comparison_host: MemoryHost, query_input: MemoryQueryInput
    ) -> None:
        comparison_host.focus_lock = True
        options = BIDIRECTIONAL | SearchOptions.ALL_EDITORS
        session = SearchSession(comparison_host, options, query_input=query_input)
        session.update("ze")
        assert session.state is SessionState.JUMPED
        assert await session.jump_task is None
        assert session.disposed
        assert query_input.closed
        assert comparison_host.live_overlays() == []
        right = comparison_host.view("right")
        assert right is not None
        assert right.selection() == Selection.caret(Position(0, 0))

    @pytest.mark.asyncio
    async def test_host_errors_are_logged_not_raised(
        self, comparison_host: MemoryHost, caplog: pytest.LogCaptureFixture
    ) -> None:
        async def broken(command) -> None:  # type: ignore[no-untyped-def]
            raise RuntimeError("host went away")

        comparison_host.execute_command = broken  # type: ignore[method-assign]
        session = SearchSession(comparison_host, BIDIRECTIONAL | SearchOptions.ALL_EDITORS)
        session.update("ze")
        assert await session.jump_task is None
        assert "host went away" in caplog.text

    @pytest.mark.asyncio
    async def test_custom_scheduler_receives_the_jump(self, single_host: MemoryHost) -> None:
        scheduled: list[asyncio.Task[Position | None]] = []

        def schedule(coro):  # type: ignore[no-untyped-def]
            task = asyncio.ensure_future(coro)
            scheduled.append(task)
            return task

        session = SearchSession(single_host, BIDIRECTIONAL, schedule=schedule)
        session.update("fob")
        assert scheduled == [session.jump_task]
        assert await scheduled[0] == Position(0, 8)
