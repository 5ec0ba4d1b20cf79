"""Tests for corpus scanning."""

from __future__ import annotations

from leapnav.engine.scanner import CorpusScanner, is_case_sensitive, relevant_views
from leapnav.memory_host import MemoryGroup, MemoryHost, MemoryView
from leapnav.models.candidate import Candidate
from leapnav.models.options import BIDIRECTIONAL, SearchOptions
from leapnav.models.text import LineRange


def _columns(candidates: list[Candidate]) -> list[int]:
    return [candidate.start_column for candidate in candidates]


class TestCorpusScanner:
    def test_finds_every_occurrence_with_context_range(self, sample_view: MemoryView) -> None:
        candidates = CorpusScanner().scan([sample_view], "fo", case_sensitive=False)
        assert candidates == [
            Candidate("main", 0, 0, 4),
            Candidate("main", 0, 8, 12),
        ]

    def test_overlapping_occurrences(self) -> None:
        view = MemoryView("v", "aaa")
        assert _columns(CorpusScanner().scan([view], "aa", False)) == [0, 1]

    def test_sentinel_space_matches_end_of_line(self) -> None:
        view = MemoryView("v", "ab")
        assert CorpusScanner().scan([view], "b ", False) == [Candidate("v", 0, 1, 5)]

    def test_skips_leading_whitespace_for_regular_anchor(self) -> None:
        view = MemoryView("v", "  ab ab")
        assert _columns(CorpusScanner().scan([view], " a", False)) == [4]

    def test_blank_anchor_scans_raw_line_and_adds_end_of_line(self) -> None:
        view = MemoryView("v", "  fo")
        candidates = CorpusScanner().scan([view], "  ", False)
        assert candidates == [Candidate("v", 0, 0, 4), Candidate("v", 0, 4, 4)]
        assert candidates[-1].is_zero_width

    def test_blank_anchor_targets_every_line_end(self) -> None:
        view = MemoryView("v", "one\ntwo")
        candidates = CorpusScanner().scan([view], " ", False)
        assert Candidate("v", 0, 3, 3) in candidates
        assert Candidate("v", 1, 3, 3) in candidates

    def test_case_insensitive_by_default(self) -> None:
        view = MemoryView("v", "Foo foo")
        assert _columns(CorpusScanner().scan([view], "fo", False)) == [0, 4]

    def test_case_sensitive_scan(self) -> None:
        view = MemoryView("v", "Foo foo")
        assert _columns(CorpusScanner().scan([view], "Fo", True)) == [0]
        assert _columns(CorpusScanner().scan([view], "fo", True)) == [4]

    def test_case_insensitive_columns_survive_expanding_lowercase(self) -> None:
        view = MemoryView("v", "İx fo İFO")
        assert _columns(CorpusScanner().scan([view], "fo", False)) == [3, 7]

    def test_only_visible_lines_are_read(self) -> None:
        view = MemoryView("v", "fo\nfo\nfo\nfo\nfo", visible=[LineRange(1, 2)])
        candidates = CorpusScanner().scan([view], "fo", False)
        assert [candidate.line for candidate in candidates] == [1, 2]

    def test_discovery_order_is_view_then_line_then_column(self) -> None:
        first = MemoryView("first", "x fo\nfo fo")
        second = MemoryView("second", "fo")
        candidates = CorpusScanner().scan([first, second], "fo", False)
        assert [(c.view_id, c.line, c.start_column) for c in candidates] == [
            ("first", 0, 2),
            ("first", 1, 0),
            ("first", 1, 3),
            ("second", 0, 0),
        ]

    def test_empty_anchor_yields_nothing(self, sample_view: MemoryView) -> None:
        assert CorpusScanner().scan([sample_view], "", False) == []


def test_case_sensitivity_is_detected_from_capitals() -> None:
    assert is_case_sensitive("fo") is False
    assert is_case_sensitive("Fo") is True
    assert is_case_sensitive("f1") is False
    assert is_case_sensitive("fo", SearchOptions.FORWARD | SearchOptions.CASE_SENSITIVE) is True


def test_relevant_views() -> None:
    first = MemoryView("first", "a")
    second = MemoryView("second", "b")
    host = MemoryHost.from_views(first, second)
    host.active_group_index = 1

    assert relevant_views(host, BIDIRECTIONAL) == [second]
    assert relevant_views(host, BIDIRECTIONAL | SearchOptions.ALL_EDITORS) == [first, second]

    host.active_group_index = None
    assert relevant_views(host, SearchOptions.FORWARD) == []
    assert relevant_views(MemoryHost(), SearchOptions.FORWARD) == []


def test_relevant_views_follows_focused_comparison_side() -> None:
    left = MemoryView("left", "a", view_column=None)
    right = MemoryView("right", "b", view_column=None)
    host = MemoryHost([MemoryGroup("g", [left, right], comparison=True, side=1)])
    assert relevant_views(host, BIDIRECTIONAL) == [right]
