"""Shared fixtures for leapnav tests."""

from __future__ import annotations

import pytest

from leapnav.memory_host import MemoryGroup, MemoryHost, MemoryQueryInput, MemoryView

SAMPLE_LINE = "foo bar foo baz"


@pytest.fixture
def sample_view() -> MemoryView:
    """One line with ``fo`` at columns 0 and 8."""
    return MemoryView("main", SAMPLE_LINE)


@pytest.fixture
def single_host(sample_view: MemoryView) -> MemoryHost:
    return MemoryHost.single(sample_view)


@pytest.fixture
def query_input() -> MemoryQueryInput:
    return MemoryQueryInput()


@pytest.fixture
def comparison_host() -> MemoryHost:
    """A plain editor group (active) next to a comparison group.

    The comparison shows ``a.txt`` on the left and ``b.txt`` on the right;
    the left side has focus.
    """
    editor = MemoryView("editor", "plain notes", document_id="notes.txt")
    left = MemoryView("left", "alpha beta", document_id="a.txt", view_column=None)
    right = MemoryView("right", "gamma delta zeta", document_id="b.txt", view_column=None)
    return MemoryHost(
        [
            MemoryGroup("group-1", [editor]),
            MemoryGroup("group-2", [left, right], comparison=True),
        ]
    )
