"""Corpus scanning: find anchor occurrences in the visible text."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from leapnav.config import DEFAULT_CONFIG, Config
from leapnav.models.candidate import Candidate
from leapnav.models.options import SearchOptions

if TYPE_CHECKING:
    from leapnav.engine.protocols import EditorHostProtocol, TextViewProtocol

logger = logging.getLogger(__name__)


def relevant_views(
    host: EditorHostProtocol, options: SearchOptions
) -> list[TextViewProtocol]:
    """Views searched for a session: all visible ones, or just the focused one."""
    if options & SearchOptions.ALL_EDITORS:
        return list(host.visible_views())
    active = host.active_view()
    if active is None:
        return []
    return [active]


def is_case_sensitive(anchor: str, options: SearchOptions = SearchOptions(0)) -> bool:
    """Typing a capital letter in the anchor opts into a case-sensitive scan."""
    if options & SearchOptions.CASE_SENSITIVE:
        return True
    return anchor.lower() != anchor


def is_blank_anchor(anchor: str) -> bool:
    return bool(anchor) and anchor.strip(" ") == ""


class CorpusScanner:
    """Enumerates visible lines and emits a candidate per anchor occurrence."""

    def __init__(self, config: Config = DEFAULT_CONFIG) -> None:
        self._context_len = config.context_len

    def scan(
        self,
        views: Sequence[TextViewProtocol],
        anchor: str,
        case_sensitive: bool,
    ) -> list[Candidate]:
        """Return candidates in discovery order: view, then line, then column."""
        if not anchor:
            return []
        # Zero-width lookahead: overlapping matches, columns of the raw line.
        needle = re.compile(f"(?={re.escape(anchor)})", 0 if case_sensitive else re.IGNORECASE)
        blank = is_blank_anchor(anchor)
        candidates: list[Candidate] = []
        for view in views:
            for line_number, text in self._visible_lines(view):
                candidates.extend(
                    self._scan_line(view.view_id, line_number, text, needle, blank)
                )
        logger.debug(
            "Scanned %d view(s) for %r: %d candidate(s)", len(views), anchor, len(candidates)
        )
        return candidates

    def _visible_lines(self, view: TextViewProtocol) -> Iterator[tuple[int, str]]:
        for line_range in view.visible_line_ranges():
            for line_number in line_range.lines():
                yield line_number, view.line_text(line_number)

    def _scan_line(
        self,
        view_id: str,
        line_number: int,
        text: str,
        needle: re.Pattern[str],
        blank: bool,
    ) -> Iterator[Candidate]:
        # The sentinel space lets an anchor match at end-of-line.
        haystack = text + " "
        start = 0 if blank else len(haystack) - len(haystack.lstrip())
        for match in needle.finditer(haystack, start):
            position = match.start()
            yield Candidate(view_id, line_number, position, position + self._context_len)

        if blank:
            yield Candidate(view_id, line_number, len(text), len(text))
