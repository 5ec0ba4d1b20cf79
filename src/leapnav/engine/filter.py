"""Narrowing candidates by label prefix and direction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from leapnav.config import DEFAULT_CONFIG, Config
from leapnav.models.options import SearchOptions, validate_options

if TYPE_CHECKING:
    from leapnav.engine.index import MatchIndex
    from leapnav.engine.protocols import EditorHostProtocol
    from leapnav.models.candidate import Candidate
    from leapnav.models.text import Selection


class MatchFilter:
    """Decides which indexed candidates are still reachable for a query."""

    def __init__(
        self,
        index: MatchIndex,
        host: EditorHostProtocol,
        options: SearchOptions,
        config: Config = DEFAULT_CONFIG,
    ) -> None:
        self._index = index
        self._host = host
        self._options = validate_options(options)
        self._anchor_len = config.anchor_len

    def relevant(
        self,
        discriminator: str,
        candidate: Candidate,
        active_view_id: str | None,
        selection: Selection | None,
    ) -> bool:
        """Check the label prefix, then the direction within the focused view."""
        label = self._index.lookup_label(candidate) or ""
        if not label.startswith(discriminator.lower()):
            return False
        if selection is None or candidate.view_id != active_view_id:
            return True
        if not self._options & SearchOptions.BACKWARD and candidate.start < selection.start:
            return False
        if not self._options & SearchOptions.FORWARD and candidate.start >= selection.end:
            return False
        return True

    def get_matches(self, query: str) -> list[Candidate]:
        """Indexed candidates relevant to ``query``, in discovery order."""
        discriminator = query[self._anchor_len :]
        active = self._host.active_view()
        active_view_id = active.view_id if active is not None else None
        selection = active.selection() if active is not None else None
        return [
            candidate
            for candidate in self._index.candidates()
            if self.relevant(discriminator, candidate, active_view_id, selection)
        ]
