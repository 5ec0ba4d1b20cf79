"""Candidate to label storage for one scan generation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from leapnav.config import DEFAULT_CONFIG, Config
from leapnav.engine.labels import LabelAllocator
from leapnav.engine.scanner import CorpusScanner

if TYPE_CHECKING:
    from leapnav.engine.protocols import OverlayProtocol, TextViewProtocol
    from leapnav.models.candidate import Candidate

logger = logging.getLogger(__name__)


class MatchIndex:
    """Owns the candidate labels and the overlays currently rendered for them.

    Every candidate with an overlay also has a label. The index does not
    know which anchor it was built for; callers invalidate it when the
    anchor changes.
    """

    def __init__(
        self,
        config: Config = DEFAULT_CONFIG,
        *,
        scanner: CorpusScanner | None = None,
        allocator: LabelAllocator | None = None,
    ) -> None:
        self._scanner = scanner or CorpusScanner(config)
        self._allocator = allocator or LabelAllocator(config)
        self._labels: dict[Candidate, str] = {}
        self._overlays: dict[Candidate, OverlayProtocol] = {}

    def __len__(self) -> int:
        return len(self._labels)

    @property
    def is_empty(self) -> bool:
        return not self._labels

    def ensure_built(
        self,
        views: Sequence[TextViewProtocol],
        anchor: str,
        case_sensitive: bool,
    ) -> None:
        """Scan and label the corpus unless this generation is already built."""
        if self._labels:
            return
        for candidate in self._scanner.scan(views, anchor, case_sensitive):
            if candidate not in self._labels:
                self._labels[candidate] = self._allocator.next(len(self._labels))
        if len(self._labels) > self._allocator.capacity:
            logger.debug(
                "%d candidates exceed %d labels; labels wrap",
                len(self._labels),
                self._allocator.capacity,
            )

    def candidates(self) -> list[Candidate]:
        """All candidates of this generation, in discovery order."""
        return list(self._labels)

    def lookup_label(self, candidate: Candidate, prefix_length: int | None = None) -> str | None:
        label = self._labels.get(candidate)
        if label is None or prefix_length is None:
            return label
        return label[:prefix_length]

    def is_visible(self, candidate: Candidate) -> bool:
        return candidate in self._overlays

    def visible_candidates(self) -> list[Candidate]:
        return list(self._overlays)

    def show_overlay(self, candidate: Candidate, overlay: OverlayProtocol) -> None:
        if candidate not in self._labels:
            overlay.dispose()
            msg = f"Cannot show an overlay for unlabeled candidate {candidate!r}"
            raise KeyError(msg)
        previous = self._overlays.pop(candidate, None)
        if previous is not None:
            previous.dispose()
        self._overlays[candidate] = overlay

    def hide_overlay(self, candidate: Candidate) -> None:
        overlay = self._overlays.pop(candidate, None)
        if overlay is not None:
            overlay.dispose()

    def release_overlays(self) -> None:
        overlays = list(self._overlays.values())
        self._overlays.clear()
        for overlay in overlays:
            overlay.dispose()

    def invalidate(self) -> None:
        """Release every overlay and forget all candidates and labels."""
        self.release_overlays()
        self._labels.clear()
