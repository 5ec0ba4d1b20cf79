"""Deterministic label allocation."""

from __future__ import annotations

from leapnav.config import DEFAULT_CONFIG, Config


class LabelAllocator:
    """Maps ordinals to fixed-length labels, least-significant digit first.

    The first character cycles fastest, so the first ``len(alphabet)``
    candidates are told apart by a single keystroke. Ordinals beyond
    ``capacity`` wrap around and reuse labels.
    """

    def __init__(self, config: Config = DEFAULT_CONFIG) -> None:
        self._alphabet = config.label_alphabet
        self._length = config.label_len

    @property
    def capacity(self) -> int:
        return len(self._alphabet) ** self._length

    def next(self, ordinal: int) -> str:
        base = len(self._alphabet)
        chars: list[str] = []
        for _ in range(self._length):
            chars.append(self._alphabet[ordinal % base])
            ordinal //= base
        return "".join(chars)
