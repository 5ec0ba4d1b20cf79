"""Configuration for leapnav."""

from dataclasses import dataclass
from string import ascii_lowercase


@dataclass(frozen=True)
class Config:
    """Engine configuration.

    The query is split into an anchor of ``anchor_len`` characters and a
    discriminator; each candidate spans ``context_len`` characters, so labels
    are ``context_len - anchor_len`` characters long.
    """

    min_search_len: int = 1
    anchor_len: int = 2
    context_len: int = 4
    label_alphabet: str = ascii_lowercase
    max_side_switches: int = 3

    def __post_init__(self) -> None:
        if self.min_search_len < 1:
            msg = "min_search_len must be at least 1"
            raise ValueError(msg)
        if self.context_len <= self.anchor_len:
            msg = "context_len must be greater than anchor_len"
            raise ValueError(msg)
        if not self.label_alphabet or len(set(self.label_alphabet)) != len(self.label_alphabet):
            msg = "label_alphabet must be non-empty and contain no duplicates"
            raise ValueError(msg)

    @property
    def label_len(self) -> int:
        return self.context_len - self.anchor_len

    @property
    def label_capacity(self) -> int:
        return len(self.label_alphabet) ** self.label_len


DEFAULT_CONFIG = Config()
