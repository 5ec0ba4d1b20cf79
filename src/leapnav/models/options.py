"""Search option flags shared by the engine, the controller and the CLI."""

from __future__ import annotations

from enum import IntFlag


class SearchOptions(IntFlag):
    """Independent flags describing the scope and direction of a search."""

    FORWARD = 1
    BACKWARD = 2
    ALL_EDITORS = 4
    CASE_SENSITIVE = 8

    @property
    def is_directional(self) -> bool:
        return bool(self & (SearchOptions.FORWARD | SearchOptions.BACKWARD))


BIDIRECTIONAL = SearchOptions.FORWARD | SearchOptions.BACKWARD


def validate_options(options: SearchOptions) -> SearchOptions:
    """Return ``options`` unchanged, rejecting sets without a direction."""
    if not options.is_directional:
        msg = f"Search options need FORWARD and/or BACKWARD, got {options!r}"
        raise ValueError(msg)
    return options
