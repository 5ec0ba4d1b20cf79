"""Navigation outcome types."""

from __future__ import annotations

from enum import StrEnum


class NavigationFailure(StrEnum):
    """Reasons a jump could not place the caret."""

    TARGET_NOT_FOUND = "target_not_found"
    GROUP_RESOLUTION_TIMEOUT = "group_resolution_timeout"
    SIDE_RESOLUTION_TIMEOUT = "side_resolution_timeout"
    SESSION_CANCELLED = "session_cancelled"
