"""Search report models used by the headless scan command."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LabeledMatch(BaseModel):
    """A candidate as presented to the user."""

    view_id: str
    line: int
    column: int
    label: str
    preview: str = ""


class ScanReport(BaseModel):
    """Matches for one query, in discovery order."""

    query: str
    anchor: str = ""
    discriminator: str = ""
    case_sensitive: bool = False
    matches: list[LabeledMatch] = Field(default_factory=list)
    jumped_to: LabeledMatch | None = None
