"""Host view-group models and host commands."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class HostCommand(StrEnum):
    """Commands the navigator asks the host to execute."""

    NEXT_GROUP = "view_group.next"
    SWITCH_SIDE = "comparison.switch_side"


class TextInput(BaseModel):
    """Active tab showing a single document."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    document_id: str


class ComparisonInput(BaseModel):
    """Active tab showing two documents side by side."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["comparison"] = "comparison"
    original: str
    modified: str

    def includes(self, document_id: str) -> bool:
        return document_id in (self.original, self.modified)


TabInput = Annotated[TextInput | ComparisonInput, Field(discriminator="kind")]


class ViewGroup(BaseModel):
    """One host view group and the input of its active tab."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    active_input: TabInput | None = None
