from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from lineupgrid.models import ArrangedPlayer, RosterEntry


class LineupArrangeRequest(BaseModel):
    formation: str | None = None
    start_xi: List[RosterEntry] = Field(default_factory=list, alias="startXI")
    mirror: bool = False
    layout: Literal["fixed", "interpolated"] = "fixed"

    model_config = ConfigDict(populate_by_name=True)


class LineupArrangeResponse(BaseModel):
    formation: str
    start_xi: List[ArrangedPlayer] = Field(..., alias="startXI")

    model_config = ConfigDict(populate_by_name=True)


class LineupDetectRequest(BaseModel):
    start_xi: List[RosterEntry] = Field(default_factory=list, alias="startXI")

    model_config = ConfigDict(populate_by_name=True)


class LineupDetectResponse(BaseModel):
    formation: str
    normalized: str
