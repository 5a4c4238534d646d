"""Canonical lineup models shared across placement, API and CLI layers."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Player(BaseModel):
    """Starting-lineup player as delivered by the match-data provider."""

    player_id: Union[int, str] = Field(..., alias="id")
    name: str = ""
    number: Optional[int] = None
    position_code: Optional[str] = Field(default=None, alias="pos")
    grid: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FieldPosition(BaseModel):
    """Percentage-of-pitch coordinate; y=0 is the attacking line."""

    x: float = Field(..., ge=0.0, le=100.0)
    y: float = Field(..., ge=0.0, le=100.0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, point: tuple[float, float]) -> "FieldPosition":
        x, y = point
        return cls(x=x, y=y)

    def mirrored(self) -> "FieldPosition":
        return FieldPosition(x=100.0 - self.x, y=self.y)


class RosterEntry(BaseModel):
    """Provider roster item wrapping a single player."""

    player: Player

    model_config = ConfigDict(frozen=True)


class ArrangedPlayer(BaseModel):
    player: Player
    field_position: FieldPosition = Field(..., alias="fieldPosition")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
