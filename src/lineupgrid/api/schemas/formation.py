from __future__ import annotations

from pydantic import BaseModel


class FormationListResponse(BaseModel):
    default: str
    formations: list[str]


class FormationNormalizeResponse(BaseModel):
    input: str
    formation: str
