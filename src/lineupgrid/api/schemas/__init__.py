"""Pydantic models for API I/O."""

from .formation import FormationListResponse, FormationNormalizeResponse
from .lineup import (
    LineupArrangeRequest,
    LineupArrangeResponse,
    LineupDetectRequest,
    LineupDetectResponse,
)

__all__ = [
    "FormationListResponse",
    "FormationNormalizeResponse",
    "LineupArrangeRequest",
    "LineupArrangeResponse",
    "LineupDetectRequest",
    "LineupDetectResponse",
]
