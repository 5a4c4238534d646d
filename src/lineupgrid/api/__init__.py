"""REST API for lineup placement."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Query

from lineupgrid.api.schemas import (
    FormationListResponse,
    FormationNormalizeResponse,
    LineupArrangeRequest,
    LineupArrangeResponse,
    LineupDetectRequest,
    LineupDetectResponse,
)
from lineupgrid.config import DEFAULT_FORMATION, KNOWN_FORMATIONS
from lineupgrid.formation import normalize_formation
from lineupgrid.placement import arrange_players, detect_formation


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="lineupgrid")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/formations", response_model=FormationListResponse)
    async def list_formations() -> FormationListResponse:
        return FormationListResponse(default=DEFAULT_FORMATION, formations=list(KNOWN_FORMATIONS))

    @app.get("/formations/normalize", response_model=FormationNormalizeResponse)
    async def normalize(value: str = Query("")) -> FormationNormalizeResponse:
        return FormationNormalizeResponse(input=value, formation=normalize_formation(value))

    @app.post("/lineups/detect", response_model=LineupDetectResponse)
    async def detect(payload: LineupDetectRequest) -> LineupDetectResponse:
        formation = detect_formation([entry.player for entry in payload.start_xi])
        return LineupDetectResponse(formation=formation, normalized=normalize_formation(formation))

    @app.post(
        "/lineups/arrange",
        response_model=LineupArrangeResponse,
        response_model_by_alias=True,
    )
    async def arrange(payload: LineupArrangeRequest) -> LineupArrangeResponse:
        formation = payload.formation
        if not formation or not formation.strip():
            formation = detect_formation([entry.player for entry in payload.start_xi])
        canonical = normalize_formation(formation)
        arranged = arrange_players(
            payload.start_xi,
            canonical,
            layout=payload.layout,
            mirror=payload.mirror,
        )
        logger.info("Arranged %d players in %s", len(arranged), canonical)
        return LineupArrangeResponse(formation=canonical, start_xi=arranged)

    return app
