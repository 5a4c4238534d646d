"""Infer a formation string from the players of a starting lineup."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Sequence

from lineupgrid.config import DEFAULT_FORMATION, Role
from lineupgrid.models import Player
from lineupgrid.placement.grid import parse_grid
from lineupgrid.placement.heuristic import classify_position


logger = logging.getLogger(__name__)

_GOALKEEPER_ROW = 1


def _detect_from_grid(players: Sequence[Player]) -> str | None:
    rows: Counter[int] = Counter()
    for player in players:
        if not player.grid:
            continue
        cell = parse_grid(player.grid)
        if cell is None:
            continue
        row, _ = cell
        if row > _GOALKEEPER_ROW:
            rows[row] += 1

    if not rows:
        return None
    return "-".join(str(rows[row]) for row in sorted(rows))


def _detect_from_codes(players: Sequence[Player]) -> str | None:
    counts: Counter[Role] = Counter()
    for player in players:
        role = classify_position(player.position_code)
        if role is not None and role is not Role.GOALKEEPER:
            counts[role] += 1

    if not counts:
        return None
    return "-".join(
        str(counts[role]) for role in (Role.DEFENDER, Role.MIDFIELDER, Role.FORWARD)
    )


def detect_formation(players: Sequence[Player]) -> str:
    """Return the raw formation implied by grid rows or position codes.

    Grid rows win whenever at least one player carries a parseable cell; the
    result is not validated and should be passed through
    :func:`lineupgrid.formation.normalize_formation` before use.
    """

    has_grid = any(player.grid for player in players)
    detected = _detect_from_grid(players) if has_grid else None
    if detected is None:
        detected = _detect_from_codes(players)
    if detected is None:
        logger.debug("No outfield signal in %d players, assuming %s", len(players), DEFAULT_FORMATION)
        return DEFAULT_FORMATION
    return detected
