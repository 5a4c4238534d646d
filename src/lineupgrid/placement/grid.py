"""Map provider "row:col" grid cells onto pitch coordinates."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from lineupgrid.config import CENTER, GRID_COLUMN_X, GRID_ROW_Y
from lineupgrid.models import FieldPosition


logger = logging.getLogger(__name__)


def parse_grid(grid: Optional[str]) -> Optional[Tuple[int, int]]:
    """Return ``(row, col)`` for a well-formed cell, otherwise ``None``."""

    if not grid:
        return None
    parts = grid.split(":")
    if len(parts) != 2:
        return None
    try:
        row, col = (int(part.strip()) for part in parts)
    except ValueError:
        return None
    return row, col


def grid_to_field(grid: Optional[str]) -> FieldPosition:
    cell = parse_grid(grid)
    if cell is None:
        logger.warning("Unparseable grid cell %r, placing at center", grid)
        return FieldPosition.of(CENTER)

    row, col = cell
    x = GRID_COLUMN_X.get(col, CENTER[0])
    y = GRID_ROW_Y.get(row, CENTER[1])
    return FieldPosition(x=x, y=y)
