"""Coordinate assignment for lineup players."""

from .grid import grid_to_field, parse_grid
from .heuristic import (
    FixedTableLayout,
    InterpolatedLayout,
    LayoutStrategy,
    classify_position,
    get_layout,
    position_to_field,
    role_to_field,
)
from .detect import detect_formation
from .service import (
    CodeSourced,
    GridSourced,
    IndexInferred,
    PlacementTrace,
    arrange_players,
    resolve_source,
)

__all__ = [
    "CodeSourced",
    "FixedTableLayout",
    "GridSourced",
    "IndexInferred",
    "InterpolatedLayout",
    "LayoutStrategy",
    "PlacementTrace",
    "arrange_players",
    "classify_position",
    "detect_formation",
    "get_layout",
    "grid_to_field",
    "parse_grid",
    "position_to_field",
    "resolve_source",
    "role_to_field",
]
