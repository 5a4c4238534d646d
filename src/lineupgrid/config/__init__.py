"""Static layout configuration for formations, grid cells and tactical lines."""

from .layouts import (
    CENTER,
    DEFAULT_FORMATION,
    GOALKEEPER_SPOT,
    GRID_COLUMN_X,
    GRID_ROW_Y,
    KNOWN_FORMATIONS,
    LINE_INDEX,
    SUPPORTED_LINE_SIZES,
    LineLayout,
    Role,
    RoleBand,
    find_line_layout,
    get_line_layout,
    get_line_layout_by_key,
    get_role_band,
    iter_line_layouts,
)

__all__ = [
    "CENTER",
    "DEFAULT_FORMATION",
    "GOALKEEPER_SPOT",
    "GRID_COLUMN_X",
    "GRID_ROW_Y",
    "KNOWN_FORMATIONS",
    "LINE_INDEX",
    "SUPPORTED_LINE_SIZES",
    "LineLayout",
    "Role",
    "RoleBand",
    "find_line_layout",
    "get_line_layout",
    "get_line_layout_by_key",
    "get_role_band",
    "iter_line_layouts",
]
