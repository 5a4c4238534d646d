"""Static layout tables for grid cells, tactical lines and known formations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Mapping, Tuple, Union


class Role(str, Enum):
    GOALKEEPER = "G"
    DEFENDER = "D"
    MIDFIELDER = "M"
    FORWARD = "F"


DEFAULT_FORMATION = "4-3-3"

KNOWN_FORMATIONS: Tuple[str, ...] = (
    "4-3-3",
    "4-4-2",
    "4-2-3-1",
    "3-5-2",
    "5-3-2",
    "3-4-3",
    "4-1-4-1",
    "4-3-2-1",
    "4-1-2-1-2",
    "3-4-1-2",
    "5-4-1",
    "4-2-2-2",
    "4-3-1-2",
    "4-5-1",
    "3-4-2-1",
)

CENTER: Tuple[float, float] = (50.0, 50.0)
GOALKEEPER_SPOT: Tuple[float, float] = (50.0, 90.0)

# Provider grid cells, row 1 is the goalkeeper and rows grow towards the opponent.
GRID_COLUMN_X: Mapping[int, float] = {1: 15.0, 2: 35.0, 3: 50.0, 4: 65.0, 5: 85.0}
GRID_ROW_Y: Mapping[int, float] = {
    1: 90.0,
    2: 75.0,
    3: 70.0,
    4: 55.0,
    5: 45.0,
    6: 30.0,
    7: 20.0,
}

# Position in the parsed formation that holds each role's line size.
LINE_INDEX: Mapping[Role, int] = {
    Role.DEFENDER: 0,
    Role.MIDFIELDER: 1,
    Role.FORWARD: 2,
}


@dataclass(frozen=True)
class LineLayout:
    role: Role
    size: int
    slots: Tuple[Tuple[float, float], ...]

    def slot(self, index: int) -> Tuple[float, float]:
        """Return the slot for ``index``, wrapping past the end of the line."""

        return self.slots[index % self.size]


@dataclass(frozen=True)
class RoleBand:
    role: Role
    y: float
    fallback: Tuple[float, float]


_ROLE_BANDS: Dict[Role, RoleBand] = {
    Role.DEFENDER: RoleBand(role=Role.DEFENDER, y=75.0, fallback=(50.0, 75.0)),
    Role.MIDFIELDER: RoleBand(role=Role.MIDFIELDER, y=50.0, fallback=(50.0, 50.0)),
    Role.FORWARD: RoleBand(role=Role.FORWARD, y=25.0, fallback=(50.0, 25.0)),
}


def _line(role: Role, y: float, *xs: float) -> LineLayout:
    return LineLayout(role=role, size=len(xs), slots=tuple((x, y) for x in xs))


_LINE_LAYOUTS: Dict[Tuple[Role, int], LineLayout] = {
    (Role.DEFENDER, 2): _line(Role.DEFENDER, 75.0, 35, 65),
    (Role.DEFENDER, 3): _line(Role.DEFENDER, 75.0, 30, 50, 70),
    (Role.DEFENDER, 4): _line(Role.DEFENDER, 75.0, 20, 40, 60, 80),
    (Role.DEFENDER, 5): _line(Role.DEFENDER, 75.0, 15, 35, 50, 65, 85),
    # A midfield pair sits slightly deeper as a double pivot.
    (Role.MIDFIELDER, 2): _line(Role.MIDFIELDER, 55.0, 35, 65),
    (Role.MIDFIELDER, 3): _line(Role.MIDFIELDER, 50.0, 30, 50, 70),
    (Role.MIDFIELDER, 4): _line(Role.MIDFIELDER, 50.0, 20, 40, 60, 80),
    (Role.MIDFIELDER, 5): _line(Role.MIDFIELDER, 50.0, 15, 35, 50, 65, 85),
    (Role.FORWARD, 2): _line(Role.FORWARD, 25.0, 35, 65),
    (Role.FORWARD, 3): _line(Role.FORWARD, 25.0, 25, 50, 75),
    (Role.FORWARD, 4): _line(Role.FORWARD, 25.0, 20, 40, 60, 80),
    (Role.FORWARD, 5): _line(Role.FORWARD, 25.0, 15, 35, 50, 65, 85),
}

SUPPORTED_LINE_SIZES = frozenset(size for _, size in _LINE_LAYOUTS)


def iter_line_layouts() -> Iterable[LineLayout]:
    """Return an iterator of all configured line layouts."""

    return _LINE_LAYOUTS.values()


def find_line_layout(role: Role, size: int | None) -> LineLayout | None:
    """Return the tabulated layout for a role/size pair, or None when uncovered."""

    if size is None:
        return None
    return _LINE_LAYOUTS.get((role, size))


def get_line_layout(role: Role, size: int) -> LineLayout:
    """Fetch the layout for a role/size pair, raising KeyError if missing."""

    key = (Role(role), size)
    if key not in _LINE_LAYOUTS:
        raise KeyError(f"No line layout configured for role={key[0].name}, size={size!r}")
    return _LINE_LAYOUTS[key]


def get_line_layout_by_key(layout_key: Union[str, Tuple[Role, int]]) -> LineLayout:
    """Resolve layouts using either "ROLE_SIZE" (e.g. "D_4") or (role, size)."""

    if isinstance(layout_key, tuple):
        role, size = layout_key
        return get_line_layout(role, size)

    if not isinstance(layout_key, str):
        raise TypeError("layout_key must be a str or (role, size) tuple")

    parts = layout_key.split("_", 1)
    if len(parts) != 2 or not parts[1].isdigit():
        raise ValueError(f"layout_key must look like 'ROLE_SIZE', got {layout_key!r}")

    role_code, size = parts
    try:
        role = Role(role_code.upper())
    except ValueError as exc:
        raise KeyError(f"Unknown role code {role_code!r}") from exc
    return get_line_layout(role, int(size))


def get_role_band(role: Role) -> RoleBand:
    """Return the horizontal band for an outfield role."""

    return _ROLE_BANDS[Role(role)]
