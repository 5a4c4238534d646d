"""Place players from coarse position codes and formation line sizes.

Goalkeepers always go to the fixed goalkeeper spot. Outfield players are
assigned a role and a :class:`LayoutStrategy` turns ``(role, size, index)``
into a coordinate. The default :class:`FixedTableLayout` sizes each line from
the formation, only knows lines of 2-5 players and stacks anything else on the
centre of the role band. :class:`InterpolatedLayout` sizes each line from the
players actually assigned to it and spreads untabulated lines evenly.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

from lineupgrid.config import (
    CENTER,
    GOALKEEPER_SPOT,
    LINE_INDEX,
    Role,
    find_line_layout,
    get_role_band,
)
from lineupgrid.formation import line_sizes
from lineupgrid.models import FieldPosition


GOALKEEPER_CODES = frozenset({"G", "GK"})

_SPREAD_LEFT = 15.0
_SPREAD_RIGHT = 85.0


def classify_position(position_code: Optional[str]) -> Optional[Role]:
    """Map a free-text position code to a role, or ``None`` if unrecognized."""

    code = (position_code or "").strip().upper()
    if not code:
        return None
    if code in GOALKEEPER_CODES:
        return Role.GOALKEEPER
    if code == "D" or "B" in code:
        return Role.DEFENDER
    if "M" in code:
        return Role.MIDFIELDER
    if code == "F" or "W" in code or "S" in code:
        return Role.FORWARD
    return None


class LayoutStrategy(Protocol):
    name: str

    def line_size(self, formation_size: Optional[int], assigned: Optional[int]) -> Optional[int]:
        ...

    def locate(self, role: Role, size: Optional[int], index: int) -> Tuple[float, float]:
        ...


class FixedTableLayout:
    """Tabulated lines of 2-5 players; other sizes collapse to the band centre."""

    name = "fixed"

    def line_size(self, formation_size: Optional[int], assigned: Optional[int]) -> Optional[int]:
        return formation_size

    def locate(self, role: Role, size: Optional[int], index: int) -> Tuple[float, float]:
        layout = find_line_layout(role, size)
        if layout is None:
            return get_role_band(role).fallback
        return layout.slot(index)


class InterpolatedLayout(FixedTableLayout):
    """Sizes lines by assigned players and spreads untabulated sizes evenly."""

    name = "interpolated"

    def line_size(self, formation_size: Optional[int], assigned: Optional[int]) -> Optional[int]:
        return assigned if assigned else formation_size

    def locate(self, role: Role, size: Optional[int], index: int) -> Tuple[float, float]:
        if find_line_layout(role, size) is not None or not size or size < 1:
            return super().locate(role, size, index)

        y = get_role_band(role).y
        if size == 1:
            return CENTER[0], y
        step = (_SPREAD_RIGHT - _SPREAD_LEFT) / (size - 1)
        return _SPREAD_LEFT + (index % size) * step, y


_LAYOUTS = {layout.name: layout for layout in (FixedTableLayout(), InterpolatedLayout())}
DEFAULT_LAYOUT: LayoutStrategy = _LAYOUTS["fixed"]


def get_layout(name: str) -> LayoutStrategy:
    """Fetch a layout strategy by name, raising KeyError if missing."""

    key = name.strip().lower()
    if key not in _LAYOUTS:
        raise KeyError(f"No layout named {name!r}, expected one of {sorted(_LAYOUTS)}")
    return _LAYOUTS[key]


def role_to_field(
    role: Role,
    index_within_group: int,
    formation: str,
    layout: LayoutStrategy = DEFAULT_LAYOUT,
    assigned: Optional[int] = None,
) -> FieldPosition:
    """Locate a player by role; ``assigned`` is how many players share its line."""

    if role is Role.GOALKEEPER:
        return FieldPosition.of(GOALKEEPER_SPOT)

    size = layout.line_size(line_sizes(formation)[LINE_INDEX[role]], assigned)
    return FieldPosition.of(layout.locate(role, size, index_within_group))


def position_to_field(
    position_code: Optional[str],
    index_within_group: int,
    formation: str,
    layout: LayoutStrategy = DEFAULT_LAYOUT,
) -> FieldPosition:
    """Locate a player from a position code and its index within its line."""

    role = classify_position(position_code)
    if role is None:
        return FieldPosition.of(CENTER)
    return role_to_field(role, index_within_group, formation, layout)
