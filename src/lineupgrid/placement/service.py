"""Assign a pitch coordinate to every player of a starting lineup."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Optional, Union

from lineupgrid.config import GOALKEEPER_SPOT, Role
from lineupgrid.formation import normalize_formation
from lineupgrid.models import ArrangedPlayer, FieldPosition, Player, RosterEntry
from lineupgrid.placement.grid import grid_to_field
from lineupgrid.placement.heuristic import (
    DEFAULT_LAYOUT,
    LayoutStrategy,
    classify_position,
    get_layout,
    role_to_field,
)


logger = logging.getLogger(__name__)

# Roster slots assumed to hold the back line and the midfield when nothing
# else is known about a player; everything past the midfield is a forward.
_INFERRED_DEFENDER_SLOTS = range(1, 5)
_INFERRED_MIDFIELDER_SLOTS = range(5, 8)


@dataclass(frozen=True)
class GridSourced:
    grid: str


@dataclass(frozen=True)
class CodeSourced:
    position_code: str
    role: Role


@dataclass(frozen=True)
class IndexInferred:
    role: Role


PlacementSource = Union[GridSourced, CodeSourced, IndexInferred]


@dataclass(frozen=True)
class GroupCounters:
    """Next free slot in each outfield line."""

    defenders: int = 0
    midfielders: int = 0
    forwards: int = 0

    def index_for(self, role: Role) -> int:
        if role is Role.DEFENDER:
            return self.defenders
        if role is Role.MIDFIELDER:
            return self.midfielders
        if role is Role.FORWARD:
            return self.forwards
        raise ValueError(f"{role.name} does not occupy a counted line")

    def advance(self, role: Role) -> "GroupCounters":
        if role is Role.DEFENDER:
            return replace(self, defenders=self.defenders + 1)
        if role is Role.MIDFIELDER:
            return replace(self, midfielders=self.midfielders + 1)
        if role is Role.FORWARD:
            return replace(self, forwards=self.forwards + 1)
        return self


@dataclass(frozen=True)
class PlacementTrace:
    """Diagnostic record of how one player was placed."""

    player_id: Union[int, str]
    name: str
    strategy: str
    role: Optional[Role]
    index_within_group: Optional[int]
    position: FieldPosition


TraceSink = Callable[[PlacementTrace], None]


def infer_role_from_index(roster_index: int) -> Role:
    if roster_index == 0:
        return Role.GOALKEEPER
    if roster_index in _INFERRED_DEFENDER_SLOTS:
        return Role.DEFENDER
    if roster_index in _INFERRED_MIDFIELDER_SLOTS:
        return Role.MIDFIELDER
    return Role.FORWARD


def resolve_source(player: Player, roster_index: int) -> PlacementSource:
    """Pick the strongest placement signal a player carries."""

    if player.grid:
        return GridSourced(grid=player.grid)
    role = classify_position(player.position_code)
    if role is not None:
        return CodeSourced(position_code=player.position_code or "", role=role)
    return IndexInferred(role=infer_role_from_index(roster_index))


def _as_player(item: Union[Player, RosterEntry]) -> Player:
    return item.player if isinstance(item, RosterEntry) else item


def _resolve_layout(layout: Union[LayoutStrategy, str, None]) -> LayoutStrategy:
    if layout is None:
        return DEFAULT_LAYOUT
    if isinstance(layout, str):
        return get_layout(layout)
    return layout


def _emit(trace: Optional[TraceSink], record: PlacementTrace) -> None:
    if trace is None:
        logger.debug(
            "%s (%s) placed via %s role=%s index=%s -> (%.1f, %.1f)",
            record.name,
            record.player_id,
            record.strategy,
            record.role.name if record.role else None,
            record.index_within_group,
            record.position.x,
            record.position.y,
        )
        return
    try:
        trace(record)
    except Exception:
        logger.warning("Placement trace sink failed for player %s", record.player_id, exc_info=True)


def arrange_players(
    roster: Iterable[Union[Player, RosterEntry]],
    formation: Optional[str],
    *,
    layout: Union[LayoutStrategy, str, None] = None,
    mirror: bool = False,
    trace: Optional[TraceSink] = None,
) -> List[ArrangedPlayer]:
    """Return the roster, in order, with a field position attached to each player.

    Grid cells win over position codes, which win over the player's slot in
    the roster. Line indices are handed out in roster order, so the n-th
    defender listed takes the n-th defender slot of its line. With
    ``mirror`` set, x is reflected for the side attacking the other way.
    """

    players = [_as_player(item) for item in roster]
    sources = [resolve_source(player, roster_index) for roster_index, player in enumerate(players)]
    strategy = _resolve_layout(layout)
    canonical = normalize_formation(formation)

    line_counts: Counter[Role] = Counter(
        source.role for source in sources if not isinstance(source, GridSourced)
    )

    counters = GroupCounters()
    arranged: List[ArrangedPlayer] = []
    for player, source in zip(players, sources):
        role: Optional[Role] = None
        index: Optional[int] = None

        if isinstance(source, GridSourced):
            position = grid_to_field(source.grid)
            strategy_name = "grid"
        else:
            role = source.role
            strategy_name = "position" if isinstance(source, CodeSourced) else "roster-index"
            if role is Role.GOALKEEPER:
                position = FieldPosition.of(GOALKEEPER_SPOT)
            else:
                index = counters.index_for(role)
                position = role_to_field(role, index, canonical, strategy, assigned=line_counts[role])
                counters = counters.advance(role)

        if mirror:
            position = position.mirrored()

        _emit(
            trace,
            PlacementTrace(
                player_id=player.player_id,
                name=player.name,
                strategy=strategy_name,
                role=role,
                index_within_group=index,
                position=position,
            ),
        )
        arranged.append(ArrangedPlayer(player=player, field_position=position))

    return arranged
