"""Turn football lineups into pitch coordinates."""

from lineupgrid.formation import normalize_formation, parse_formation
from lineupgrid.models import ArrangedPlayer, FieldPosition, Player, RosterEntry
from lineupgrid.placement import arrange_players, detect_formation

__all__ = [
    "ArrangedPlayer",
    "FieldPosition",
    "Player",
    "RosterEntry",
    "arrange_players",
    "detect_formation",
    "normalize_formation",
    "parse_formation",
]
