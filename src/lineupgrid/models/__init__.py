"""Domain models for lineup placement."""

from .player import ArrangedPlayer, FieldPosition, Player, RosterEntry

__all__ = ["ArrangedPlayer", "FieldPosition", "Player", "RosterEntry"]
