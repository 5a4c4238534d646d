"""Parse and canonicalize dash-delimited formation strings."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from lineupgrid.config import DEFAULT_FORMATION, KNOWN_FORMATIONS


logger = logging.getLogger(__name__)

_DASH_VARIANTS = re.compile("[‐‑‒–—―−﹣－]")
_WHITESPACE = re.compile(r"\s+")
_KNOWN = frozenset(KNOWN_FORMATIONS)


def _parse_token(token: str) -> Optional[int]:
    try:
        return int(token.strip())
    except ValueError:
        return None


def parse_formation(formation: str) -> List[Optional[int]]:
    """Split a formation into line sizes; unparseable tokens become ``None``."""

    return [_parse_token(token) for token in formation.split("-")]


def line_sizes(formation: str) -> Tuple[Optional[int], Optional[int], Optional[int]]:
    """Return the defender, midfielder and forward line sizes.

    Formations with fewer than three lines are padded with zeros. Anything past
    the third token is ignored, so ``"4-2-3-1"`` reads as 4 defenders,
    2 midfielders and 3 forwards.
    """

    parts = parse_formation(formation)
    if len(parts) < 3:
        parts.extend([0] * (3 - len(parts)))
    return parts[0], parts[1], parts[2]


def normalize_formation(formation: Optional[str]) -> str:
    """Canonicalize a formation, falling back to the default when unknown."""

    if not formation:
        return DEFAULT_FORMATION

    normalized = _DASH_VARIANTS.sub("-", _WHITESPACE.sub("", formation))
    if normalized in _KNOWN:
        return normalized

    logger.warning("Unknown formation %r, using %s", formation, DEFAULT_FORMATION)
    return DEFAULT_FORMATION
