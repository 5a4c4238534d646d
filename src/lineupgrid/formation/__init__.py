"""Formation parsing and normalization."""

from .parser import line_sizes, normalize_formation, parse_formation

__all__ = ["line_sizes", "normalize_formation", "parse_formation"]
