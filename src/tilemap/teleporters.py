# src/tilemap/teleporters.py
"""Fixed-cost links between arbitrary cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .coords import Coord


@dataclass(frozen=True)
class Teleporter:
    """
    Bidirectional edge between point_a and point_b.

    Traversal costs `cost` in either direction, regardless of how far
    apart the endpoints are or which z-level they sit on.
    """

    point_a: Coord
    point_b: Coord
    cost: float = 1.0

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"Teleporter cost must be >= 0, got {self.cost!r}")
        # Accept plain tuples from callers; store Coord.
        object.__setattr__(self, "point_a", Coord(*self.point_a))
        object.__setattr__(self, "point_b", Coord(*self.point_b))

    def exit_from(self, coord: Coord) -> Optional[Coord]:
        """Return the endpoint opposite `coord`, or None if `coord` is not an endpoint."""
        if coord == self.point_a:
            return self.point_b
        if coord == self.point_b:
            return self.point_a
        return None

    def connects(self, a: Coord, b: Coord) -> bool:
        return (a == self.point_a and b == self.point_b) or (
            a == self.point_b and b == self.point_a
        )
