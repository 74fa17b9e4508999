# src/tilemap/coords.py
"""Integer cell coordinates."""

from __future__ import annotations

from typing import NamedTuple


class Coord(NamedTuple):
    """
    Immutable (x, y, z) cell coordinate.

    Equality and hashing are structural (tuple semantics), so a plain
    ``(x, y, z)`` tuple can be used anywhere a Coord is looked up.
    """

    x: int
    y: int
    z: int

    def offset(self, dx: int, dy: int, dz: int = 0) -> "Coord":
        return Coord(self.x + dx, self.y + dy, self.z + dz)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"
