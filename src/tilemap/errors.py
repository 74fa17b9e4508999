# src/tilemap/errors.py
"""Domain errors for tile map access."""

from __future__ import annotations

from typing import Tuple


class OutOfRangeError(IndexError):
    """
    Raised when a coordinate lies outside [0, width) x [0, height) x [0, depth).

    Only direct tile access raises this. Pathfinding treats out-of-bounds
    endpoints as "no path" instead.
    """

    def __init__(self, coord: Tuple[int, int, int], dimensions: Tuple[int, int, int]) -> None:
        self.coord = tuple(coord)
        self.dimensions = tuple(dimensions)
        super().__init__(
            f"Point {self.coord} is out of bounds for map of size "
            f"{self.dimensions[0]}x{self.dimensions[1]}x{self.dimensions[2]}"
        )
