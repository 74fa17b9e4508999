# src/tilemap/tiles.py
"""
Per-cell static data.

Tiles are populated by whoever builds the map. The search only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Tile:
    """
    A single grid cell.

    speed_modifier divides movement cost into this tile:
      - 2.0 halves the cost of stepping onto it
      - 0.5 doubles it

    speed_modifier must stay > 0, both at construction and when the map
    builder edits the tile later; assigning 0 or less raises ValueError.
    Edits must be finished before any search starts.
    """

    walkable: bool = True
    speed_modifier: float = 1.0

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "speed_modifier" and value <= 0:
            raise ValueError(f"speed_modifier must be > 0, got {value!r}")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return "O" if self.walkable else "X"
