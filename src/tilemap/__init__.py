# src/tilemap/__init__.py
"""
Tile map data model for grid pathfinding.

Provides:
- Coord: immutable (x, y, z) cell coordinate
- Tile: per-cell walkability and speed modifier
- Teleporter: fixed-cost bidirectional link between two cells
- TileMap: dense 3D tile array plus teleporter index
- OutOfRangeError: raised by direct tile access outside the map
"""

from __future__ import annotations

from .coords import Coord
from .errors import OutOfRangeError
from .map import TileMap
from .teleporters import Teleporter
from .tiles import Tile

__all__ = [
    "Coord",
    "OutOfRangeError",
    "Teleporter",
    "Tile",
    "TileMap",
]
