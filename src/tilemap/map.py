# src/tilemap/map.py
"""
TileMap: dense 3D tile array plus a teleporter index.

This module does not search. It only:
- Owns tiles[x][y][z] for a width x height x depth box.
- Answers bounds and walkability queries.
- Indexes teleporters by each endpoint.

Tiles and teleporters must be fully populated before any search runs.
Concurrent searches against one TileMap are fine as long as nobody mutates
it at the same time.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from .coords import Coord
from .errors import OutOfRangeError
from .teleporters import Teleporter
from .tiles import Tile

log = logging.getLogger(__name__)


class TileMap:
    """
    Navigation map consumed by PathSearch.

    Responsibilities:
    - Single source of truth for bounds and walkability.
    - Keep the teleporter master list and per-endpoint buckets in sync.

    It does NOT:
    - Generate terrain or obstacles.
    - Load map data from disk.
    """

    def __init__(self, tiles: Sequence[Sequence[Sequence[Tile]]]) -> None:
        width = len(tiles)
        height = len(tiles[0]) if width else 0
        depth = len(tiles[0][0]) if height else 0
        if not (width and height and depth):
            raise ValueError("TileMap requires at least one tile on every axis")

        for x, column in enumerate(tiles):
            if len(column) != height:
                raise ValueError(f"Ragged tile array: column x={x} has height {len(column)}, expected {height}")
            for y, stack in enumerate(column):
                if len(stack) != depth:
                    raise ValueError(
                        f"Ragged tile array: stack ({x}, {y}) has depth {len(stack)}, expected {depth}"
                    )

        self._tiles = tiles
        self._width = width
        self._height = height
        self._depth = depth

        self._teleporters: List[Teleporter] = []
        self._teleporters_by_point: Dict[Coord, List[Teleporter]] = {}

    @classmethod
    def filled(
        cls,
        width: int,
        height: int,
        depth: int,
        *,
        walkable: bool = True,
        speed_modifier: float = 1.0,
    ) -> "TileMap":
        """Build a map where every cell gets its own Tile with the given values."""
        tiles = [
            [
                [Tile(walkable=walkable, speed_modifier=speed_modifier) for _ in range(depth)]
                for _ in range(height)
            ]
            for _ in range(width)
        ]
        return cls(tiles)

    # ------------------------------------------------------------------
    # Dimensions / bounds
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def dimensions(self) -> Tuple[int, int, int]:
        return self._width, self._height, self._depth

    def in_bounds(self, coord: Coord) -> bool:
        x, y, z = coord
        return 0 <= x < self._width and 0 <= y < self._height and 0 <= z < self._depth

    # ------------------------------------------------------------------
    # Tile queries
    # ------------------------------------------------------------------

    def get_tile(self, coord: Coord) -> Tile:
        """Return the tile at `coord`; raises OutOfRangeError outside the map."""
        if not self.in_bounds(coord):
            raise OutOfRangeError(coord, self.dimensions)
        x, y, z = coord
        return self._tiles[x][y][z]

    def is_walkable(self, coord: Coord) -> bool:
        """
        True if `coord` is inside the map and its tile is walkable.

        Unlike get_tile, this never raises.
        """
        if not self.in_bounds(coord):
            return False
        x, y, z = coord
        return self._tiles[x][y][z].walkable

    # ------------------------------------------------------------------
    # Teleporters
    # ------------------------------------------------------------------

    def add_teleporter(self, teleporter: Teleporter) -> None:
        """
        Register a teleporter in the master list and under both endpoints.

        No de-duplication: adding the same teleporter twice yields two
        identical edges.
        """
        self._teleporters.append(teleporter)
        self._teleporters_by_point.setdefault(teleporter.point_a, []).append(teleporter)
        self._teleporters_by_point.setdefault(teleporter.point_b, []).append(teleporter)
        log.debug(
            "Added teleporter %s <-> %s (cost=%s)",
            teleporter.point_a,
            teleporter.point_b,
            teleporter.cost,
        )

    @property
    def teleporters(self) -> Tuple[Teleporter, ...]:
        return tuple(self._teleporters)

    def teleporters_at(self, coord: Coord) -> Tuple[Teleporter, ...]:
        """Teleporters with an endpoint at `coord` (empty if none)."""
        return tuple(self._teleporters_by_point.get(Coord(*coord), ()))

    def __repr__(self) -> str:
        return (
            f"TileMap({self._width}x{self._height}x{self._depth}, "
            f"teleporters={len(self._teleporters)})"
        )
