# src/nav/costs.py
"""
Movement cost model shared by the search and by cost auditing.

Planar step cost:
    (diagonal_cost if |dx| + |dy| > 1 else default_cost) / speed_modifier

Teleporter edges cost their fixed `cost` and are never scaled.
"""

from __future__ import annotations

import math
import sys

from tilemap import Coord, Tile, TileMap

DEFAULT_MOVE_COST = 1.0
DIAGONAL_MOVE_COST = 1.414

# Returned for a same-level jump of more than one cell. Finite so that
# callers summing a path's cost don't need a special case.
INVALID_STEP_COST = sys.float_info.max

# Returned for any z change not covered by a teleporter.
UNDEFINED_Z_STEP_COST = math.inf


def is_diagonal(dx: int, dy: int) -> bool:
    return abs(dx) + abs(dy) > 1


def planar_step_cost(
    dx: int,
    dy: int,
    speed_modifier: float = 1.0,
    default_cost: float = DEFAULT_MOVE_COST,
    diagonal_cost: float = DIAGONAL_MOVE_COST,
) -> float:
    """Cost of one same-level step onto a tile with `speed_modifier`."""
    cost = diagonal_cost if is_diagonal(dx, dy) else default_cost
    return cost / speed_modifier


def move_cost(
    from_: Coord,
    to: Coord,
    tile_map: TileMap,
    tile: Tile,
    default_cost: float = DEFAULT_MOVE_COST,
    diagonal_cost: float = DIAGONAL_MOVE_COST,
) -> float:
    """
    Cost of a single step from `from_` to `to`, where `tile` is the tile at `to`.

    Teleporters are checked first. Otherwise the step must stay on the
    same z-level and move at most one cell along x and y.
    """
    for teleporter in tile_map.teleporters_at(from_):
        if teleporter.exit_from(from_) == to:
            return teleporter.cost

    dx = abs(from_[0] - to[0])
    dy = abs(from_[1] - to[1])
    dz = abs(from_[2] - to[2])

    if dz > 0:
        return UNDEFINED_Z_STEP_COST

    if dx <= 1 and dy <= 1:
        return planar_step_cost(dx, dy, tile.speed_modifier, default_cost, diagonal_cost)

    return INVALID_STEP_COST
