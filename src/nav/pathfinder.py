# src/nav/pathfinder.py
"""
A* pathfinding over a TileMap.

- 3D Manhattan distance heuristic.
- 8-directional (or 4 with diagonals off) moves on the same z-level.
- z-level changes only through teleporters.
- Optional max_steps guard to bound huge searches.

The Manhattan heuristic stops being admissible once teleporters or
speed modifiers > 1 make a move cheaper than one unit per axis step.
In those cases the returned path is valid but not guaranteed optimal.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from tilemap import Coord, Tile, TileMap

from .config import PathSearchConfig
from .costs import (
    DEFAULT_MOVE_COST,
    DIAGONAL_MOVE_COST,
    move_cost,
    planar_step_cost,
)
from .node import SearchNode

log = logging.getLogger(__name__)

_ORTHOGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
_ALL_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)

# Frontier entry: (f_score, h_score, insertion order, g_score at push, node)
_HeapEntry = Tuple[float, float, int, float, SearchNode]


@dataclass
class PathfindingResult:
    """Structured result for a pathfinding attempt."""

    path: List[Coord] = field(default_factory=list)
    success: bool = False
    reason: str | None = None
    cost: float = 0.0
    nodes_expanded: int = 0


class PathSearch:
    """
    A* search bound to one TileMap and one set of movement constants.

    Move costs are fixed at construction. Each find_path call keeps its own
    frontier and node table, so one PathSearch can serve many calls.
    """

    def __init__(
        self,
        width: int,
        height: int,
        depth: int,
        tile_map: TileMap,
        allow_diagonal: bool = True,
        *,
        default_move_cost: float = DEFAULT_MOVE_COST,
        diagonal_move_cost: float = DIAGONAL_MOVE_COST,
        max_steps: Optional[int] = None,
    ) -> None:
        if (width, height, depth) != tile_map.dimensions:
            raise ValueError(
                f"Search dimensions {(width, height, depth)} do not match "
                f"map dimensions {tile_map.dimensions}"
            )
        if default_move_cost <= 0 or diagonal_move_cost <= 0:
            raise ValueError("Move costs must be > 0")
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be >= 0 or None, got {max_steps!r}")

        self.width = width
        self.height = height
        self.depth = depth
        self.tile_map = tile_map
        self.allow_diagonal = allow_diagonal
        self.default_move_cost = default_move_cost
        self.diagonal_move_cost = diagonal_move_cost
        self.max_steps = max_steps

        self._offsets = _ALL_OFFSETS if allow_diagonal else _ORTHOGONAL_OFFSETS

    @classmethod
    def for_map(cls, tile_map: TileMap, allow_diagonal: bool = True, **kwargs) -> "PathSearch":
        """Build a search sized to `tile_map`."""
        width, height, depth = tile_map.dimensions
        return cls(width, height, depth, tile_map, allow_diagonal, **kwargs)

    @classmethod
    def from_config(cls, tile_map: TileMap, config: PathSearchConfig) -> "PathSearch":
        return cls.for_map(
            tile_map,
            config.allow_diagonal,
            default_move_cost=config.default_move_cost,
            diagonal_move_cost=config.diagonal_move_cost,
            max_steps=config.max_steps,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_path(self, start: Coord, goal: Coord) -> Optional[List[Coord]]:
        """
        Shortest path from start to goal, inclusive of both ends.

        Returns None when no path exists or either endpoint is out of
        bounds or unwalkable.
        """
        result = self.search(start, goal)
        return result.path if result.success else None

    def search(self, start: Coord, goal: Coord) -> PathfindingResult:
        """
        Run A* from start to goal and report diagnostics.

        Returns a PathfindingResult with:
          - path: start..goal coordinates, empty on failure
          - success: bool
          - reason: "invalid_endpoint", "no_path_found" or
            "max_steps_exhausted" when not successful
          - cost: accumulated cost of the returned path
          - nodes_expanded: positions popped and processed
        """
        start = Coord(*start)
        goal = Coord(*goal)

        if not self._is_open(start) or not self._is_open(goal):
            log.debug("Start %s or goal %s is invalid (out of bounds or unwalkable)", start, goal)
            return PathfindingResult(reason="invalid_endpoint")

        if start == goal:
            return PathfindingResult(path=[start], success=True)

        counter = itertools.count()
        start_node = SearchNode(start, 0.0, self.heuristic(start, goal))

        open_heap: List[_HeapEntry] = []
        heapq.heappush(
            open_heap,
            (start_node.f_score, start_node.h_score, next(counter), 0.0, start_node),
        )
        nodes: Dict[Coord, SearchNode] = {start: start_node}
        g_scores: Dict[Coord, float] = {start: 0.0}

        nodes_expanded = 0

        while open_heap:
            _, _, _, entry_g, current = heapq.heappop(open_heap)

            # A cheaper route to this position was pushed after this entry.
            if entry_g > g_scores[current.position]:
                continue

            if current.position == goal:
                nodes_expanded += 1
                path = self._reconstruct_path(current)
                log.debug(
                    "Path found from %s to %s: %d steps, cost=%.4f, nodes_expanded=%d",
                    start,
                    goal,
                    len(path) - 1,
                    current.g_score,
                    nodes_expanded,
                )
                return PathfindingResult(
                    path=path,
                    success=True,
                    cost=current.g_score,
                    nodes_expanded=nodes_expanded,
                )

            if self.max_steps is not None and nodes_expanded >= self.max_steps:
                log.debug(
                    "Search from %s to %s stopped after max_steps=%d",
                    start,
                    goal,
                    self.max_steps,
                )
                return PathfindingResult(
                    reason="max_steps_exhausted",
                    nodes_expanded=nodes_expanded,
                )

            nodes_expanded += 1

            for neighbor, step_cost in self.neighbors(current.position):
                tentative_g = current.g_score + step_cost

                if not tentative_g < g_scores.get(neighbor, math.inf):
                    continue

                g_scores[neighbor] = tentative_g
                h_score = self.heuristic(neighbor, goal)

                node = nodes.get(neighbor)
                if node is None:
                    node = SearchNode(neighbor, tentative_g, h_score, current)
                    nodes[neighbor] = node
                else:
                    # No decrease-key: push a fresh entry and let the old
                    # one be skipped on pop.
                    node.g_score = tentative_g
                    node.h_score = h_score
                    node.parent = current

                heapq.heappush(
                    open_heap,
                    (node.f_score, h_score, next(counter), tentative_g, node),
                )

        log.debug(
            "No path found from %s to %s (nodes_expanded=%d)",
            start,
            goal,
            nodes_expanded,
        )
        return PathfindingResult(reason="no_path_found", nodes_expanded=nodes_expanded)

    def neighbors(self, coord: Coord) -> Iterator[Tuple[Coord, float]]:
        """
        Yield (position, step_cost) for every move out of `coord`.

        1. Planar moves on the same z-level, cost scaled by the destination
           tile's speed modifier.
        2. Teleporter exits, at the teleporter's fixed cost.
        """
        x, y, z = coord

        for dx, dy in self._offsets:
            neighbor = Coord(x + dx, y + dy, z)
            if not self._is_open(neighbor):
                continue
            tile = self.tile_map.get_tile(neighbor)
            yield neighbor, planar_step_cost(
                dx,
                dy,
                tile.speed_modifier,
                self.default_move_cost,
                self.diagonal_move_cost,
            )

        for teleporter in self.tile_map.teleporters_at(coord):
            exit_point = teleporter.exit_from(coord)
            if exit_point is not None and self._is_open(exit_point):
                yield exit_point, teleporter.cost

    @staticmethod
    def heuristic(a: Coord, b: Coord) -> float:
        """Manhattan distance heuristic for A*."""
        return float(abs(a[0] - b[0]) + abs(a[1] - b[1]) + abs(a[2] - b[2]))

    @staticmethod
    def calculate_move_cost(from_: Coord, to: Coord, tile_map: TileMap, tile: Tile) -> float:
        """
        Cost of a single step, for auditing a path held outside the search.

        Uses the module default move costs. `tile` is the tile at `to`.
        Returns inf for an uncovered z change and sys.float_info.max for any
        other non-adjacent jump, so totals never raise.
        """
        return move_cost(Coord(*from_), Coord(*to), tile_map, tile)

    def path_cost(self, path: Sequence[Coord]) -> float:
        """
        Approximate audit of `path`'s cost under this search's move costs.

        Each step is priced with the calculate_move_cost rule, which checks
        teleporters first. If a teleporter joins two adjacent cells, the step
        is charged the teleporter cost even when the search took the planar
        move, so this can differ from PathfindingResult.cost.
        """
        total = 0.0
        for from_, to in zip(path, path[1:]):
            to = Coord(*to)
            total += move_cost(
                Coord(*from_),
                to,
                self.tile_map,
                self.tile_map.get_tile(to),
                self.default_move_cost,
                self.diagonal_move_cost,
            )
        return total

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _in_bounds(self, coord: Coord) -> bool:
        x, y, z = coord
        return 0 <= x < self.width and 0 <= y < self.height and 0 <= z < self.depth

    def _is_open(self, coord: Coord) -> bool:
        return self._in_bounds(coord) and self.tile_map.is_walkable(coord)

    @staticmethod
    def _reconstruct_path(goal_node: SearchNode) -> List[Coord]:
        """Follow parent links back to start, then reverse."""
        path = [node.position for node in goal_node.iter_lineage()]
        path.reverse()
        return path
