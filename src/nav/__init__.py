# src/nav/__init__.py
"""
Navigation subsystem: A* over a TileMap.

Provides:
- PathSearch: find_path / search / calculate_move_cost / path_cost
- PathfindingResult: path plus diagnostics
- SearchNode: per-search bookkeeping
- PathSearchConfig / load_path_search_config: YAML movement settings
- configure_logging: stdout handler on the nav / tilemap loggers, level from YAML
"""

from __future__ import annotations

from .config import PathSearchConfig, load_path_search_config
from .costs import (
    DEFAULT_MOVE_COST,
    DIAGONAL_MOVE_COST,
    INVALID_STEP_COST,
    UNDEFINED_Z_STEP_COST,
)
from .logging_config import configure_logging
from .node import SearchNode
from .pathfinder import PathfindingResult, PathSearch

__all__ = [
    "DEFAULT_MOVE_COST",
    "DIAGONAL_MOVE_COST",
    "INVALID_STEP_COST",
    "UNDEFINED_Z_STEP_COST",
    "PathSearch",
    "PathSearchConfig",
    "PathfindingResult",
    "SearchNode",
    "configure_logging",
    "load_path_search_config",
]
