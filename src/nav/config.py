# src/nav/config.py
"""
YAML-backed movement settings for PathSearch.

Layout of config/pathfinding.yaml:

    movement:
      allow_diagonal: true
      default_move_cost: 1.0
      diagonal_move_cost: 1.414
    search:
      max_steps: null
    logging:
      level: INFO

Every key is optional; missing ones fall back to the dataclass defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .costs import DEFAULT_MOVE_COST, DIAGONAL_MOVE_COST

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "pathfinding.yaml"


@dataclass
class PathSearchConfig:
    """Movement constants fixed at PathSearch construction."""

    allow_diagonal: bool = True
    default_move_cost: float = DEFAULT_MOVE_COST
    diagonal_move_cost: float = DIAGONAL_MOVE_COST
    max_steps: Optional[int] = None  # None = unbounded search
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PathSearchConfig":
        """Convenience constructor from a plain dict (e.g. YAML)."""
        movement = data.get("movement") or {}
        search = data.get("search") or {}
        logging_cfg = data.get("logging") or {}
        max_steps = search.get("max_steps")
        cfg = cls(
            allow_diagonal=bool(movement.get("allow_diagonal", True)),
            default_move_cost=float(movement.get("default_move_cost", DEFAULT_MOVE_COST)),
            diagonal_move_cost=float(movement.get("diagonal_move_cost", DIAGONAL_MOVE_COST)),
            max_steps=int(max_steps) if max_steps is not None else None,
            log_level=str(logging_cfg.get("level", "INFO")).upper(),
        )
        cfg.validate()
        return cfg

    def validate(self) -> None:
        if self.default_move_cost <= 0:
            raise ValueError(f"default_move_cost must be > 0, got {self.default_move_cost!r}")
        if self.diagonal_move_cost <= 0:
            raise ValueError(f"diagonal_move_cost must be > 0, got {self.diagonal_move_cost!r}")
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError(f"max_steps must be >= 0 or null, got {self.max_steps!r}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown logging.level: {self.log_level!r}")


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def load_path_search_config(path: Optional[Path] = None) -> PathSearchConfig:
    """Load PathSearchConfig from YAML (defaults to config/pathfinding.yaml)."""
    return PathSearchConfig.from_dict(_load_yaml(Path(path) if path else DEFAULT_CONFIG_PATH))
