# tests/test_nav_config.py
"""
Tests for the YAML movement config loader.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from nav import PathSearch, PathSearchConfig, load_path_search_config
from nav.config import DEFAULT_CONFIG_PATH
from tilemap import Coord, TileMap


def test_default_config_file_is_loadable() -> None:
    assert DEFAULT_CONFIG_PATH.exists()

    cfg = load_path_search_config()

    assert cfg.allow_diagonal is True
    assert cfg.default_move_cost == pytest.approx(1.0)
    assert cfg.diagonal_move_cost == pytest.approx(1.414)
    assert cfg.max_steps is None
    assert cfg.log_level == "INFO"


def test_custom_config_file(tmp_path: Path) -> None:
    path = tmp_path / "pathfinding.yaml"
    path.write_text(
        "movement:\n"
        "  allow_diagonal: false\n"
        "  default_move_cost: 2.0\n"
        "search:\n"
        "  max_steps: 50\n"
        "logging:\n"
        "  level: debug\n",
        encoding="utf-8",
    )

    cfg = load_path_search_config(path)

    assert cfg == PathSearchConfig(
        allow_diagonal=False,
        default_move_cost=2.0,
        diagonal_move_cost=1.414,
        max_steps=50,
        log_level="DEBUG",
    )


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_path_search_config(path) == PathSearchConfig()


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_path_search_config(tmp_path / "nope.yaml")


def test_non_mapping_config_raises(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_path_search_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"movement": {"default_move_cost": 0}},
        {"movement": {"diagonal_move_cost": -1.0}},
        {"search": {"max_steps": -5}},
        {"logging": {"level": "chatty"}},
    ],
)
def test_invalid_values_rejected(data) -> None:
    with pytest.raises(ValueError):
        PathSearchConfig.from_dict(data)


def test_search_from_config_applies_settings() -> None:
    tile_map = TileMap.filled(4, 4, 1)
    cfg = PathSearchConfig(allow_diagonal=False, default_move_cost=3.0, max_steps=100)

    search = PathSearch.from_config(tile_map, cfg)
    result = search.search(Coord(0, 0, 0), Coord(1, 1, 0))

    assert search.max_steps == 100
    assert len(result.path) == 3
    assert result.cost == pytest.approx(6.0)
