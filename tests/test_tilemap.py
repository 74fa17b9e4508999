# tests/test_tilemap.py
"""
Unit tests for the tilemap data model.

Covers:
- Coord value semantics
- Tile / Teleporter validation
- TileMap bounds, walkability and teleporter index
"""

from __future__ import annotations

import pytest

from tilemap import Coord, OutOfRangeError, Teleporter, Tile, TileMap


def test_coord_is_structural_value() -> None:
    a = Coord(1, 2, 3)

    assert a == (1, 2, 3)
    assert hash(a) == hash((1, 2, 3))
    assert {a: "x"}[(1, 2, 3)] == "x"
    assert a.offset(1, -1) == Coord(2, 1, 3)
    assert str(a) == "(1, 2, 3)"


def test_tile_rejects_non_positive_speed_modifier() -> None:
    with pytest.raises(ValueError):
        Tile(speed_modifier=0.0)
    with pytest.raises(ValueError):
        Tile(speed_modifier=-1.0)


def test_teleporter_validation_and_endpoints() -> None:
    with pytest.raises(ValueError):
        Teleporter(Coord(0, 0, 0), Coord(1, 1, 1), cost=-0.5)

    tp = Teleporter((0, 0, 0), (3, 4, 1), cost=2.0)  # type: ignore[arg-type]
    assert isinstance(tp.point_a, Coord)
    assert tp.exit_from(Coord(0, 0, 0)) == Coord(3, 4, 1)
    assert tp.exit_from(Coord(3, 4, 1)) == Coord(0, 0, 0)
    assert tp.exit_from(Coord(9, 9, 9)) is None
    assert tp.connects(Coord(3, 4, 1), Coord(0, 0, 0))
    assert not tp.connects(Coord(0, 0, 0), Coord(0, 0, 0))


def test_filled_map_dimensions_and_independent_tiles() -> None:
    tile_map = TileMap.filled(4, 3, 2)

    assert tile_map.dimensions == (4, 3, 2)
    assert (tile_map.width, tile_map.height, tile_map.depth) == (4, 3, 2)

    tile_map.get_tile(Coord(1, 1, 0)).walkable = False
    assert not tile_map.is_walkable(Coord(1, 1, 0))
    assert tile_map.is_walkable(Coord(1, 1, 1))
    assert tile_map.is_walkable(Coord(0, 0, 0))


def test_map_rejects_empty_or_ragged_tiles() -> None:
    with pytest.raises(ValueError):
        TileMap([])

    ragged = [
        [[Tile()], [Tile()]],
        [[Tile()]],
    ]
    with pytest.raises(ValueError):
        TileMap(ragged)

    uneven_depth = [
        [[Tile(), Tile()], [Tile()]],
    ]
    with pytest.raises(ValueError):
        TileMap(uneven_depth)


@pytest.mark.parametrize(
    "coord",
    [(-1, 0, 0), (0, -1, 0), (0, 0, -1), (5, 0, 0), (0, 5, 0), (0, 0, 1)],
)
def test_get_tile_out_of_range_raises(coord) -> None:
    tile_map = TileMap.filled(5, 5, 1)

    with pytest.raises(OutOfRangeError) as excinfo:
        tile_map.get_tile(Coord(*coord))

    assert isinstance(excinfo.value, IndexError)
    assert excinfo.value.coord == coord
    assert excinfo.value.dimensions == (5, 5, 1)
    assert not tile_map.is_walkable(Coord(*coord))


def test_add_teleporter_indexes_both_endpoints() -> None:
    tile_map = TileMap.filled(5, 5, 2)
    a, b, c = Coord(0, 0, 0), Coord(4, 4, 1), Coord(2, 2, 0)
    first = Teleporter(a, b, 1.5)
    second = Teleporter(a, c, 0.5)

    tile_map.add_teleporter(first)
    tile_map.add_teleporter(second)

    assert tile_map.teleporters == (first, second)
    assert tile_map.teleporters_at(a) == (first, second)
    assert tile_map.teleporters_at(b) == (first,)
    assert tile_map.teleporters_at(c) == (second,)
    assert tile_map.teleporters_at(Coord(1, 1, 1)) == ()


def test_add_teleporter_does_not_deduplicate() -> None:
    tile_map = TileMap.filled(3, 3, 1)
    tp = Teleporter(Coord(0, 0, 0), Coord(2, 2, 0), 1.0)

    tile_map.add_teleporter(tp)
    tile_map.add_teleporter(tp)

    assert len(tile_map.teleporters) == 2
    assert len(tile_map.teleporters_at(Coord(0, 0, 0))) == 2
    assert len(tile_map.teleporters_at(Coord(2, 2, 0))) == 2


def test_teleporter_views_are_read_only() -> None:
    tile_map = TileMap.filled(3, 3, 1)
    tile_map.add_teleporter(Teleporter(Coord(0, 0, 0), Coord(2, 2, 0), 1.0))

    assert isinstance(tile_map.teleporters, tuple)
    assert isinstance(tile_map.teleporters_at(Coord(0, 0, 0)), tuple)


def test_tile_rejects_non_positive_speed_modifier_after_construction() -> None:
    tile_map = TileMap.filled(2, 1, 1)
    tile = tile_map.get_tile(Coord(1, 0, 0))

    with pytest.raises(ValueError):
        tile.speed_modifier = 0.0
    with pytest.raises(ValueError):
        tile.speed_modifier = -2.0

    assert tile.speed_modifier == 1.0
    tile.speed_modifier = 0.5
    assert tile.speed_modifier == 0.5
