#!/usr/bin/env python3
"""
tools/smoke_pathfinding.py

Minimal harness to sanity-check PathSearch on a large map.

Builds a 250x250x10 map with:
    - a few single-cell obstacles on z=0 and z=1
    - a wall at x=10 on z=1 with a gap at y=0
    - six teleporters linking z-levels

Then routes (0, 0, 0) -> (9, 9, 4) and prints the path, its audited cost
and how long the search took.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from rich.console import Console
from rich.table import Table

# ---------------------------------------------------------------------------
# Ensure src/ is on sys.path when running as a script
# ---------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# ---------------------------------------------------------------------------
# Imports from the project
# ---------------------------------------------------------------------------

from nav import PathSearch, configure_logging, load_path_search_config  # type: ignore[import]
from tilemap import Coord, Teleporter, TileMap  # type: ignore[import]

WIDTH, HEIGHT, DEPTH = 250, 250, 10


def build_demo_map() -> TileMap:
    tile_map = TileMap.filled(WIDTH, HEIGHT, DEPTH)

    for blocked in ((5, 5, 0), (5, 6, 0), (5, 7, 0), (4, 6, 1), (5, 6, 1), (6, 6, 1)):
        tile_map.get_tile(Coord(*blocked)).walkable = False

    # Wall across z=1 at x=10, open only at y=0
    for y in range(1, HEIGHT):
        tile_map.get_tile(Coord(10, y, 1)).walkable = False

    teleporters = [
        Teleporter(Coord(1, 1, 0), Coord(8, 8, 1), 2.0),
        Teleporter(Coord(30, 8, 2), Coord(9, 10, 2), 0.5),
        Teleporter(Coord(0, 0, 0), Coord(0, 0, 1), 1.0),
        Teleporter(Coord(36, 13, 1), Coord(36, 13, 2), 1.0),
        Teleporter(Coord(0, 15, 2), Coord(0, 15, 3), 1.0),
        Teleporter(Coord(5, 8, 4), Coord(5, 8, 3), 1.0),
    ]
    for teleporter in teleporters:
        tile_map.add_teleporter(teleporter)

    return tile_map


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Smoke test harness for nav.PathSearch",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a pathfinding YAML file (default: config/pathfinding.yaml)",
    )
    parser.add_argument(
        "--no-diagonal",
        action="store_true",
        help="Disable diagonal moves regardless of config",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR); defaults to logging.level in the config",
    )

    args = parser.parse_args(argv)

    config = load_path_search_config(args.config)
    configure_logging(args.log_level or config.log_level)
    if args.no_diagonal:
        config.allow_diagonal = False

    console = Console()
    tile_map = build_demo_map()
    search = PathSearch.from_config(tile_map, config)

    start = Coord(0, 0, 0)
    goal = Coord(9, 9, 4)
    console.print(f"Finding path from {start} to {goal} on {tile_map!r}")

    started = time.perf_counter()
    result = search.search(start, goal)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    if not result.success:
        console.print(f"[red]Path could not be found[/red] ({result.reason})")
        console.print(f"Time taken: {elapsed_ms:.2f} ms")
        return 1

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Position")
    table.add_column("Step cost", justify="right")

    previous = None
    for index, position in enumerate(result.path):
        if previous is None:
            step = "-"
        else:
            step = f"{search.path_cost([previous, position]):.3f}"
        table.add_row(str(index), str(position), step)
        previous = position

    console.print(table)
    console.print(f"Search cost: {result.cost:.3f}")
    console.print(f"Approximate path cost: {search.path_cost(result.path):.3f}")
    console.print(f"Nodes expanded: {result.nodes_expanded}")
    console.print(f"Time taken: {elapsed_ms:.2f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
