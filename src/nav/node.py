# src/nav/node.py
"""Per-search bookkeeping for a discovered cell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from tilemap import Coord


@dataclass(eq=False)
class SearchNode:
    """
    Search state for one position during a single find_path call.

    `parent` is a back-reference used to rebuild the path; nodes are
    thrown away when the search returns.
    """

    position: Coord
    g_score: float = float("inf")  # best known cost from start
    h_score: float = 0.0  # heuristic estimate to goal
    parent: Optional["SearchNode"] = None

    @property
    def f_score(self) -> float:
        return self.g_score + self.h_score

    def iter_lineage(self) -> Iterator["SearchNode"]:
        """Yield this node, then its parent, and so on back to the start."""
        node: Optional[SearchNode] = self
        while node is not None:
            yield node
            node = node.parent
