from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List


INFINITY = math.inf


class Visit(Enum):
    """Search marker of a node during a traversal."""

    UNVISITED = "unvisited"
    FRONTIER = "frontier"
    DONE = "done"


@dataclass
class Node:
    """
    A graph vertex.

    adjacency holds neighbour ids in edge-insertion order and is filled only
    by GraphStore.insert_edge. Parallel edges show up as repeated ids.
    """

    id: int
    adjacency: List[int] = field(default_factory=list)

    def add_adjacent(self, other: int) -> None:
        self.adjacency.append(other)
