from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from graphshape.core.node import INFINITY, Visit
from graphshape.core.store import GraphStore


Distance = Union[int, float]


@dataclass
class SearchResult:
    """
    Per-run search state produced by bfs() or prim().

    Every node of the store has an entry in each mapping. A new result is
    built on every call, so two runs never share state.
    """

    source: int
    visit: Dict[int, Visit] = field(default_factory=dict)
    distance: Dict[int, Distance] = field(default_factory=dict)
    predecessor: Dict[int, Optional[int]] = field(default_factory=dict)

    @classmethod
    def fresh(cls, store: GraphStore, source: int) -> "SearchResult":
        if source not in store:
            raise KeyError(f"source node {source} is not in the store")
        res = cls(source=source)
        for node_id in store.node_ids():
            res.visit[node_id] = Visit.UNVISITED
            res.distance[node_id] = INFINITY
            res.predecessor[node_id] = None
        return res

    def is_reachable(self, node_id: int) -> bool:
        return self.distance.get(node_id, INFINITY) != INFINITY

    def reachable(self) -> List[int]:
        return [v for v, d in self.distance.items() if d != INFINITY]

    def path_to(self, node_id: int) -> List[int]:
        """Nodes from the source to node_id along predecessors; [] if unreachable."""
        if not self.is_reachable(node_id):
            return []
        path = [node_id]
        while self.predecessor[path[-1]] is not None:
            path.append(self.predecessor[path[-1]])
        path.reverse()
        return path

    def tree_edges(self) -> List[Tuple[int, int]]:
        """(parent, child) pairs of the predecessor tree."""
        return [(p, v) for v, p in self.predecessor.items() if p is not None]
