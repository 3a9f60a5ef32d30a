from __future__ import annotations

import heapq
from itertools import count
from typing import List, Set, Tuple

from graphshape.core.edge import Edge
from graphshape.core.node import Visit
from graphshape.core.store import GraphStore
from .search import Distance, SearchResult


def prim(store: GraphStore, source: int) -> SearchResult:
    """
    Prim's minimum spanning tree grown from source.

    distance[v] ends as the weight of the tree edge joining v to
    predecessor[v] (0 for the source). The frontier is a heap without
    decrease-key: a node may be pushed several times, and entries popped
    after the node is committed are stale and skipped. Ties on weight are
    broken by push order.

    Raises GraphConsistencyError if an adjacency entry has no backing edge.
    """
    res = SearchResult.fresh(store, source)
    res.distance[source] = 0

    tie = count()
    heap: List[Tuple[Distance, int, int]] = [(0, next(tie), source)]
    committed: Set[int] = set()

    while heap:
        _, _, u = heapq.heappop(heap)
        if u in committed:
            continue
        committed.add(u)
        res.visit[u] = Visit.DONE

        for v in store.neighbors(u):
            if v in committed:
                continue
            w = store.edge_weight(u, v)
            if w < res.distance[v]:
                res.distance[v] = w
                res.predecessor[v] = u
                res.visit[v] = Visit.FRONTIER
                heapq.heappush(heap, (w, next(tie), v))
    return res


def tree_edges(store: GraphStore, result: SearchResult) -> List[Edge]:
    """Lightest edge record for each predecessor pair, in node order."""
    out: List[Edge] = []
    for parent, child in result.tree_edges():
        edge = store.lightest_edge(parent, child)
        if edge is None:
            raise ValueError(f"predecessor pair ({parent}, {child}) is not an edge of the store")
        out.append(edge)
    return out


def tree_weight(store: GraphStore, result: SearchResult) -> int:
    return sum(e.weight for e in tree_edges(store, result))
