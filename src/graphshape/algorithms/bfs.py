from __future__ import annotations

from collections import deque

from graphshape.core.node import Visit
from graphshape.core.store import GraphStore
from .search import SearchResult


def bfs(store: GraphStore, source: int) -> SearchResult:
    """
    Breadth-first search from source, ignoring edge weights.

    distance[v] is the shortest hop count from source and predecessor[v] the
    node v was discovered from. Nodes outside the source's component stay
    UNVISITED at INFINITY.
    """
    res = SearchResult.fresh(store, source)
    res.distance[source] = 0
    res.visit[source] = Visit.FRONTIER

    q = deque([source])
    while q:
        u = q.popleft()
        for v in store.neighbors(u):
            if res.visit[v] is Visit.UNVISITED:
                res.visit[v] = Visit.FRONTIER
                res.predecessor[v] = u
                res.distance[v] = res.distance[u] + 1
                q.append(v)
        res.visit[u] = Visit.DONE
    return res
