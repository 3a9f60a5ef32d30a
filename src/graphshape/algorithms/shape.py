from __future__ import annotations

from typing import List

from graphshape.core.store import GraphStore
from .search import SearchResult


def children(store: GraphStore, result: SearchResult, node_id: int) -> List[int]:
    """Neighbours of node_id other than its predecessor."""
    parent = result.predecessor.get(node_id)
    return [v for v in store.neighbors(node_id) if v != parent]


def is_binary(store: GraphStore, result: SearchResult) -> bool:
    """True iff no node has more than two children."""
    for node_id in store.node_ids():
        if len(children(store, result, node_id)) > 2:
            return False
    return True


def is_complete_binary(store: GraphStore, result: SearchResult) -> bool:
    """
    True iff no node has exactly one child.

    Only this local property is checked; level balance and binary-ness are
    not, so a star with three leaves passes.
    """
    for node_id in store.node_ids():
        if len(children(store, result, node_id)) == 1:
            return False
    return True
