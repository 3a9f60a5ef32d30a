from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from graphshape.algorithms.search import SearchResult
from graphshape.core.node import INFINITY, Node
from graphshape.core.store import GraphStore


MST_TITLE = "Minimum Spanning Tree (MST)"


def _fmt_distance(d) -> str:
    return "inf" if d == INFINITY else str(d)


def format_node(node: Node, result: Optional[SearchResult] = None) -> str:
    if result is None:
        adj = ", ".join(str(v) for v in node.adjacency)
        return f"{node.id} (adjacent: [{adj}])"
    pred = result.predecessor.get(node.id)
    return (
        f"{node.id} (distance: {_fmt_distance(result.distance.get(node.id, INFINITY))}, "
        f"predecessor: {'-' if pred is None else pred}, "
        f"visit: {result.visit[node.id].value})"
    )


def format_graph(
    store: GraphStore,
    result: Optional[SearchResult] = None,
    title: str = "Graph",
) -> str:
    """
    Human-readable listing of nodes then edges.

    With a result, each node line shows its distance, predecessor and visit
    marker; without one it shows the adjacency list.
    """
    lines: List[str] = [title, "Nodes"]
    lines += [format_node(node, result) for node in store]
    lines.append("Edges")
    lines += [f"{e.source} -- {e.destination} (weight: {e.weight})" for e in store.edges]
    return "\n".join(lines) + "\n\n"


def format_tree(store: GraphStore, result: SearchResult, title: str = MST_TITLE) -> str:
    lines = [title] + [format_node(node, result) for node in store]
    return "\n".join(lines) + "\n\n"


def print_graph(
    store: GraphStore,
    result: Optional[SearchResult] = None,
    title: str = "Graph",
    out: Optional[TextIO] = None,
) -> None:
    (out or sys.stdout).write(format_graph(store, result, title))


def print_tree(
    store: GraphStore,
    result: SearchResult,
    title: str = MST_TITLE,
    out: Optional[TextIO] = None,
) -> None:
    (out or sys.stdout).write(format_tree(store, result, title))
