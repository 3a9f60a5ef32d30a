from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from graphshape.core.edge import Edge
from graphshape.core.store import GraphStore


def format_line(line: str) -> str:
    """
    Normalize one input line to whitespace-separated tokens.

    Drops one leading '<' and one trailing '>' and turns commas into spaces,
    so "<0,1,5>" and "0 1 5" read the same.
    """
    s = line.strip()
    if s.startswith("<"):
        s = s[1:]
    if s.endswith(">"):
        s = s[:-1]
    return s.replace(",", " ")


def _ints(line: str, expected: int, what: str) -> List[int]:
    tokens = format_line(line).split()
    if len(tokens) != expected:
        raise ValueError(f"{what} needs {expected} integers, got {len(tokens)}: {line.strip()!r}")
    try:
        return [int(t) for t in tokens]
    except ValueError:
        raise ValueError(f"{what} has a non-integer field: {line.strip()!r}") from None


def parse_header(line: str) -> Tuple[int, int]:
    """Return (declared_node_count, declared_edge_count)."""
    n, m = _ints(line, 2, "header")
    if n < 0 or m < 0:
        raise ValueError(f"header counts must be non-negative: {line.strip()!r}")
    return n, m


def parse_edge_line(line: str) -> Optional[Tuple[int, int, int]]:
    """
    Return (source, destination, weight), or None for a blank line.
    """
    if not format_line(line).strip():
        return None
    src, dst, w = _ints(line, 3, "edge")
    return src, dst, w


def load_graph(lines: Iterable[str], store: Optional[GraphStore] = None) -> GraphStore:
    """
    Build a GraphStore from an edge-list description.

    The first line declares the node and edge counts; nodes 0..n-1 are
    created up front. Each following line is one edge. Rows that are
    malformed, name an unknown node or loop on a single node are reported on
    stderr and skipped.
    """
    if store is None:
        store = GraphStore()
    store.reset()

    it = iter(lines)
    header = next(it, None)
    if header is None:
        raise ValueError("empty graph description: missing header line")
    n, m = parse_header(header)
    store.declare(n, m)
    store.add_nodes(n)

    for lineno, line in enumerate(it, start=2):
        try:
            row = parse_edge_line(line)
        except ValueError as e:
            print(f"[load_graph] skipping line {lineno}: {e}", file=sys.stderr)
            continue
        if row is None:
            continue
        src, dst, w = row

        a, b = store.find_node(src), store.find_node(dst)
        if a is None or b is None:
            continue
        if src == dst:
            print(f"[load_graph] skipping line {lineno}: self-loop on node {src}", file=sys.stderr)
            continue
        store.insert_edge(Edge(src, dst, w))

    return store


def load_file(path: Union[str, Path], store: Optional[GraphStore] = None) -> GraphStore:
    with open(path, "r", encoding="utf-8") as fh:
        return load_graph(fh, store)
