#!/usr/bin/env python3
"""
Load an edge-list file, run BFS or Prim from a source node, and report the
resulting tree and its shape.

Defaults for --algorithm and --source come from GRAPHSHAPE_ALGORITHM and
GRAPHSHAPE_SOURCE.

Example:
    python -m graphshape graph.txt --algorithm prim --source 0
"""
from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from graphshape.algorithms import bfs, is_binary, is_complete_binary, prim, tree_weight
from graphshape.io.edgelist import load_file
from graphshape.io.report import MST_TITLE, print_graph, print_tree


ALGORITHMS = ("bfs", "prim")


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def build_parser() -> argparse.ArgumentParser:
    # string defaults go through type=int, so a bad value is a usage error
    default_algorithm = os.environ.get("GRAPHSHAPE_ALGORITHM", "prim")
    default_source = os.environ.get("GRAPHSHAPE_SOURCE", "0")

    ap = argparse.ArgumentParser(prog="graphshape", description=__doc__.strip().splitlines()[0])
    ap.add_argument("path", help="edge-list file: header 'n m', then 'src dst weight' per line")
    ap.add_argument("--algorithm", choices=ALGORITHMS, default=default_algorithm)
    ap.add_argument("--source", type=int, default=default_source)
    ap.add_argument("--draw", metavar="PNG", default=None, help="save a drawing of the tree")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.algorithm not in ALGORITHMS:
        print(f"[graphshape ERROR] => unknown algorithm {args.algorithm!r}", file=sys.stderr)
        return 2

    try:
        store = load_file(args.path)
    except (OSError, ValueError) as e:
        print(f"[graphshape ERROR] => cannot load {args.path}: {e}", file=sys.stderr)
        return 2
    print_graph(store)

    if store.find_node(args.source) is None:
        return 2

    if args.algorithm == "bfs":
        result = bfs(store, args.source)
        print_tree(store, result, title=f"Breadth-First Search from {args.source}")
    else:
        result = prim(store, args.source)
        print_tree(store, result, title=MST_TITLE)
        print(f"total weight: {tree_weight(store, result)}")

    print(f"binary: {_yes_no(is_binary(store, result))}")
    print(f"complete binary: {_yes_no(is_complete_binary(store, result))}")

    if args.draw:
        from graphshape.viz.draw import draw_search_tree

        draw_search_tree(store, result, save_path=args.draw)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
