from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from graphshape.algorithms.search import SearchResult
from graphshape.core.store import GraphStore
from graphshape.io.convert import to_networkx


def draw_search_tree(
    store: GraphStore,
    result: SearchResult,
    *,
    seed: int = 7,
    node_size: int = 300,
    edge_width: float = 1.2,
    title: str | None = None,
    save_path: str | None = None,
):
    """
    Draw the graph with the predecessor tree of `result` highlighted.

    Tree edges are drawn thick, the remaining edges thin and grey, and the
    source node in a separate colour. Edge weights are shown as labels.

    If save_path is set, the figure is written there as PNG and closed;
    otherwise it is shown.
    """
    G = to_networkx(store)
    pos = nx.spring_layout(G, seed=seed, iterations=300)

    tree = {frozenset(pc) for pc in result.tree_edges()}
    tree_list = [(u, v) for u, v in G.edges() if frozenset((u, v)) in tree]
    rest = [(u, v) for u, v in G.edges() if frozenset((u, v)) not in tree]

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.set_axis_off()
    ax.set_title(title or f"source={result.source}  |V|={G.number_of_nodes()}  |E|={G.number_of_edges()}")

    others = [v for v in G.nodes() if v != result.source]
    nx.draw_networkx_nodes(G, pos, nodelist=others, ax=ax, node_size=node_size)
    nx.draw_networkx_nodes(
        G, pos, nodelist=[result.source], ax=ax, node_size=node_size, node_color="tab:red"
    )
    nx.draw_networkx_labels(G, pos, ax=ax)
    nx.draw_networkx_edges(G, pos, edgelist=rest, ax=ax, width=edge_width, edge_color="lightgray")
    nx.draw_networkx_edges(G, pos, edgelist=tree_list, ax=ax, width=3 * edge_width)
    nx.draw_networkx_edge_labels(
        G, pos, edge_labels=nx.get_edge_attributes(G, "weight"), ax=ax
    )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return fig
