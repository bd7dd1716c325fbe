from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from coinweigh.sequential.solver import DecisionNode
from .layouts import tree_layout, tree_to_nx


def draw_decision_tree(
    tree: DecisionNode,
    *,
    node_size: int = 300,
    font_size: int = 7,
    max_nodes_to_draw: int = 400,
    save_path: str | None = None,
):
    """
    Draw the decision tree top-down, edges labelled with '+', '=' or '-'.

    If save_path is set the figure is written there and closed,
    otherwise it is shown. Returns the DiGraph that was drawn.
    """
    G = tree_to_nx(tree)
    fig, ax = plt.subplots(figsize=(max(6.0, 0.35 * G.number_of_nodes()), 6))
    ax.set_axis_off()

    if G.number_of_nodes() <= max_nodes_to_draw:
        pos = tree_layout(G)
        leaves = [v for v, d in G.nodes(data=True) if d["leaf"]]
        inner = [v for v, d in G.nodes(data=True) if not d["leaf"]]
        nx.draw_networkx_nodes(G, pos, nodelist=inner, ax=ax, node_size=node_size, node_shape="s")
        nx.draw_networkx_nodes(G, pos, nodelist=leaves, ax=ax, node_size=node_size // 2)
        nx.draw_networkx_edges(G, pos, ax=ax, arrows=False)
        nx.draw_networkx_labels(
            G,
            pos,
            labels={v: d["label"] for v, d in G.nodes(data=True)},
            ax=ax,
            font_size=font_size,
        )
        nx.draw_networkx_edge_labels(
            G,
            pos,
            edge_labels={(u, v): d["symbol"] for u, v, d in G.edges(data=True)},
            ax=ax,
            font_size=font_size,
        )
    else:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={G.number_of_nodes()})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )

    ax.set_title(f"{tree.depth} weighings")
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return G
