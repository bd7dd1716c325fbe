from __future__ import annotations

from typing import Dict, Tuple

import networkx as nx

from coinweigh.render.text import format_result, format_selection
from coinweigh.sequential.solver import DecisionNode, iter_nodes
from coinweigh.sequential.weigh import OUTCOME_SYMBOLS

Path = Tuple[str, ...]


def tree_to_nx(tree: DecisionNode) -> nx.DiGraph:
    """
    Decision tree as a DiGraph.

    Nodes are outcome paths from the root (root = ()), with attributes
      label:      selection text, or the result cell at a leaf
      hypotheses: surviving hypotheses
      leaf:       bool
    Edges carry outcome (MORE/EQUAL/LESS) and symbol ('+', '=', '-').
    """
    G = nx.DiGraph()
    for path, node in iter_nodes(tree):
        if node.is_leaf:
            label = format_result(node.hypotheses).strip()
        else:
            label = format_selection(node.selection)
        G.add_node(path, label=label, hypotheses=node.hypotheses, leaf=node.is_leaf)
        if path:
            o = path[-1]
            G.add_edge(path[:-1], path, outcome=o, symbol=OUTCOME_SYMBOLS[o])
    return G


def tree_layout(G: nx.DiGraph, root: Path = ()) -> Dict[Path, Tuple[float, float]]:
    """
    Layered layout: y = -depth, leaves evenly spaced left to right in
    outcome order, inner nodes centred over their children.
    """
    pos: Dict[Path, Tuple[float, float]] = {}
    next_x = [0.0]

    def place(v: Path) -> float:
        kids = list(G.successors(v))
        if not kids:
            x = next_x[0]
            next_x[0] += 1.0
        else:
            xs = [place(c) for c in kids]
            x = 0.5 * (min(xs) + max(xs))
        pos[v] = (x, -float(len(v)))
        return x

    if root in G:
        place(root)
    return pos
