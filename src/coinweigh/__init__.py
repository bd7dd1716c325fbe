"""
coinweigh: minimum-weighing balance-scale strategies for finding one
counterfeit coin (heavier or lighter) among n, adaptive and static.
"""

from .errors import CoinWeighError, CoinCountError, InvariantViolation

# Sequential (adaptive) strategy
from .sequential.hypotheses import initial_hypotheses
from .sequential.classify import Classification, classify
from .sequential.weigh import MORE, EQUAL, LESS, Selection, weigh
from .sequential.planner import plan_selection
from .sequential.solver import DecisionNode, solve, solve_sequential, identify

# Static strategy
from .static.ternary import complement, digit, saturated_size
from .static.codes import (
    build_base,
    add_one,
    weigh_static,
    solve_static,
    static_weighings,
    decode_outcome,
    lookup_table,
)

# Rendering
from .render.text import RenderContext, render_tree, render_static
from .viz.draw import draw_decision_tree

__all__ = [
    # Errors
    "CoinWeighError",
    "CoinCountError",
    "InvariantViolation",
    # Sequential
    "initial_hypotheses",
    "Classification",
    "classify",
    "MORE",
    "EQUAL",
    "LESS",
    "Selection",
    "weigh",
    "plan_selection",
    "DecisionNode",
    "solve",
    "solve_sequential",
    "identify",
    # Static
    "complement",
    "digit",
    "saturated_size",
    "build_base",
    "add_one",
    "weigh_static",
    "solve_static",
    "static_weighings",
    "decode_outcome",
    "lookup_table",
    # Rendering
    "RenderContext",
    "render_tree",
    "render_static",
    # Viz
    "draw_decision_tree",
]
