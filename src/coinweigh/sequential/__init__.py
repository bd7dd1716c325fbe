from .hypotheses import Hypothesis, HypothesisSet, initial_hypotheses, is_resolved, describe_hypothesis
from .classify import TYPE_A, TYPE_B, Classification, classify
from .weigh import MORE, EQUAL, LESS, OUTCOMES, Selection, weigh, outcome_for
from .planner import TypeBCounts, type_b_counts, select_type_a, select_type_b, plan_selection
from .solver import DecisionNode, solve, solve_sequential, iter_nodes, resolve_path, identify

__all__ = [
    "Hypothesis",
    "HypothesisSet",
    "initial_hypotheses",
    "is_resolved",
    "describe_hypothesis",
    "TYPE_A",
    "TYPE_B",
    "Classification",
    "classify",
    "MORE",
    "EQUAL",
    "LESS",
    "OUTCOMES",
    "Selection",
    "weigh",
    "outcome_for",
    "TypeBCounts",
    "type_b_counts",
    "select_type_a",
    "select_type_b",
    "plan_selection",
    "DecisionNode",
    "solve",
    "solve_sequential",
    "iter_nodes",
    "resolve_path",
    "identify",
]
