"""Adaptive (sequential) weighing strategy as a decision tree."""
from __future__ import annotations

from dataclasses import dataclass
from multiprocessing import Pool
from typing import Iterator, List, Optional, Sequence, Tuple

from coinweigh.errors import InvariantViolation, check_coin_count
from coinweigh.sequential.classify import classify
from coinweigh.sequential.hypotheses import Hypothesis, HypothesisSet, initial_hypotheses
from coinweigh.sequential.planner import plan_selection
from coinweigh.sequential.weigh import EQUAL, LESS, MORE, OUTCOMES, Selection, outcome_for, weigh


@dataclass(frozen=True)
class DecisionNode:
    """
    One node of the decision tree.

    hypotheses: outcomes still possible when this node is reached.
    selection:  weighing to perform, or None at a leaf (at most one
                hypothesis left).
    more/equal/less: subtrees for each balance outcome (None at a leaf).
    """

    hypotheses: HypothesisSet
    selection: Optional[Selection] = None
    more: Optional["DecisionNode"] = None
    equal: Optional["DecisionNode"] = None
    less: Optional["DecisionNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.selection is None

    def child(self, outcome: str) -> "DecisionNode":
        if self.is_leaf:
            raise ValueError("leaf nodes have no children.")
        if outcome == MORE:
            return self.more
        if outcome == EQUAL:
            return self.equal
        if outcome == LESS:
            return self.less
        raise ValueError(f"unknown outcome {outcome!r}.")

    def children(self) -> List[Tuple[str, "DecisionNode"]]:
        if self.is_leaf:
            return []
        return [(o, self.child(o)) for o in OUTCOMES]

    @property
    def depth(self) -> int:
        """Worst-case number of weighings below this node."""
        if self.is_leaf:
            return 0
        return 1 + max(c.depth for _, c in self.children())

    @property
    def result(self) -> Optional[Hypothesis]:
        """The identified hypothesis at a resolved leaf, None if impossible."""
        if not self.is_leaf:
            raise ValueError("only leaves carry a result.")
        return self.hypotheses[0] if self.hypotheses else None


def _split(hypotheses: HypothesisSet, n: int) -> Optional[Tuple[Selection, dict]]:
    """Plan and simulate one weighing; None if *hypotheses* is already resolved."""
    cfg = classify(hypotheses, n)
    if cfg.possibilities <= 1:
        return None

    sel = plan_selection(cfg)
    parts = weigh(hypotheses, sel)
    for o in OUTCOMES:
        if len(parts[o]) >= len(hypotheses):
            raise InvariantViolation(
                "weighing did not shrink the hypothesis set",
                f"selection={sel} hypotheses={hypotheses}",
            )
    return sel, parts


def solve(hypotheses: HypothesisSet, n: int) -> Tuple[int, DecisionNode]:
    """
    Build the decision tree for *hypotheses* over coins 1..n.

    Returns (depth, root) where depth is the worst-case number of weighings.
    """
    step = _split(hypotheses, n)
    if step is None:
        return 0, DecisionNode(hypotheses=hypotheses)

    sel, parts = step
    d_more, t_more = solve(parts[MORE], n)
    d_equal, t_equal = solve(parts[EQUAL], n)
    d_less, t_less = solve(parts[LESS], n)

    node = DecisionNode(
        hypotheses=hypotheses,
        selection=sel,
        more=t_more,
        equal=t_equal,
        less=t_less,
    )
    return 1 + max(d_more, d_equal, d_less), node


def _solve_job(job: Tuple[HypothesisSet, int]) -> Tuple[int, DecisionNode]:
    hypotheses, n = job
    return solve(hypotheses, n)


def solve_sequential(n: int, *, processes: Optional[int] = None) -> Tuple[int, DecisionNode]:
    """
    Minimum-weighing adaptive strategy for n >= 3 coins.

    If processes > 1, the three branches below the first weighing are solved
    in a worker pool; the result is identical to the serial solve.
    """
    check_coin_count(n)
    root = initial_hypotheses(n)
    if not processes or processes <= 1:
        return solve(root, n)

    sel, parts = _split(root, n)
    jobs = [(parts[o], n) for o in OUTCOMES]
    with Pool(processes=min(processes, len(jobs))) as pool:
        results = pool.map(_solve_job, jobs, chunksize=1)

    (d_more, t_more), (d_equal, t_equal), (d_less, t_less) = results
    node = DecisionNode(
        hypotheses=root,
        selection=sel,
        more=t_more,
        equal=t_equal,
        less=t_less,
    )
    return 1 + max(d_more, d_equal, d_less), node


def iter_nodes(
    node: DecisionNode,
    path: Tuple[str, ...] = (),
) -> Iterator[Tuple[Tuple[str, ...], DecisionNode]]:
    """Preorder walk yielding (outcome path, node)."""
    yield path, node
    for o, c in node.children():
        yield from iter_nodes(c, path + (o,))


def resolve_path(tree: DecisionNode, outcomes: Sequence[str]) -> DecisionNode:
    """Follow a sequence of observed outcomes from the root."""
    node = tree
    for o in outcomes:
        node = node.child(o)
    return node


def identify(tree: DecisionNode, h: Hypothesis) -> Tuple[Tuple[str, ...], DecisionNode]:
    """
    Play the strategy against the true situation *h*.

    Returns (observed outcomes, leaf reached).
    """
    node = tree
    seen: List[str] = []
    while not node.is_leaf:
        o = outcome_for(h, node.selection)
        seen.append(o)
        node = node.child(o)
    return tuple(seen), node
