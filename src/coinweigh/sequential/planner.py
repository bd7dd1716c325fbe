"""Balanced coin selections for the next weighing.

A selection is balanced when the three outcomes it produces leave
hypothesis sets whose sizes differ by at most one. Two closed forms cover
the two shapes a classification can take:

Type A (Double coins, possibly Equal coins, "all genuine" possible):
  left arm  = n Double coins
  right arm = n Double coins, or n-1 Double coins plus one Equal coin

Type B (More/Less/Equal coins, no Double coins, counterfeit certain):
  left arm  = n1 More coins + n2 Less coins (+ -l Equal coins if l < 0)
  right arm = (|More| - n1) More coins + k Less coins (+ l Equal coins if l > 0)
"""
from __future__ import annotations

from typing import NamedTuple, Tuple

from coinweigh.errors import InvariantViolation
from coinweigh.sequential.classify import TYPE_A, TYPE_B, Classification, format_classification
from coinweigh.sequential.weigh import Selection


class TypeBCounts(NamedTuple):
    n1: int  # More coins on the left
    n2: int  # Less coins on the left
    k: int  # Less coins on the right
    l: int  # Equal coins as filler: right if > 0, left if < 0

    @property
    def feasible(self) -> bool:
        return self.n1 >= 0 and self.n2 >= 0 and self.k >= 0


def type_b_counts(n_more: int, n_less: int) -> TypeBCounts:
    """Closed form for (n1, n2, k, l), keyed by n_more parity and total mod 3.

    All divisions below are exact for the residue they belong to.
    """
    l = 0
    odd = n_more % 2 == 1
    r = (n_more + n_less) % 3

    if r == 0:
        if odd:
            l = 2
            n1 = (n_more + 1) // 2
            n2 = (n_less - n1 + 2) // 3
        else:
            n1 = n_more // 2
            n2 = (n_less - n1) // 3
    elif r == 1:
        if odd:
            l = 1
            n1 = (n_more + 1) // 2
            n2 = (n_less - n1 + 1) // 3
        else:
            n1 = n_more // 2
            n2 = (n_less - n1 - 1) // 3
    else:
        if odd:
            l = -1
            n1 = (n_more - 1) // 2
            n2 = (n_less - n1 - 1) // 3
        else:
            n1 = n_more // 2
            n2 = (n_less - n1 + 1) // 3

    k = 2 * n1 + n2 - n_more - l
    return TypeBCounts(n1, n2, k, l)


def select_type_a(cfg: Classification) -> Selection:
    """Split the Double coins into three near-equal parts, two of them weighed."""
    if cfg.shape != TYPE_A:
        raise InvariantViolation("type A selection on a non type A classification", format_classification(cfg))

    double, equal = cfg.double, cfg.equal
    m = len(double)
    filler = False

    if m % 3 == 0:
        n = m // 3
    elif m % 3 == 1:
        if equal:
            n = (m + 2) // 3
            filler = True
        else:
            # Without a known-genuine coin this split is uneven by one.
            n = (m - 1) // 3
    else:
        n = (m + 1) // 3

    left = double[:n]
    if filler:
        right = double[n:2 * n - 1] + equal[:1]
    else:
        right = double[n:2 * n]
    return Selection(left=left, right=right)


def _type_b_arms(
    more: Tuple[int, ...],
    less: Tuple[int, ...],
    equal: Tuple[int, ...],
    counts: TypeBCounts,
) -> Selection:
    n1, n2, k, l = counts
    if len(equal) < abs(l):
        raise InvariantViolation(
            "not enough genuine coins for filler",
            f"need {abs(l)}, have {len(equal)}",
        )
    if n2 + k > len(less):
        raise InvariantViolation(
            "type B split uses more Less coins than exist",
            f"n2={n2} k={k} |Less|={len(less)}",
        )

    left = more[:n1] + less[:n2]
    right = more[n1:] + less[n2:n2 + k]
    if l < 0:
        left = left + equal[:-l]
    elif l > 0:
        right = right + equal[:l]
    return Selection(left=left, right=right)


def select_type_b(cfg: Classification) -> Selection:
    """Balanced split of More/Less coins, swapping their roles once if needed."""
    if cfg.shape != TYPE_B:
        raise InvariantViolation("type B selection on a non type B classification", format_classification(cfg))

    more, less = cfg.more, cfg.less
    counts = type_b_counts(len(more), len(less))
    if not counts.feasible:
        more, less = less, more
        counts = type_b_counts(len(more), len(less))
        if not counts.feasible:
            raise InvariantViolation(
                "no balanced type B split",
                f"|More|={len(cfg.more)} |Less|={len(cfg.less)} counts={tuple(counts)}",
            )
    return _type_b_arms(more, less, cfg.equal, counts)


def plan_selection(cfg: Classification) -> Selection:
    """Pick the formula matching the classification shape and check the result."""
    shape = cfg.require_shape()
    if shape == TYPE_A:
        sel = select_type_a(cfg)
    else:
        sel = select_type_b(cfg)
    return sel.validate()
