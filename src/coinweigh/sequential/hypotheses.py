"""Hypothesis sets for the adaptive weighing strategy.

A hypothesis is an int h in [-n, n]:
  h == 0  no counterfeit coin,
  h > 0   coin h is counterfeit and heavy,
  h < 0   coin -h is counterfeit and light.

Hypothesis sets are tuples. Order carries no meaning for correctness but is
kept stable so that every run produces the same tree.
"""
from __future__ import annotations

from typing import Iterable, Tuple

Hypothesis = int
HypothesisSet = Tuple[Hypothesis, ...]


def initial_hypotheses(n: int) -> HypothesisSet:
    """Return (0, 1, ..., n, -1, ..., -n), all 2n+1 possibilities."""
    if n < 0:
        raise ValueError("n must be >= 0.")
    return (0,) + tuple(range(1, n + 1)) + tuple(-k for k in range(1, n + 1))


def is_resolved(hypotheses: Iterable[Hypothesis]) -> bool:
    """True iff at most one hypothesis survives."""
    count = 0
    for _ in hypotheses:
        count += 1
        if count > 1:
            return False
    return True


def describe_hypothesis(h: Hypothesis) -> str:
    if h == 0:
        return "all genuine"
    if h > 0:
        return f"coin {h} heavy"
    return f"coin {-h} light"
