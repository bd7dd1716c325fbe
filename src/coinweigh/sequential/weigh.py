"""Simulated balance-scale weighings over hypothesis sets."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Tuple

from coinweigh.errors import InvariantViolation
from coinweigh.sequential.hypotheses import Hypothesis, HypothesisSet

# Balance outcomes, seen from the left arm.
MORE = "more"
EQUAL = "equal"
LESS = "less"
OUTCOMES: Tuple[str, str, str] = (MORE, EQUAL, LESS)

OUTCOME_SYMBOLS: Dict[str, str] = {MORE: "+", EQUAL: "=", LESS: "-"}


@dataclass(frozen=True)
class Selection:
    """Coins (1-based) placed on the left and right arm of the scale."""

    left: Tuple[int, ...]
    right: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.left)

    def validate(self) -> "Selection":
        """Arms must be nonempty, of equal size and share no coin."""
        if not self.left or len(self.left) != len(self.right):
            raise InvariantViolation(
                "selection arms must be nonempty and of equal size",
                f"left={self.left} right={self.right}",
            )
        both = set(self.left) | set(self.right)
        if len(both) != 2 * len(self.left):
            raise InvariantViolation(
                "selection arms must hold distinct coins",
                f"left={self.left} right={self.right}",
            )
        return self


def _arm_weight(h: Hypothesis, arm: FrozenSet[int]) -> int:
    """+1 if h makes the arm heavy, -1 if light, 0 otherwise."""
    if h > 0 and h in arm:
        return 1
    if h < 0 and -h in arm:
        return -1
    return 0


def balance(x: int, y: int) -> str:
    if x < y:
        return LESS
    if x == y:
        return EQUAL
    return MORE


def weigh(hypotheses: HypothesisSet, selection: Selection) -> Dict[str, HypothesisSet]:
    """
    Route every hypothesis into the outcome it would produce.

    Returns {MORE: ..., EQUAL: ..., LESS: ...}; the three sets partition
    *hypotheses* and keep its order.
    """
    left = frozenset(selection.left)
    right = frozenset(selection.right)
    out: Dict[str, List[Hypothesis]] = {o: [] for o in OUTCOMES}
    for h in hypotheses:
        out[balance(_arm_weight(h, left), _arm_weight(h, right))].append(h)
    return {o: tuple(hs) for o, hs in out.items()}


def outcome_for(h: Hypothesis, selection: Selection) -> str:
    """Outcome the scale shows for a single hypothesis."""
    return balance(
        _arm_weight(h, frozenset(selection.left)),
        _arm_weight(h, frozenset(selection.right)),
    )
