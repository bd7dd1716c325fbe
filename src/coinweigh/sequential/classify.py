"""Classification of coins relative to a hypothesis set."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from coinweigh.errors import InvariantViolation
from coinweigh.sequential.hypotheses import HypothesisSet

TYPE_A = "A"
TYPE_B = "B"


@dataclass(frozen=True)
class Classification:
    """
    Partition of coins 1..n against a hypothesis set.

    equal:  coins that are genuine under every surviving hypothesis
    more:   coins that may be heavy but not light
    less:   coins that may be light but not heavy
    double: coins that may be heavy or light
    all_equal: True iff "no counterfeit" (hypothesis 0) survives

    Each coin tuple is in ascending coin order.
    """

    equal: Tuple[int, ...]
    more: Tuple[int, ...]
    less: Tuple[int, ...]
    double: Tuple[int, ...]
    all_equal: bool

    @property
    def possibilities(self) -> int:
        """Number of surviving (coin, sign) outcomes, counting 'all genuine'."""
        return len(self.more) + len(self.less) + 2 * len(self.double) + int(self.all_equal)

    @property
    def shape(self) -> Optional[str]:
        """
        TYPE_A: no More/Less coins and "all genuine" still possible.
        TYPE_B: no Double coins and "all genuine" ruled out.
        None otherwise.
        """
        if not self.more and not self.less and self.all_equal:
            return TYPE_A
        if not self.double and not self.all_equal:
            return TYPE_B
        return None

    def require_shape(self) -> str:
        shape = self.shape
        if shape is None:
            raise InvariantViolation(
                "classification is neither type A nor type B",
                format_classification(self),
            )
        return shape


def classify(hypotheses: HypothesisSet, n: int) -> Classification:
    """Label every coin 1..n as equal/more/less/double with respect to *hypotheses*."""
    heavy = set()
    light = set()
    all_equal = False
    for h in hypotheses:
        if h > 0:
            heavy.add(h)
        elif h < 0:
            light.add(-h)
        else:
            all_equal = True

    equal, more, less, double = [], [], [], []
    for coin in range(1, n + 1):
        is_heavy, is_light = coin in heavy, coin in light
        if is_heavy and is_light:
            double.append(coin)
        elif is_heavy:
            more.append(coin)
        elif is_light:
            less.append(coin)
        else:
            equal.append(coin)

    return Classification(
        equal=tuple(equal),
        more=tuple(more),
        less=tuple(less),
        double=tuple(double),
        all_equal=all_equal,
    )


def format_classification(cfg: Classification) -> str:
    """Multi-line dump used in diagnostics."""

    def row(coins: Tuple[int, ...]) -> str:
        return " ".join(f"{c:2d}" for c in coins)

    return "\n".join([
        f"==: {int(cfg.all_equal)}",
        f"N= :{row(cfg.equal)}",
        f"N+ :{row(cfg.more)}",
        f"N- :{row(cfg.less)}",
        f"N+-:{row(cfg.double)}",
    ])
