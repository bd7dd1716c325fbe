"""Error types raised by the coin weighing strategies."""
from __future__ import annotations


class CoinWeighError(Exception):
    """Base class for all coinweigh errors."""


class CoinCountError(CoinWeighError, ValueError):
    """The puzzle needs more than two coins."""

    def __init__(self, n: int):
        super().__init__(f"There must be more than 2 coins (got n={n}).")
        self.n = n


class InvariantViolation(CoinWeighError, RuntimeError):
    """An internal consistency check failed.

    These are never caused by user input in the supported range; they mean a
    selection or code construction formula was driven outside its proven
    domain. *invariant* is a short tag naming the check that failed.
    """

    def __init__(self, invariant: str, detail: str = ""):
        msg = f"invariant violated: {invariant}"
        if detail:
            msg = f"{msg}\n{detail}"
        super().__init__(msg)
        self.invariant = invariant
        self.detail = detail


def check_coin_count(n: int) -> None:
    """Raise CoinCountError unless n >= 3."""
    if n < 3:
        raise CoinCountError(n)
