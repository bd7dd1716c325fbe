"""Base-3 helpers for heavy-codes and light-codes."""
from __future__ import annotations

from typing import Optional, Sequence

from coinweigh.errors import InvariantViolation


def saturated_size(k: int) -> int:
    """Largest coin count solvable with k static weighings: (3^k - 1)/2 - 1."""
    return (3 ** k - 1) // 2 - 1


def digit(x: int, pos: int) -> int:
    """Base-3 digit of x at position pos (0 = least significant)."""
    if pos < 0:
        raise ValueError("pos must be >= 0.")
    return (x // 3 ** pos) % 3


def digits(x: int, k: int) -> tuple[int, ...]:
    """k base-3 digits of x, most significant first."""
    return tuple(digit(x, i) for i in range(k - 1, -1, -1))


def from_digits(ds: Sequence[int]) -> int:
    """Inverse of digits(): most significant digit first."""
    x = 0
    for d in ds:
        if d not in (0, 1, 2):
            raise ValueError(f"not a base-3 digit: {d!r}")
        x = 3 * x + d
    return x


def complement(x: int) -> int:
    """Swap base-3 digits 1 <-> 2, keep 0. Maps a heavy-code to its light-code."""
    out, place = 0, 1
    while x:
        r = x % 3
        if r == 1:
            out += 2 * place
        elif r == 2:
            out += place
        x //= 3
        place *= 3
    return out


def mcomplement(m: int, hc: int, k: int) -> Optional[int]:
    """
    Fill the zero digits of *hc* with the complement of *m*'s digits.

    Where m has a zero digit, hc's digit is kept; where m is nonzero, hc must
    be zero and receives complement(m)'s digit there. Returns None if hc is
    nonzero at any position where m is nonzero.

    Example: m = 5 = (0 1 2), hc = 9 = (1 0 0) -> 16 = (1 2 1).
    """
    out, place = 0, 1
    for _ in range(k):
        r, rh = m % 3, hc % 3
        if r == 0:
            out += rh * place
        elif rh != 0:
            return None
        else:
            out += (2 if r == 1 else 1) * place
        m //= 3
        hc //= 3
        place *= 3
    return out


def is_free(t: int, codes: Sequence[int]) -> bool:
    """True iff t is neither a code nor the complement of a code."""
    for c in codes:
        if t == c or t == complement(c):
            return False
    return True


def missing(codes: Sequence[int], upper: int) -> int:
    """Smallest m in [1, upper] that is free with respect to *codes*."""
    used = set(codes)
    used.update(complement(c) for c in codes)
    for m in range(1, upper + 1):
        if m not in used:
            return m
    raise InvariantViolation(
        "no free code value below bound",
        f"upper={upper} codes={list(codes)}",
    )
