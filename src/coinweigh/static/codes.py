"""Static (non-adaptive) weighing strategy via base-3 heavy-codes.

Coin j (1-based) gets a heavy-code hcode[j-1] in [1, 3^k - 1]. Its k base-3
digits, most significant first, say where the coin goes in each of the k
fixed weighings: 1 = left arm, 2 = right arm, 0 = off the scale. If coin j
is heavy the scale readings spell out its heavy-code (1 = left heavier,
2 = left lighter, 0 = balance); if it is light they spell out the
complement, its light-code. All-zero readings mean every coin is genuine.

The saturated case n = (3^k - 1)/2 - 1 is built recursively from k - 1;
other coin counts extend the nearest smaller saturated table one coin at
a time.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, Union

from coinweigh.errors import InvariantViolation, check_coin_count
from coinweigh.sequential.hypotheses import Hypothesis
from coinweigh.sequential.weigh import EQUAL, LESS, MORE, Selection, outcome_for
from coinweigh.static.ternary import (
    complement,
    digit,
    from_digits,
    is_free,
    mcomplement,
    missing,
    saturated_size,
)

_OUTCOME_DIGIT: Dict[str, int] = {EQUAL: 0, MORE: 1, LESS: 2}


def build_base(k: int) -> List[int]:
    """Heavy-codes for the saturated case with k weighings (k >= 2).

    From the k-1 table b with c = 3^(k-1):
      1. b with leading digit 0, 1 and 2 (b, b + c, b + 2c)
      2. 2c
      3. m and c + complement(m), m the smallest value free in b
    giving 3|b| + 3 codes.
    """
    if k < 2:
        raise ValueError("k must be >= 2.")
    if k == 2:
        return [1, 8, 3]

    b = build_base(k - 1)
    c = 3 ** (k - 1)
    m = missing(b, c - 1)

    out = list(b)
    out.extend(x + c for x in b)
    out.extend(x + 2 * c for x in b)
    out.append(2 * c)
    out.append(m)
    out.append(c + complement(m))
    out.sort()
    return out


def add_one(codes: List[int], k: int) -> List[int]:
    """
    Grow a valid k-digit code table by one coin, in place.

    Takes the smallest free m that can be paired with an existing code hc:
    hc is rewritten with complement(m)'s digits in its zero positions, which
    keeps every weighing balanced, and m is appended.
    """
    upper = 3 ** k - 1
    for m in range(1, upper + 1):
        if not is_free(m, codes):
            continue
        for j, hc in enumerate(codes):
            t = mcomplement(m, hc, k)
            if t is not None and is_free(t, codes):
                codes[j] = t
                codes.append(m)
                codes.sort()
                return codes
    raise InvariantViolation(
        "cannot extend heavy-code table",
        f"k={k} size={len(codes)} bound={saturated_size(k)}",
    )


def weigh_static(n: int) -> Tuple[int, List[int]]:
    """
    Return (k, heavy_codes) for n coins, k the number of weighings.

    Starts from the largest saturated table with at most n coins and adds
    coins until there are n.
    """
    if n < 3:
        raise ValueError("n must be >= 3.")

    k = 2
    base_size = 0
    while True:
        size = saturated_size(k)
        if size <= n:
            base_size = size
        if size >= n:
            break
        k += 1

    codes = build_base(k if base_size == n else k - 1)
    while len(codes) < n:
        add_one(codes, k)
    return k, codes


def static_weighings(codes: Sequence[int], k: int) -> List[Selection]:
    """The k fixed weighings, first weighing = most significant digit."""
    out: List[Selection] = []
    for pos in range(k - 1, -1, -1):
        left = tuple(j + 1 for j, hc in enumerate(codes) if digit(hc, pos) == 1)
        right = tuple(j + 1 for j, hc in enumerate(codes) if digit(hc, pos) == 2)
        if not left or len(left) != len(right):
            raise InvariantViolation(
                "static weighing is empty or unbalanced",
                f"digit={pos} left={left} right={right}",
            )
        out.append(Selection(left=left, right=right))
    return out


def solve_static(n: int) -> Tuple[int, Tuple[int, ...]]:
    """Minimum static strategy for n >= 3 coins: (weighing_count, heavy_codes)."""
    check_coin_count(n)
    k, codes = weigh_static(n)
    static_weighings(codes, k)
    return k, tuple(codes)


def outcome_code(weighings: Sequence[Selection], h: Hypothesis) -> int:
    """Base-3 code of the readings the fixed weighings show under *h*."""
    return from_digits([_OUTCOME_DIGIT[outcome_for(h, sel)] for sel in weighings])


def lookup_table(codes: Sequence[int]) -> Dict[int, Hypothesis]:
    """Map every reachable outcome code to the hypothesis it identifies."""
    table: Dict[int, Hypothesis] = {0: 0}
    for j, hc in enumerate(codes):
        for code, h in ((hc, j + 1), (complement(hc), -(j + 1))):
            if code in table:
                raise InvariantViolation(
                    "heavy-codes are not pairwise distinct from codes and complements",
                    f"code={code} hypotheses={table[code]},{h}",
                )
            table[code] = h
    return table


def decode_outcome(
    codes: Sequence[int],
    readings: Union[int, Sequence[str]],
) -> Optional[Hypothesis]:
    """
    Identify the counterfeit from the observed readings.

    *readings* is either an outcome code or the sequence of outcomes
    (MORE/EQUAL/LESS) in weighing order. Returns None for a reading no
    single counterfeit can produce.
    """
    if isinstance(readings, int):
        code = readings
    else:
        code = from_digits([_OUTCOME_DIGIT[o] for o in readings])
    return lookup_table(codes).get(code)
