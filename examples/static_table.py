#!/usr/bin/env python3
"""
Static strategies for a range of coin counts.

For each n, print the number of fixed weighings and check that every
(coin, sign) reads back to itself through the code table.
"""
from __future__ import annotations

import argparse

from coinweigh import complement, decode_outcome, render_static, solve_static, static_weighings
from coinweigh.static.codes import outcome_code


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--n-min", type=int, default=3)
    ap.add_argument("--n-max", type=int, default=40)
    ap.add_argument("--show", type=int, default=None, help="print the full table for this n")
    args = ap.parse_args()

    for n in range(args.n_min, args.n_max + 1):
        k, codes = solve_static(n)
        weighings = static_weighings(codes, k)
        ok = all(
            outcome_code(weighings, c) == codes[c - 1]
            and outcome_code(weighings, -c) == complement(codes[c - 1])
            and decode_outcome(codes, codes[c - 1]) == c
            for c in range(1, n + 1)
        )
        print(f"n={n:3d}  k={k}  roundtrip={'ok' if ok else 'FAIL'}")

    if args.show is not None:
        k, codes = solve_static(args.show)
        print()
        print(render_static(k, codes))


if __name__ == "__main__":
    main()
