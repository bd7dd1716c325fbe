"""Command line front end: ``coinweigh [-s] [-n COINS] [-q]``."""
from __future__ import annotations

import argparse
import os
import sys
import time
from typing import List, Optional

from coinweigh.errors import CoinCountError, InvariantViolation, check_coin_count
from coinweigh.render.text import render_static, render_tree
from coinweigh.sequential.solver import solve_sequential
from coinweigh.static.codes import solve_static
from coinweigh.viz.draw import draw_decision_tree

COINWEIGH_PROCESSES = os.environ.get("COINWEIGH_PROCESSES", "1")


def _default_processes() -> int:
    try:
        return max(1, int(COINWEIGH_PROCESSES))
    except ValueError:
        return 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="coinweigh",
        description="Shortest set of weighings to identify one fake coin (heavy or light) among n.",
    )
    ap.add_argument("-n", "--coins", type=int, default=12, help="number of coins (default 12)")
    ap.add_argument("-s", "--static", action="store_true", help="fixed weighings instead of a decision tree")
    ap.add_argument("-q", "--quiet", action="store_true", help="only print the weighing count")
    ap.add_argument(
        "-p",
        "--processes",
        type=int,
        default=_default_processes(),
        help="worker processes for the sequential solve (env COINWEIGH_PROCESSES)",
    )
    ap.add_argument("--draw", metavar="PATH", default=None, help="save a drawing of the decision tree")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    verbose = not args.quiet

    def log(msg: str = "") -> None:
        if verbose:
            print(msg)

    log("Command line: " + " ".join(["coinweigh"] + list(sys.argv[1:] if argv is None else argv)))

    try:
        check_coin_count(args.coins)
    except CoinCountError:
        print("There must be more than 2 coins.", file=sys.stderr)
        return 2

    t0 = time.time()
    try:
        if args.static:
            log(f"Static weigh strategy for {args.coins} coins:\n")
            n_steps, codes = solve_static(args.coins)
            log(render_static(n_steps, codes))
        else:
            log(f"Weigh strategy for {args.coins} coins:\n")
            n_steps, tree = solve_sequential(args.coins, processes=args.processes)
            log(render_tree(tree))
            if args.draw:
                draw_decision_tree(tree, save_path=args.draw)
                print(f"[draw] wrote {args.draw}", file=sys.stderr)
    except InvariantViolation as e:
        print(f"Cannot handle this configuration: {e}", file=sys.stderr)
        return 1

    print(f"\nRequired {n_steps} weighings. Time: {int(time.time() - t0)} seconds.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
