"""Plain-text renderings of sequential trees and static code tables."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from coinweigh.sequential.hypotheses import HypothesisSet
from coinweigh.sequential.solver import DecisionNode
from coinweigh.sequential.weigh import OUTCOME_SYMBOLS, Selection
from coinweigh.static.codes import static_weighings
from coinweigh.static.ternary import complement, digit


@dataclass(frozen=True)
class RenderContext:
    """Position of a node in the printed tree: nesting level and branch label."""

    level: int = 1
    prefix: str = ""
    indent: str = "    "

    def descend(self, prefix: str) -> "RenderContext":
        return replace(self, level=self.level + 1, prefix=prefix)

    def lead(self) -> str:
        return self.indent * self.level + self.prefix


def format_coins(coins: Sequence[int]) -> str:
    return " ".join(f"{c:2d}" for c in coins)


def format_selection(sel: Selection) -> str:
    return f"({format_coins(sel.left)} | {format_coins(sel.right)})"


def format_result(hypotheses: HypothesisSet) -> str:
    """Three-character cell: impossible, all genuine, coin +/-, or blank."""
    if len(hypotheses) == 0:
        return " --"
    if len(hypotheses) > 1:
        return "   "
    h = hypotheses[0]
    if h == 0:
        return " =="
    if h > 0:
        return f"{h:2d}+"
    return f"{-h:2d}-"


def _node_line(node: DecisionNode, ctx: RenderContext) -> str:
    kids = [c.hypotheses for _, c in node.children()]
    line = f"{ctx.lead()}{format_selection(node.selection)} [{', '.join(str(len(h)) for h in kids)}] "
    if any(len(h) <= 1 for h in kids):
        line += ", ".join(format_result(h) for h in kids)
    return line.rstrip()


def render_tree_lines(node: DecisionNode, ctx: Optional[RenderContext] = None) -> List[str]:
    if ctx is None:
        ctx = RenderContext()
    if node.is_leaf:
        return []
    lines = [_node_line(node, ctx)]
    for o, child in node.children():
        lines.extend(render_tree_lines(child, ctx.descend(OUTCOME_SYMBOLS[o])))
    return lines


def render_tree(node: DecisionNode, ctx: Optional[RenderContext] = None) -> str:
    """
    Indented decision chart, one line per weighing:

        (left | right) [|more|, |equal|, |less|]  results

    Children follow their parent one level deeper, labelled '+', '=' or '-'.
    """
    return "\n".join(render_tree_lines(node, ctx))


def render_static(k: int, codes: Sequence[int]) -> str:
    """Coin header, heavy-code and light-code digit rows, then the k weighings."""
    n = len(codes)
    lines = [" ".join(f"{j:2d}" for j in range(1, n + 1)), "", "+"]
    for pos in range(k - 1, -1, -1):
        lines.append(" ".join(f"{digit(hc, pos):2d}" for hc in codes))
    lines.append("-")
    for pos in range(k - 1, -1, -1):
        lines.append(" ".join(f"{digit(complement(hc), pos):2d}" for hc in codes))
    lines.append("")
    for sel in static_weighings(codes, k):
        lines.append(format_selection(sel))
    return "\n".join(lines)
