from .text import (
    RenderContext,
    format_coins,
    format_result,
    format_selection,
    render_static,
    render_tree,
    render_tree_lines,
)

__all__ = [
    "RenderContext",
    "format_coins",
    "format_result",
    "format_selection",
    "render_static",
    "render_tree",
    "render_tree_lines",
]
