"""errchain utilities."""

from .render import iter_chain, format_stack, build_rich_tree

__all__ = [
    "iter_chain",
    "format_stack",
    "build_rich_tree",
]
