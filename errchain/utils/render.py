from __future__ import annotations

"""Chain rendering helpers (no side-effects).

iter_chain(err) yields (depth, node) from the outermost node to the root.
format_stack(err) returns plain text, build_rich_tree(err) a Rich *Tree*.
"""
from typing import Iterator, List, Optional, Tuple

from rich.markup import escape

from errchain.config import RenderOptions
from errchain.core.chain_error import ChainError, ErrorHandle, message_of
from errchain.utils.constants import SYMBOLS, STYLE

__all__ = [
    "iter_chain",
    "format_stack",
    "build_rich_tree",
]

_DEFAULT = RenderOptions()


# --------------------------------------------------------------------------- #
# Core traverser
# --------------------------------------------------------------------------- #

def iter_chain(err: ErrorHandle) -> Iterator[Tuple[int, ErrorHandle]]:  # noqa: D401
    """Yield *(depth, node)* for *err* and each of its causes."""
    nodes = err.walk() if isinstance(err, ChainError) else iter((err,))
    yield from enumerate(nodes)


def _line(node: ErrorHandle, opts: RenderOptions) -> str:
    msg = message_of(node)
    if opts.show_types:
        return f"{type(node).__name__}: {msg}" if msg else type(node).__name__
    return msg


# --------------------------------------------------------------------------- #
# Text
# --------------------------------------------------------------------------- #

def format_stack(err: ErrorHandle, opts: Optional[RenderOptions] = None) -> str:  # noqa: D401
    """Render *err* as text; default options match ``message_stack()``."""
    opts = opts or _DEFAULT
    lines: List[str] = []
    hidden = 0
    for depth, node in iter_chain(err):
        if opts.max_depth is not None and depth >= opts.max_depth:
            hidden += 1
            continue
        lines.append(_line(node, opts))
    if hidden:
        lines.append(f"+{hidden} more")
    if opts.root_first:
        lines.reverse()
    return opts.separator.join(lines)


# --------------------------------------------------------------------------- #
# Rich-aware tree builder
# --------------------------------------------------------------------------- #

def _label(node: ErrorHandle, is_root: bool, opts: RenderOptions) -> str:
    msg = message_of(node)
    text = f"[{STYLE['message']}]{escape(msg)}[/]" if msg else f"[{STYLE['empty']}](no message)[/]"
    if opts.show_types:
        text = f"[{STYLE['type']}]{escape(type(node).__name__)}[/] {text}"
    if not opts.icons_on:
        return text
    if not isinstance(node, ChainError):
        return SYMBOLS["foreign"] + text
    return (SYMBOLS["root"] if is_root else SYMBOLS["cause"]) + text


def build_rich_tree(err: ErrorHandle, opts: Optional[RenderOptions] = None):  # noqa: D401
    """Return a *rich.tree.Tree*: each cause nested under its wrapper."""
    from rich.tree import Tree  # local import keeps this module lightweight

    opts = opts or _DEFAULT
    header = f"[{STYLE['header']}]Error chain[/]"
    tree = Tree(SYMBOLS["chain"] + header if opts.icons_on else header)

    nodes = [node for _, node in iter_chain(err)]
    parent = tree
    for depth, node in enumerate(nodes):
        if opts.max_depth is not None and depth >= opts.max_depth:
            more = f"+{len(nodes) - depth} more"
            parent.add(f"[{STYLE['dim']}]{SYMBOLS['more'] if opts.icons_on else ''}{more}[/]")
            break
        parent = parent.add(_label(node, depth == len(nodes) - 1, opts))
    return tree
