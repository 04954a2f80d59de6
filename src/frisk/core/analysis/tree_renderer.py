from __future__ import annotations

"""
Tree Renderer.

Converts a size tree into colorized, box-drawn text lines. Walks children in
stored order without sorting, hides ignored names together with their
subtrees, and honors a depth limit. Ignoring a node affects output only; the
sizes it contributed to its ancestors are left untouched.
"""

import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from frisk.domain.constants import DEFAULT_IGNORE, UNLIMITED_DEPTH
from frisk.domain.tree_models import SizeTreeNode
from frisk.utils.formatting import format_size
from frisk.utils.styles import BYTES_STYLE, PREFIX_STYLE, SIZE_STYLE, colorize, style_for

# Connector segments: (wide, compact)
_BRANCH = ("├─ ", "├ ")
_LAST_BRANCH = ("└─ ", "└ ")
_CONTINUATION = ("│  ", "│ ")
_BLANK = ("   ", "  ")
_ROOT_MARGIN = "  "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        root: SizeTreeNode,
        depth_limit: int = UNLIMITED_DEPTH,
        ignore_names: Iterable[str] = DEFAULT_IGNORE,
        compact: bool = False,
        color: bool = True,
) -> List[str]:
    """
    Render the tree into a list of display lines.

    Args:
        root: Root of the size tree.
        depth_limit: Levels to descend below the root; -1 means unlimited.
        ignore_names: File names hidden from the output, subtree included.
        compact: Use single-character connectors.
        color: Emit ANSI styling.

    Returns:
        List[str]: One line per visible node, in tree order.
    """
    lines: List[str] = []
    _render_node(root, depth_limit, frozenset(ignore_names), compact, color, [], lines)
    return lines


def print_tree(
        root: SizeTreeNode,
        depth_limit: int = UNLIMITED_DEPTH,
        ignore_names: Iterable[str] = DEFAULT_IGNORE,
        compact: bool = False,
        color: bool = True,
        stream: Optional[TextIO] = None,
) -> List[str]:
    """Render the tree and write it to `stream` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    lines = render_tree(root, depth_limit, ignore_names, compact, color)
    for line in lines:
        print(line, file=out)
    return lines


def build_prefix(last_flags: Sequence[bool], compact: bool = False) -> str:
    """
    Build the indentation and connector for a node.

    Args:
        last_flags: For each level from the root's children down to the node,
                    whether the node on that level is the last sibling.
        compact: Select the compact connector set.

    Returns:
        str: Empty for the root, otherwise margin, continuations and connector.
    """
    if not last_flags:
        return ""

    variant = 1 if compact else 0
    parts = [_ROOT_MARGIN]
    for ancestor_is_last in last_flags[:-1]:
        parts.append(_BLANK[variant] if ancestor_is_last else _CONTINUATION[variant])
    parts.append(_LAST_BRANCH[variant] if last_flags[-1] else _BRANCH[variant])
    return "".join(parts)


def format_node_line(node: SizeTreeNode, prefix: str, color: bool = True) -> str:
    """Assemble prefix, styled name, readable size and exact byte count."""
    label = node.name + ("/" if node.is_directory else "")
    return (
        colorize(prefix, PREFIX_STYLE, color)
        + colorize(label, style_for(node.classification), color)
        + colorize(f" » {format_size(node.size_bytes)}", SIZE_STYLE, color)
        + colorize(f" ({node.size_bytes} bytes)", BYTES_STYLE, color)
    )

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_node(
        node: SizeTreeNode,
        depth: int,
        ignored: frozenset,
        compact: bool,
        color: bool,
        last_flags: List[bool],
        lines: List[str],
) -> None:
    if node.name in ignored:
        return

    lines.append(format_node_line(node, build_prefix(last_flags, compact), color))

    if depth == 0 or not node.is_directory:
        return

    # "Last" is computed over all children, ignored ones included
    count = len(node.children)
    for i, child in enumerate(node.children):
        _render_node(child, depth - 1, ignored, compact, color, last_flags + [i == count - 1], lines)
