from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies connector prefixes (wide and compact), ignore-list pruning,
depth limiting, stored-order output and ANSI styling of node lines.
"""

import io
from pathlib import Path

import pytest

from frisk.core.analysis.tree_builder import build_size_tree
from frisk.core.analysis.tree_renderer import (
    build_prefix,
    format_node_line,
    print_tree,
    render_tree,
)
from frisk.domain.tree_models import Classification, ScanMode, SizeTreeNode


def leaf(path: str, size: int, classification: Classification = Classification.PLAIN) -> SizeTreeNode:
    return SizeTreeNode(path=path, size_bytes=size, classification=classification)


def directory(path: str, *children: SizeTreeNode) -> SizeTreeNode:
    return SizeTreeNode(
        path=path,
        size_bytes=sum(c.size_bytes for c in children),
        classification=Classification.DIRECTORY,
        children=tuple(children),
    )


@pytest.fixture
def small_tree() -> SizeTreeNode:
    """
    root/
      b/
        deep/
          z.txt
        y.txt
      a.txt
    """
    return directory(
        "root",
        directory(
            "root/b",
            directory("root/b/deep", leaf("root/b/deep/z.txt", 5)),
            leaf("root/b/y.txt", 2048),
        ),
        leaf("root/a.txt", 10),
    )


# -----------------------------------------------------------------------------
# Prefixes
# -----------------------------------------------------------------------------

def test_build_prefix_wide() -> None:
    assert build_prefix([]) == ""
    assert build_prefix([False]) == "  ├─ "
    assert build_prefix([True]) == "  └─ "
    assert build_prefix([False, True]) == "  │  └─ "
    assert build_prefix([True, False]) == "     ├─ "


def test_build_prefix_compact() -> None:
    assert build_prefix([False], compact=True) == "  ├ "
    assert build_prefix([False, False], compact=True) == "  │ ├ "
    assert build_prefix([True, True], compact=True) == "    └ "


# -----------------------------------------------------------------------------
# Structure
# -----------------------------------------------------------------------------

def test_render_plain_output(small_tree: SizeTreeNode) -> None:
    lines = render_tree(small_tree, color=False)

    assert lines == [
        "root/ » 2 KB (2063 bytes)",
        "  ├─ b/ » 2 KB (2053 bytes)",
        "  │  ├─ deep/ » 5 B (5 bytes)",
        "  │  │  └─ z.txt » 5 B (5 bytes)",
        "  │  └─ y.txt » 2 KB (2048 bytes)",
        "  └─ a.txt » 10 B (10 bytes)",
    ]


def test_output_keeps_stored_order() -> None:
    tree = directory("r", leaf("r/zeta", 1), leaf("r/alpha", 100), leaf("r/mid", 50))

    lines = render_tree(tree, color=False)

    assert [line.split(" » ")[0].split(" ")[-1] for line in lines[1:]] == ["zeta", "alpha", "mid"]


def test_depth_zero_prints_only_root(small_tree: SizeTreeNode) -> None:
    lines = render_tree(small_tree, depth_limit=0, color=False)
    assert lines == ["root/ » 2 KB (2063 bytes)"]


def test_depth_one_prints_direct_children_only(small_tree: SizeTreeNode) -> None:
    lines = render_tree(small_tree, depth_limit=1, color=False)

    assert len(lines) == 3
    assert "b/" in lines[1]
    assert "a.txt" in lines[2]
    assert not any("deep" in line or "y.txt" in line for line in lines)


def test_ignored_name_hides_whole_subtree(small_tree: SizeTreeNode) -> None:
    lines = render_tree(small_tree, ignore_names=["b"], color=False)

    assert len(lines) == 2
    assert not any("deep" in line or "y.txt" in line for line in lines)
    # The root total still includes the ignored subtree
    assert lines[0] == "root/ » 2 KB (2063 bytes)"


def test_ignored_root_renders_nothing(small_tree: SizeTreeNode) -> None:
    assert render_tree(small_tree, ignore_names=["root"], color=False) == []


def test_leaves_are_not_suffixed_with_slash() -> None:
    empty_dir = leaf("r/empty", 0)
    tree = directory("r", empty_dir, leaf("r/x", 1))

    lines = render_tree(tree, color=False)

    assert lines[1] == "  ├─ empty » 0 B (0 bytes)"


def test_node_modules_is_hidden_but_counted(sample_tree: Path) -> None:
    """Ignoring affects the printed lines only, never the computed sizes."""
    root = build_size_tree(str(sample_tree), mode=ScanMode.SEQUENTIAL)

    lines = render_tree(root, ignore_names=["node_modules"], color=False)

    assert not any("node_modules" in line or "lib.js" in line for line in lines)
    assert lines[0].endswith("(1085 bytes)")


# -----------------------------------------------------------------------------
# Styling
# -----------------------------------------------------------------------------

def test_directory_line_is_blue_bold() -> None:
    node = directory("root", leaf("root/a", 1))

    line = format_node_line(node, "", color=True)

    assert "\x1b[1;34mroot/\x1b[0m" in line
    assert "\x1b[2m (1 bytes)\x1b[0m" in line


def test_error_line_is_red_on_black() -> None:
    node = SizeTreeNode(path="r/bad", size_bytes=0, classification=Classification.ERROR, error="denied")

    line = format_node_line(node, "  └─ ", color=True)

    assert line.startswith("  └─ \x1b[31;40mbad\x1b[0m")


def test_plain_name_has_no_escape() -> None:
    line = format_node_line(leaf("r/notes.txt", 3), "", color=True)
    assert line.startswith("notes.txt » 3 B")


def test_print_tree_writes_lines_to_stream(small_tree: SizeTreeNode) -> None:
    stream = io.StringIO()

    lines = print_tree(small_tree, compact=True, color=False, stream=stream)

    assert stream.getvalue() == "\n".join(lines) + "\n"
    assert "  │ │ └ z.txt » 5 B (5 bytes)" in lines
