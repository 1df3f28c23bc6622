from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies connector selection, rail prefixes, glyph sets, the summary
trailer and rendering of very deep trees.
"""

import pytest

from pathtree.core.analysis.tree_builder import collapse_root, count_nodes
from pathtree.core.analysis.tree_renderer import (
    GLYPHS,
    format_summary,
    get_glyphs,
    render,
    render_lines,
)
from pathtree.domain.tree_models import Node, TreeCounts


def test_render_lines_shared_prefix(make_tree):
    display = collapse_root(make_tree(["a/b", "a/c"]))

    assert render_lines(display) == ["a", "├── b", "└── c"]


def test_render_lines_nested_rails(make_tree, nested_paths):
    display = collapse_root(make_tree(nested_paths))

    assert render_lines(display) == [
        "a",
        "├── b",
        "│   ├── c",
        "│   └── d",
        "└── e",
    ]


def test_blank_padding_under_last_child(make_tree):
    display = collapse_root(make_tree(["r/x", "r/y/z", "r/y/w/v"]))

    assert render_lines(display) == [
        "r",
        "├── x",
        "└── y",
        "    ├── z",
        "    └── w",
        "        └── v",
    ]


def test_uncollapsed_root_renders_dot(make_tree):
    root = make_tree(["README.md", "src/main.py"])

    assert render_lines(root) == [
        ".",
        "├── README.md",
        "└── src",
        "    └── main.py",
    ]


def test_render_lines_keeps_insertion_order(make_tree):
    root = make_tree(["z.txt", "a.txt", "m.txt"])

    assert render_lines(root)[1:] == ["├── z.txt", "├── a.txt", "└── m.txt"]


def test_ascii_charset(make_tree, nested_paths):
    display = collapse_root(make_tree(nested_paths))

    assert render_lines(display, charset="ascii") == [
        "a",
        "|-- b",
        "|   |-- c",
        "|   `-- d",
        "`-- e",
    ]


def test_glyph_widths_are_consistent():
    for glyphs in GLYPHS.values():
        widths = {len(glyphs.branch), len(glyphs.corner), len(glyphs.rail), len(glyphs.blank)}
        assert widths == {4}


def test_unknown_charset_raises():
    with pytest.raises(ValueError, match="Unknown charset"):
        get_glyphs("emoji")


@pytest.mark.parametrize(
    "directories, files, expected",
    [
        (0, 0, "0 directories, 0 files"),
        (0, 1, "0 directories, 1 file"),
        (1, 2, "1 directory, 2 files"),
        (2, 1, "2 directories, 1 file"),
        (11, 21, "11 directories, 21 files"),
    ],
)
def test_format_summary_pluralization(directories, files, expected):
    assert format_summary(TreeCounts(directories=directories, files=files)) == expected


def test_render_full_report(make_tree):
    root = make_tree(["a/b", "a/c"])
    counts = count_nodes(root)
    display = collapse_root(root)

    assert render(display, counts) == "a\n├── b\n└── c\n\n1 directory, 2 files\n"


def test_render_collapsed_root_without_counts(make_tree):
    display = collapse_root(make_tree(["a/b", "a/c"]))

    assert render(display) == "a\n├── b\n└── c\n\n1 directory, 2 files\n"


def test_render_chain_collapsed_root_without_counts(make_tree):
    display = collapse_root(make_tree(["a/b/c"]), "chain")

    assert render(display) == "a/b/c\n\n2 directories, 1 file\n"


def test_render_single_file_without_counts(make_tree):
    display = collapse_root(make_tree(["x"]))

    assert render(display) == "x\n\n0 directories, 1 file\n"


def test_render_counts_below_root_by_default():
    root = Node(name="top")
    root.add_child("one")
    root.add_child("two").add_child("three")

    assert render(root).endswith("\n\n1 directory, 2 files\n")


def test_render_empty_tree():
    assert render(Node(name=".")) == ".\n\n0 directories, 0 files\n"


def test_render_handles_very_deep_trees(make_tree):
    depth = 2000
    root = make_tree(["/".join(f"d{i}" for i in range(depth))])
    display = collapse_root(root)

    lines = render_lines(display)

    assert len(lines) == depth
    assert lines[-1] == " " * 4 * (depth - 2) + "└── " + f"d{depth - 1}"
