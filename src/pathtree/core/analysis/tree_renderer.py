from __future__ import annotations

"""
Tree Renderer.

Converts a path trie into `tree`-style line art. Walks the nodes
depth-first in insertion order, carrying the accumulated rail prefix on
an explicit stack so arbitrarily deep trees render without recursion.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from pathtree.core.analysis.tree_builder import count_nodes
from pathtree.domain.tree_models import Node, TreeCounts

# -----------------------------------------------------------------------------
# GLYPH SETS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GlyphSet:
    """
    Connector strings used for one rendering style.

    Attributes:
        branch: Connector for a node with later siblings.
        corner: Connector for the last node of a sibling group.
        rail: Prefix under an ancestor that still has later siblings.
        blank: Prefix under an ancestor that was the last of its group.
    """
    branch: str
    corner: str
    rail: str
    blank: str


GLYPHS: Dict[str, GlyphSet] = {
    "unicode": GlyphSet(branch="├── ", corner="└── ", rail="│   ", blank="    "),
    "ascii": GlyphSet(branch="|-- ", corner="`-- ", rail="|   ", blank="    "),
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_glyphs(charset: str) -> GlyphSet:
    """Resolve a charset name to its glyph set."""
    try:
        return GLYPHS[charset]
    except KeyError:
        raise ValueError(
            f"Unknown charset: {charset!r} (expected one of {', '.join(GLYPHS)})"
        ) from None


def render_lines(root: Node, *, charset: str = "unicode") -> List[str]:
    """
    Render `root` and its descendants as a list of lines.

    The first line is the root name. Every other line is the rail prefix
    inherited from the node's ancestors, the node's own connector and its
    name.

    Args:
        root: Display root.
        charset: Glyph set name ("unicode" or "ascii").

    Returns:
        List[str]: Tree lines, without the summary.
    """
    glyphs = get_glyphs(charset)
    lines: List[str] = [root.name]

    # Each entry: (node, prefix inherited from its ancestors, is last child)
    stack: List[Tuple[Node, str, bool]] = _child_entries(root, "")

    while stack:
        node, prefix, is_last = stack.pop()
        connector = glyphs.corner if is_last else glyphs.branch
        lines.append(f"{prefix}{connector}{node.name}")

        if node.children:
            extension = glyphs.blank if is_last else glyphs.rail
            stack.extend(_child_entries(node, prefix + extension))

    return lines


def format_summary(counts: TreeCounts) -> str:
    """Format the `N directories, M files` trailer."""
    return (
        f"{counts.directories} {_plural(counts.directories, 'directory', 'directories')}, "
        f"{counts.files} {_plural(counts.files, 'file', 'files')}"
    )


def render(
        root: Node,
        counts: Optional[TreeCounts] = None,
        *,
        charset: str = "unicode",
) -> str:
    """
    Render the full report: tree lines, a blank line and the summary.

    Args:
        root: Display root.
        counts: Precomputed totals. When omitted they are counted from
            `root`, including any segments collapsed into it.
        charset: Glyph set name.

    Returns:
        str: Newline-terminated report text.
    """
    if counts is None:
        counts = count_nodes(root)
    return compose_report(render_lines(root, charset=charset), counts)


def compose_report(lines: List[str], counts: TreeCounts) -> str:
    """Join tree lines and the summary, separated by a blank line."""
    return "\n".join(lines) + "\n\n" + format_summary(counts) + "\n"

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _child_entries(node: Node, prefix: str) -> List[Tuple[Node, str, bool]]:
    """
    Stack entries for the children of `node`, reversed for LIFO popping.

    The last flag comes from position in the ordered children, so only the
    final child of a group is marked last.
    """
    total = len(node.children)
    entries = [
        (child, prefix, i == total - 1)
        for i, child in enumerate(node.children)
    ]
    entries.reverse()
    return entries


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural
