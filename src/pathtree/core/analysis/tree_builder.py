from __future__ import annotations

"""
Path Trie Builder.

Merges slash-delimited path strings into a single prefix tree. Shared
prefixes map onto shared nodes, so every distinct path segment at a
given level appears exactly once, in first-seen order.
"""

import logging
from typing import Iterable, Iterator, List, Set, Tuple

from pathtree.domain.config import DEFAULT_SEPARATOR
from pathtree.domain.errors import InvalidPathError
from pathtree.domain.tree_models import ROOT_NAME, Node, TreeCounts

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def insert(
        root: Node,
        path: str,
        *,
        separator: str = DEFAULT_SEPARATOR,
        empty_segments: str = "preserve",
) -> Node:
    """
    Insert every segment of `path` beneath `root`.

    Existing children are reused by exact name match; missing ones are
    appended. Inserting the same path again leaves the tree unchanged.

    Args:
        root: Node the path is relative to.
        path: Separator-delimited path string.
        separator: Segment delimiter.
        empty_segments: Policy for empty segments ("preserve", "collapse"
            or "reject").

    Returns:
        Node: The node for the last segment (the root itself if nothing
        was inserted).

    Raises:
        InvalidPathError: If the path holds an empty segment under the
            "reject" policy.
    """
    current = root
    for segment in _split_segments(path, separator, empty_segments):
        child = current.find_child(segment)
        if child is None:
            child = current.add_child(segment)
        current = child
    return current


def build_tree(
        paths: Iterable[str],
        *,
        separator: str = DEFAULT_SEPARATOR,
        empty_segments: str = "preserve",
) -> Tuple[Node, int]:
    """
    Create a synthetic root and insert every path into it, in order.

    Returns:
        Tuple[Node, int]: The synthetic root and the number of paths consumed.
    """
    root = Node(name=ROOT_NAME)
    consumed = 0
    for path in paths:
        insert(root, path, separator=separator, empty_segments=empty_segments)
        consumed += 1

    logger.debug(f"Trie built from {consumed} path(s); {len(root.children)} top-level node(s)")
    return root, consumed


def iter_nodes(root: Node) -> Iterator[Tuple[Node, int]]:
    """
    Walk the tree in pre-order without recursion.

    Yields `(node, depth)` pairs, the root first at depth 0. Each node is
    visited once, keyed by identity.
    """
    stack: List[Tuple[Node, int]] = [(root, 0)]
    seen: Set[int] = set()

    while stack:
        node, depth = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))

        yield node, depth

        # Reversed so the first child is popped first
        for child in reversed(node.children):
            stack.append((child, depth + 1))


def count_nodes(root: Node) -> TreeCounts:
    """
    Classify every node below `root` as a directory or a file.

    A node with at least one child is a directory, a childless node is a
    file. The synthetic root is never counted. A display root returned by
    `collapse_root` is a real node: it is counted, and every segment
    folded into its name counts as a directory.
    """
    directories = 0
    files = 0
    for node, _ in iter_nodes(root):
        if node is root and not root.merged:
            continue
        if node.is_leaf():
            files += 1
        else:
            directories += 1

    # Segments absorbed above the display root had exactly one child each
    if root.merged:
        directories += root.merged - 1
    return TreeCounts(directories=directories, files=files)


def collapse_root(
        root: Node,
        mode: str = "single",
        *,
        separator: str = DEFAULT_SEPARATOR,
) -> Node:
    """
    Promote a lone top-level child to be the display root.

    In "single" mode at most one step is taken. In "chain" mode the step
    repeats while the current root has exactly one child, joining names
    along the way (`a`, `b`, `c` become `a/b/c`). The promoted node
    records how many segments it absorbed in `merged`, so `count_nodes`
    on it matches the totals of the synthetic root.

    Args:
        root: The synthetic root returned by `build_tree`.
        mode: "single" or "chain".
        separator: Joiner used when names are merged.

    Returns:
        Node: The node to render as the top line.
    """
    if mode not in ("single", "chain"):
        raise ValueError(f"Unknown collapse mode: {mode!r}")

    display = root
    while len(display.children) == 1:
        child = display.children[0]
        child.name = _join_names(display.name, child.name, separator)
        child.merged = display.merged + 1
        child.parent = None
        display = child
        if mode == "single":
            break

    if display is not root:
        logger.debug(f"Display root collapsed to '{display.name}'")
    return display

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _split_segments(path: str, separator: str, policy: str) -> List[str]:
    """Split a path and apply the empty-segment policy."""
    segments = path.split(separator)

    if policy == "preserve":
        return segments
    if policy == "collapse":
        return [s for s in segments if s]
    if policy == "reject":
        if any(not s for s in segments):
            raise InvalidPathError(path)
        return segments

    raise ValueError(f"Unknown empty-segment policy: {policy!r}")


def _join_names(parent_name: str, child_name: str, separator: str) -> str:
    """Join two names like a path join: a '.' parent and empty parts vanish."""
    if not child_name:
        return parent_name
    if parent_name == ROOT_NAME or not parent_name:
        return child_name
    return f"{parent_name}{separator}{child_name}"
