from __future__ import annotations

"""
Path Tree Data Models.

Provides the node type shared by the trie builder and the renderer, plus
the small value objects that travel between the pipeline and the
interface layer.
"""

import weakref
from dataclasses import dataclass, field
from typing import List, Optional

from pathtree.domain.errors import TreeIntegrityError

ROOT_NAME = "."

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class Node:
    """
    One path segment (directory or file component) in the tree.

    Children are owned and kept in insertion order. The parent link is a
    weak reference used only for ancestry and position queries.

    Attributes:
        name: Segment text.
        children: Ordered child nodes, unique by name.
        merged: Real segments folded into this node by root collapsing,
            itself included. 0 for a node that was never promoted.
    """
    name: str
    children: List["Node"] = field(default_factory=list, repr=False)
    _parent: Optional["weakref.ReferenceType[Node]"] = field(default=None, repr=False)
    merged: int = 0

    @property
    def parent(self) -> Optional[Node]:
        """Resolve the parent node, or None for a root."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, value: Optional[Node]) -> None:
        self._parent = weakref.ref(value) if value is not None else None

    def is_root(self) -> bool:
        return self.parent is None

    def is_leaf(self) -> bool:
        return not self.children

    def find_child(self, name: str) -> Optional[Node]:
        """Return the child whose name equals `name` exactly, if any."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def add_child(self, name: str) -> Node:
        """Create a child named `name`, append it and return it."""
        child = Node(name=name)
        child.parent = self
        self.children.append(child)
        return child

    def position(self) -> int:
        """
        Index of this node within its parent's children.

        Raises:
            TreeIntegrityError: If the node is parentless or its parent
                does not list it as a child.
        """
        parent = self.parent
        if parent is None:
            raise TreeIntegrityError(f"Node '{self.name}' has no parent.")
        for i, child in enumerate(parent.children):
            if child is self:
                return i
        raise TreeIntegrityError(
            f"Node '{self.name}' is not a child of its parent '{parent.name}'."
        )

    def is_last_child(self) -> bool:
        if self.is_root():
            return False
        return self.position() == len(self.parent.children) - 1


# -----------------------------------------------------------------------------
# RESULT OBJECTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeCounts:
    """Internal-node and leaf-node totals, excluding the synthetic root."""
    directories: int = 0
    files: int = 0

    @property
    def total(self) -> int:
        return self.directories + self.files


@dataclass(frozen=True)
class TreeReport:
    """
    Output of a complete pipeline run.

    Attributes:
        text: Full rendered report (tree, blank line, summary).
        lines: Tree lines without the summary.
        counts: Directory and file totals.
        inserted: Number of path strings consumed.
    """
    text: str
    lines: List[str] = field(default_factory=list)
    counts: TreeCounts = field(default_factory=TreeCounts)
    inserted: int = 0
