from __future__ import annotations

"""
Unit tests for the Node model.

Verifies:
1. Weak parent links and identity-based equality.
2. Position and last-child queries.
3. Integrity faults on corrupted parent/child relations.
"""

import gc

import pytest

from pathtree.domain.errors import TreeIntegrityError
from pathtree.domain.tree_models import Node, TreeCounts


def test_add_child_sets_parent_and_keeps_order():
    root = Node(name="root")
    first = root.add_child("first")
    second = root.add_child("second")

    assert root.children == [first, second]
    assert first.parent is root
    assert second.parent is root
    assert root.is_root()
    assert not first.is_root()


def test_find_child_exact_match():
    root = Node(name="root")
    n1 = root.add_child("node1")
    n2 = root.add_child("node2")

    assert root.find_child("node1") is n1
    assert root.find_child("node2") is n2
    assert root.find_child("NODE1") is None
    assert root.find_child("node") is None


def test_nodes_compare_by_identity():
    """Two nodes with the same name are still distinct nodes."""
    assert Node(name="x") != Node(name="x")


def test_parent_link_does_not_keep_parent_alive():
    parent = Node(name="parent")
    child = parent.add_child("child")

    del parent
    gc.collect()

    assert child.parent is None


def test_position_and_last_child():
    root = Node(name="root")
    children = [root.add_child(name) for name in ("a", "b", "c", "d")]

    assert [c.position() for c in children] == [0, 1, 2, 3]
    assert [c.is_last_child() for c in children] == [False, False, False, True]


def test_last_child_ignores_subtree_shape():
    root = Node(name="root")
    big = root.add_child("big")
    for name in ("x", "y", "z"):
        big.add_child(name)
    leaf = root.add_child("leaf")

    assert not big.is_last_child()
    assert leaf.is_last_child()


def test_root_is_never_last_child():
    assert Node(name="root").is_last_child() is False


def test_position_of_orphan_raises():
    with pytest.raises(TreeIntegrityError):
        Node(name="orphan").position()


def test_position_detects_missing_parent_link():
    parent = Node(name="parent")
    stray = Node(name="stray")
    stray.parent = parent  # claims a parent that does not list it

    with pytest.raises(TreeIntegrityError, match="not a child"):
        stray.position()


def test_leaf_status_is_derived_from_children():
    root = Node(name="root")
    node = root.add_child("grows")
    assert node.is_leaf()

    node.add_child("later")
    assert not node.is_leaf()


def test_tree_counts_total():
    assert TreeCounts(directories=2, files=3).total == 5
    assert TreeCounts().total == 0


def test_repr_leaves_out_children():
    root = Node(name="root")
    root.add_child("child")

    assert repr(root) == "Node(name='root', merged=0)"


def test_repr_of_deep_chain_does_not_recurse():
    root = Node(name="root")
    current = root
    for i in range(1500):
        current = current.add_child(f"d{i}")

    assert "root" in repr(root)
