"""
Helpers for building and inspecting trees in tests.
"""

from avl_multiset.models.sortedcontainers import MultisetAVLTree, Node


def build_tree(values) -> MultisetAVLTree:
    """Insert values into a fresh tree in the given order."""
    tree = MultisetAVLTree()
    for value in values:
        tree.insert(value)
    return tree


def shape(node: Node | None):
    """Nested (key, left, right) tuples describing a subtree."""
    if node is None:
        return None
    return (node.key, shape(node.left), shape(node.right))


def inorder_keys(node: Node | None) -> list:
    """Distinct keys of a subtree in traversal order."""
    if node is None:
        return []
    return inorder_keys(node.left) + [node.key] + inorder_keys(node.right)
