"""
Sorted multiset implementations.
"""

from avl_multiset.models.sortedcontainers.avl_tree import MultisetAVLTree, Node

__all__ = ["MultisetAVLTree", "Node"]
