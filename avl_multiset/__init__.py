"""
AVL-tree based ordered multiset.

This package provides an in-memory multiset of totally ordered values with:
- insert(value) - O(log N)
- erase(value) - O(log N), removes a single occurrence
- contains(value) - O(log N)
- min_value() / max_value() - O(log N)
- size() - O(1), total number of occurrences
"""

from avl_multiset.models.exceptions import TreeInvariantError
from avl_multiset.models.multiset import Multiset
from avl_multiset.models.sortedcontainers import MultisetAVLTree

__all__ = ["Multiset", "MultisetAVLTree", "TreeInvariantError"]
