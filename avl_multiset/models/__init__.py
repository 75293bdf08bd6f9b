"""
Data models for the ordered multiset.
"""

from avl_multiset.models.exceptions import TreeInvariantError
from avl_multiset.models.multiset import Multiset
from avl_multiset.models.sortedcontainers import MultisetAVLTree, Node

__all__ = [
    "Multiset",
    "MultisetAVLTree",
    "Node",
    "TreeInvariantError",
]
