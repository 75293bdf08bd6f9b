"""
Abstract base classes and protocols for ordered multisets.
"""

from avl_multiset.interfaces.ordered_iterable import OrderedIterable
from avl_multiset.interfaces.sorted_multiset import SortedMultiset

__all__ = ["OrderedIterable", "SortedMultiset"]
