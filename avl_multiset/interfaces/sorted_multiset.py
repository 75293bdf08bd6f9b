"""
SortedMultiset abstract base class for ordered multiset data structures.
"""

from abc import abstractmethod
from typing import Any

from avl_multiset.interfaces.ordered_iterable import OrderedIterable


class SortedMultiset(OrderedIterable):
    """
    Abstract base class for ordered multisets.

    Provides O(log N) operations for insert, erase and lookup.
    Inherits sorted iteration capabilities from OrderedIterable.

    Implementations:
    - MultisetAVLTree: height-balanced tree with one node per distinct value
    """

    @abstractmethod
    def insert(self, value: Any) -> None:
        """
        Add one occurrence of a value.

        Args:
            value: The value to insert. Must be totally ordered
                against the values already stored.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def erase(self, value: Any) -> bool:
        """
        Remove one occurrence of a value.

        Args:
            value: The value to remove.

        Returns:
            True if an occurrence was removed, False if the value was absent.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """
        Check if at least one occurrence of a value is stored.

        Args:
            value: The value to check.

        Returns:
            True if the value is present, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def count(self, value: Any) -> int:
        """
        Return the number of occurrences of a value (0 if absent).

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def min_value(self) -> Any | None:
        """
        Return the smallest stored value.

        Returns:
            The minimum value, or None if the multiset is empty.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def max_value(self) -> Any | None:
        """
        Return the largest stored value.

        Returns:
            The maximum value, or None if the multiset is empty.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the total number of occurrences across all values.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def distinct_size(self) -> int:
        """Return the number of distinct values stored."""
        pass

    @abstractmethod
    def validate(self) -> None:
        """
        Check the structural invariants of the container.

        Raises:
            TreeInvariantError: If any invariant is violated.

        Time complexity: O(N)
        """
        pass

    def is_empty(self) -> bool:
        return self.size() == 0
