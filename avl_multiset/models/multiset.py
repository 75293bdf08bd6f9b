"""
Multiset - Ordered multiset backed by a sorted multiset container.
"""

import logging
from collections.abc import AsyncIterator, Iterator
from typing import Any

from avl_multiset.interfaces.ordered_iterable import OrderedIterable
from avl_multiset.interfaces.sorted_multiset import SortedMultiset
from avl_multiset.models.sortedcontainers import MultisetAVLTree

logger = logging.getLogger(__name__)


class Multiset(OrderedIterable):
    """
    Ordered multiset backed by a SortedMultiset.

    Supports:
    - O(log N) insert, erase, contains, min_value and max_value
    - O(1) size
    - Sorted iteration over every occurrence, sync and async
    - Optional invariant checking after each mutation

    Not thread-safe: callers must serialize mutations themselves.
    """

    def __init__(
        self,
        container: SortedMultiset | None = None,
        check_invariants: bool = False,
    ) -> None:
        """
        Initialize Multiset.

        Args:
            container: The backing sorted multiset. Defaults to a new
                       empty MultisetAVLTree.
            check_invariants: Validate the container after every insert
                              and erase (O(N) per mutation, debug use only).
        """
        if container is None:
            container = MultisetAVLTree()
        elif not isinstance(container, SortedMultiset):
            raise TypeError(
                f"container must be a SortedMultiset, got {type(container).__name__}"
            )

        self._container = container
        self._check_invariants = check_invariants
        logger.debug(
            f"Multiset created with {type(container).__name__} "
            f"(check_invariants={check_invariants})"
        )

    def insert(self, value: Any) -> None:
        """
        Add one occurrence of a value.

        Args:
            value: The value to insert.
        """
        self._container.insert(value)
        if self._check_invariants:
            self._container.validate()

    def erase(self, value: Any) -> bool:
        """
        Remove one occurrence of a value.

        Args:
            value: The value to remove.

        Returns:
            True if an occurrence was removed, False if the value was absent.
        """
        removed = self._container.erase(value)
        if not removed:
            logger.debug(f"erase({value!r}) ignored: value not present")
        elif self._check_invariants:
            self._container.validate()
        return removed

    def contains(self, value: Any) -> bool:
        return self._container.contains(value)

    def count(self, value: Any) -> int:
        return self._container.count(value)

    def min_value(self) -> Any | None:
        return self._container.min_value()

    def max_value(self) -> Any | None:
        return self._container.max_value()

    def size(self) -> int:
        return self._container.size()

    def distinct_size(self) -> int:
        return self._container.distinct_size()

    def is_empty(self) -> bool:
        return self._container.is_empty()

    def __len__(self) -> int:
        return self._container.size()

    def __contains__(self, value: Any) -> bool:
        return self._container.contains(value)

    def __bool__(self) -> bool:
        return not self._container.is_empty()

    def __iter__(self) -> Iterator[Any]:
        return self._container.__iter__()

    def __aiter__(self) -> AsyncIterator[Any]:
        return self._container.__aiter__()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
