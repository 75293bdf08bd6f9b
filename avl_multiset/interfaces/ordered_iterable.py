"""
OrderedIterable protocol for data structures that iterate in sorted order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that support full iteration in sorted order.

    Implementations must support:
    - Iteration via __iter__
    - Async iteration via __aiter__
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all stored values in non-decreasing order."""
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all stored values in non-decreasing order."""
        pass
