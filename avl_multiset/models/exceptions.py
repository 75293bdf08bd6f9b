"""
Custom exceptions for the multiset containers.
"""

from typing import Any


class TreeInvariantError(Exception):
    """
    Raised when a structural invariant of a tree is found broken.

    Only raised by explicit validation; normal operations never fail.
    """

    def __init__(self, invariant: str, key: Any, detail: str):
        """
        Initialize invariant error.

        Args:
            invariant: Name of the violated invariant
                ("order", "balance", "height", "size" or "count").
            key: Key of the node where the violation was detected.
            detail: Human-readable description of the mismatch.
        """
        self.invariant = invariant
        self.key = key
        super().__init__(f"{invariant} invariant violated at key {key!r}: {detail}")
