"""
AVL Tree implementation of an ordered multiset.

Each distinct value occupies one node carrying an occurrence count, so the
tree holds O(distinct values) nodes regardless of how many duplicates exist.
"""

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any

from avl_multiset.interfaces.sorted_multiset import SortedMultiset
from avl_multiset.models.exceptions import TreeInvariantError


@dataclass
class Node:
    """Node in the AVL Tree. Owns its children; no parent reference."""

    key: Any
    count: int = 1
    height: int = 1
    subtree_size: int = 1
    left: "Node | None" = None
    right: "Node | None" = None


def _height(node: Node | None) -> int:
    return node.height if node is not None else 0


def _subtree_size(node: Node | None) -> int:
    return node.subtree_size if node is not None else 0


class MultisetAVLTree(SortedMultiset):
    """
    AVL Tree implementation of SortedMultiset.

    Properties maintained:
    1. Keys in the left subtree are strictly less, keys in the right
       subtree strictly greater than the node's key
    2. Subtree heights of every node differ by at most one
    3. Every node has count >= 1
    4. subtree_size = count + subtree_size(left) + subtree_size(right)
    5. height = 1 + max(height(left), height(right)), absent subtree = 0
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._distinct: int = 0

    def insert(self, value: Any) -> None:
        """Add one occurrence of value. O(log N)"""
        self._root = self._insert(self._root, value)

    def erase(self, value: Any) -> bool:
        """Remove one occurrence of value. O(log N)"""
        node = self._find_node(value)
        if node is None:
            return False

        if node.count > 1:
            self._decrement_path(value)
        else:
            self._root = self._remove(self._root, value)
            self._distinct -= 1
        return True

    def contains(self, value: Any) -> bool:
        return self._find_node(value) is not None

    def count(self, value: Any) -> int:
        node = self._find_node(value)
        return node.count if node else 0

    def min_value(self) -> Any | None:
        """Return the leftmost key. O(log N)"""
        current = self._root
        if current is None:
            return None
        while current.left is not None:
            current = current.left
        return current.key

    def max_value(self) -> Any | None:
        """Return the rightmost key. O(log N)"""
        current = self._root
        if current is None:
            return None
        while current.right is not None:
            current = current.right
        return current.key

    def size(self) -> int:
        return _subtree_size(self._root)

    def distinct_size(self) -> int:
        return self._distinct

    def height(self) -> int:
        return _height(self._root)

    def validate(self) -> None:
        """Walk the whole tree and check every invariant. O(N)"""
        self._validate(self._root, None, None)

    def __iter__(self) -> Iterator[Any]:
        return _InOrderIterator(self._root)

    def __aiter__(self) -> AsyncIterator[Any]:
        return _AsyncInOrderIterator(self._root)

    def _find_node(self, value: Any) -> Node | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            if value < current.key:
                current = current.left
            elif value > current.key:
                current = current.right
            else:
                return current
        return None

    def _insert(self, node: Node | None, value: Any) -> Node:
        """Insert into the subtree rooted at node and return its new root."""
        if node is None:
            self._distinct += 1
            return Node(key=value)

        if value < node.key:
            node.left = self._insert(node.left, value)
        elif value > node.key:
            node.right = self._insert(node.right, value)
        else:
            # Duplicate: shape is unchanged, ancestors pick up the new size
            node.count += 1
            node.subtree_size += 1
            return node

        return self._rebalance(node)

    def _decrement_path(self, value: Any) -> None:
        """Drop one occurrence of a key known to have count > 1."""
        current = self._root
        while current is not None:
            current.subtree_size -= 1
            if value < current.key:
                current = current.left
            elif value > current.key:
                current = current.right
            else:
                current.count -= 1
                return

    def _remove(self, node: Node | None, value: Any) -> Node | None:
        """Structurally remove the node holding value, whatever its count."""
        if node is None:
            return None

        if value < node.key:
            node.left = self._remove(node.left, value)
        elif value > node.key:
            node.right = self._remove(node.right, value)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left

            # Two children: take over the in-order successor's key and count
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            node.count = successor.count
            node.right = self._remove(node.right, successor.key)

        return self._rebalance(node)

    def _update(self, node: Node) -> None:
        """Recompute height and subtree size from the children."""
        node.height = 1 + max(_height(node.left), _height(node.right))
        node.subtree_size = (
            node.count + _subtree_size(node.left) + _subtree_size(node.right)
        )

    def _balance_factor(self, node: Node) -> int:
        return _height(node.left) - _height(node.right)

    def _rebalance(self, node: Node) -> Node:
        """Restore the AVL property at node and return the subtree root."""
        self._update(node)
        balance = self._balance_factor(node)

        if balance > 1:
            if self._balance_factor(node.left) < 0:
                # Left-Right case
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1:
            if self._balance_factor(node.right) > 0:
                # Right-Left case
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    def _rotate_left(self, node: Node) -> Node:
        """Left rotation."""
        right_child = node.right
        node.right = right_child.left
        right_child.left = node

        self._update(node)
        self._update(right_child)
        return right_child

    def _rotate_right(self, node: Node) -> Node:
        """Right rotation."""
        left_child = node.left
        node.left = left_child.right
        left_child.right = node

        self._update(node)
        self._update(left_child)
        return left_child

    def _validate(self, node: Node | None, low: Any, high: Any) -> tuple[int, int]:
        """Check the subtree against (low, high) bounds; return (height, size)."""
        if node is None:
            return 0, 0

        if node.count < 1:
            raise TreeInvariantError("count", node.key, f"count is {node.count}")
        if low is not None and not node.key > low:
            raise TreeInvariantError("order", node.key, f"not greater than {low!r}")
        if high is not None and not node.key < high:
            raise TreeInvariantError("order", node.key, f"not less than {high!r}")

        left_height, left_size = self._validate(node.left, low, node.key)
        right_height, right_size = self._validate(node.right, node.key, high)

        height = 1 + max(left_height, right_height)
        if node.height != height:
            raise TreeInvariantError(
                "height", node.key, f"stored {node.height}, actual {height}"
            )

        size = node.count + left_size + right_size
        if node.subtree_size != size:
            raise TreeInvariantError(
                "size", node.key, f"stored {node.subtree_size}, actual {size}"
            )

        if abs(left_height - right_height) > 1:
            raise TreeInvariantError(
                "balance",
                node.key,
                f"left height {left_height}, right height {right_height}",
            )

        return height, size


class _InOrderIterator(Iterator[Any]):
    """Iterator yielding every occurrence in non-decreasing order."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._key: Any = None
        self._remaining = 0

        self._push_left_path(root)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._remaining == 0:
            if not self._stack:
                raise StopIteration

            node = self._stack.pop()
            self._key = node.key
            self._remaining = node.count

            # Push right subtree's left path
            self._push_left_path(node.right)

        self._remaining -= 1
        return self._key

    def _push_left_path(self, node: Node | None) -> None:
        while node:
            self._stack.append(node)
            node = node.left


class _AsyncInOrderIterator(AsyncIterator[Any]):
    """Async iterator over the AVL Tree (in-memory, no I/O)."""

    def __init__(self, root: Node | None) -> None:
        self._inner = _InOrderIterator(root)

    def __aiter__(self) -> "_AsyncInOrderIterator":
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
