"""
Binary search tree ordered by a less-than predicate.

Equal elements go to the right subtree, so an in-order walk returns equal
elements in insertion order. tree_sort relies on that for stability.
"""

from __future__ import annotations
from typing import TypeVar, Generic, Iterator
from dataclasses import dataclass

from .compare import LessThan
from .errors import InvalidArgument

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    value: T
    left: Node[T] | None = None
    right: Node[T] | None = None


class BST(Generic[T]):
    """
    Unbalanced binary search tree.

    Example:
        tree = BST(lambda a, b: len(a) < len(b))
        for word in ["ccc", "a", "bb"]:
            tree.insert(word)
        tree.to_list()  # ["a", "bb", "ccc"]
    """

    def __init__(self, less_than: LessThan[T]):
        """
        Args:
            less_than: Returns True if a should come before b.
        """
        if not callable(less_than):
            raise InvalidArgument("less_than must be callable")
        self._less_than = less_than
        self._root: Node[T] | None = None
        self._size = 0

    def insert(self, value: T) -> None:
        new_node = Node(value)
        self._size += 1
        if self._root is None:
            self._root = new_node
            return

        node = self._root
        while True:
            if self._less_than(value, node.value):
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def contains(self, value: T) -> bool:
        """Check if a value equivalent to value under the ordering exists."""
        node = self._root
        while node is not None:
            if self._less_than(value, node.value):
                node = node.left
            elif self._less_than(node.value, value):
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator[T]:
        # Iterative in-order walk; degenerate trees can be as deep as len(self).
        stack: list[Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def to_list(self) -> list[T]:
        """Return in-order traversal as list."""
        return list(self)

    def __len__(self) -> int:
        return self._size
