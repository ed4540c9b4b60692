"""
Sorting with a caller-supplied less-than predicate.

Both sorts are stable: elements the predicate cannot tell apart keep their
original relative order.
"""

from __future__ import annotations
from functools import cmp_to_key
from typing import Iterable, TypeVar
import logging

from .bst import BST
from .compare import LessThan
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

T = TypeVar("T")


def sort_by(seq: list[T], less_than: LessThan[T]) -> list[T]:
    """
    Sort seq in place and return it.

    Example:
        nums = [1, 2, 3, 4, 5, 6]
        sort_by(nums, compare_by(count_divisors))  # [1, 2, 3, 5, 4, 6]
    """
    if not callable(less_than):
        raise InvalidArgument("less_than must be callable")
    if not isinstance(seq, list):
        raise InvalidArgument(f"sort_by sorts a list in place, got {type(seq).__name__}")

    def compare(a: T, b: T) -> int:
        if less_than(a, b):
            return -1
        if less_than(b, a):
            return 1
        return 0

    logger.debug("Sorting %d items in place", len(seq))
    seq.sort(key=cmp_to_key(compare))
    return seq


def tree_sort(items: Iterable[T], less_than: LessThan[T]) -> list[T]:
    """Return a new sorted list, leaving items untouched."""
    tree = BST(less_than)
    for item in items:
        tree.insert(item)
    logger.debug("Tree-sorted %d items", len(tree))
    return tree.to_list()
