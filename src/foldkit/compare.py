"""
Comparator builders.

A comparator here is a less-than style predicate: it takes two values and
returns True when the first should come before the second.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Generic, TypeVar
import logging
import operator

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")

LessThan = Callable[[T, T], bool]


class Direction(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


def build_comparator(direction: Direction | bool) -> LessThan[Any]:
    """
    Return a predicate ordering values in the given direction.

    Args:
        direction: A Direction, or a bool where True selects greater-than
                   (descending) and False selects less-than (ascending).

    Example:
        greater = build_comparator(True)
        greater(4, 3)  # True
    """
    if isinstance(direction, bool):
        direction = Direction.DESCENDING if direction else Direction.ASCENDING
    if direction is Direction.ASCENDING:
        return operator.lt
    if direction is Direction.DESCENDING:
        return operator.gt
    raise InvalidArgument(f"Unknown direction: {direction!r}")


def compare_by(
    key: Callable[[T], K], direction: Direction | bool = Direction.ASCENDING
) -> LessThan[T]:
    """Order values by key(value) in the given direction."""
    if not callable(key):
        raise InvalidArgument("key must be callable")
    precedes = build_comparator(direction)

    def less_than(a: T, b: T) -> bool:
        return precedes(key(a), key(b))

    return less_than


def count_divisors(number: int) -> int:
    """Number of positive divisors of a positive integer."""
    if isinstance(number, bool) or not isinstance(number, int) or number < 1:
        raise InvalidArgument(f"count_divisors needs a positive int, got {number!r}")
    count = 0
    i = 1
    while i * i <= number:
        if number % i == 0:
            count += 1 if i * i == number else 2
        i += 1
    return count


class CachedCompare(Generic[T]):
    """
    Caches less-than results.

    Useful when the predicate is expensive and the same pairs come up
    repeatedly, as in sorting by a computed key. A cached True for (a, b)
    also answers (b, a) with False.

    Entries are keyed on operand identity and hold references to both
    operands, so a cached answer is only reused for the very same objects.
    The cache keeps those operands alive and grows with every new pair:
    use one instance per batch of related sorts and call clear() between
    unrelated batches.

    Example:
        cached = CachedCompare(compare_by(count_divisors))
        sort_by(items, cached)
        print(f"Cache: {cached.hits} hits, {cached.misses} misses")
        cached.clear()
    """

    def __init__(self, less_than: LessThan[T]):
        if not callable(less_than):
            raise InvalidArgument("less_than must be callable")
        self._less_than = less_than
        self._cache: dict[tuple[int, int], tuple[T, T, bool]] = {}
        self.hits = 0
        self.misses = 0

    def _lookup(self, a: T, b: T) -> bool | None:
        entry = self._cache.get((id(a), id(b)))
        if entry is None or entry[0] is not a or entry[1] is not b:
            return None
        return entry[2]

    def __call__(self, a: T, b: T) -> bool:
        cached = self._lookup(a, b)
        if cached is not None:
            self.hits += 1
            return cached
        if self._lookup(b, a):
            self.hits += 1
            return False

        result = bool(self._less_than(a, b))
        self._cache[(id(a), id(b))] = (a, b, result)
        self.misses += 1
        return result

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        logger.debug("Clearing comparator cache: %d hits, %d misses", self.hits, self.misses)
        self._cache.clear()
        self.hits = 0
        self.misses = 0
