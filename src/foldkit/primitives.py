"""
Lazy map/filter/flat_map and a left fold.

map_seq, filter_seq and flat_map return a LazySeq: nothing is computed until
it is iterated, and iterating again starts over from the source. A LazySeq is
therefore restartable exactly when its source is.

Example:
    odd_squares = LazySeq(range(1, 7)).filter(lambda x: x % 2).map(lambda x: x * x)
    odd_squares.fold(0, operator.add)  # 35
"""

from __future__ import annotations
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from .errors import InvalidArgument

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def _require_callable(fn: Any, name: str) -> None:
    if not callable(fn):
        raise InvalidArgument(f"{name} must be callable, got {type(fn).__name__}")


def _identity(value: Any) -> Any:
    return value


class LazySeq(Generic[T]):
    """
    Iterable view over a source with one deferred transformation.

    Args:
        source: Any finite iterable.
        step: Function turning an iterator over the source into an iterator
              over this sequence. Defaults to passing elements through.
    """

    def __init__(
        self,
        source: Iterable[Any],
        step: Callable[[Iterator[Any]], Iterator[T]] | None = None,
    ):
        self._source = source
        self._step = step or _identity

    def __iter__(self) -> Iterator[T]:
        return self._step(iter(self._source))

    def __repr__(self) -> str:
        return f"LazySeq({self._source!r})"

    def map(self, transform: Callable[[T], U]) -> LazySeq[U]:
        return map_seq(self, transform)

    def filter(self, predicate: Callable[[T], Any]) -> LazySeq[T]:
        return filter_seq(self, predicate)

    def flat_map(self, expand: Callable[[T], Iterable[U]]) -> LazySeq[U]:
        return flat_map(self, expand)

    def fold(self, seed: R, combine: Callable[[R, T], R]) -> R:
        return fold(self, seed, combine)

    def to_list(self) -> list[T]:
        return list(self)


def map_seq(seq: Iterable[T], transform: Callable[[T], U]) -> LazySeq[U]:
    """Lazily apply transform to each element."""
    _require_callable(transform, "transform")

    def step(items: Iterator[T]) -> Iterator[U]:
        for item in items:
            yield transform(item)

    return LazySeq(seq, step)


def filter_seq(seq: Iterable[T], predicate: Callable[[T], Any]) -> LazySeq[T]:
    """Lazily keep the elements satisfying predicate, in source order."""
    _require_callable(predicate, "predicate")

    def step(items: Iterator[T]) -> Iterator[T]:
        for item in items:
            if predicate(item):
                yield item

    return LazySeq(seq, step)


def flat_map(
    seq: Iterable[T], expand: Callable[[T], Iterable[U]] = _identity
) -> LazySeq[U]:
    """
    Lazily concatenate expand(x) for each element.

    With the default identity this flattens one level of nesting:
        flat_map([[5, 2], [4]]).to_list()  # [5, 2, 4]
    """
    _require_callable(expand, "expand")

    def step(items: Iterator[T]) -> Iterator[U]:
        for item in items:
            yield from expand(item)

    return LazySeq(seq, step)


def fold(seq: Iterable[T], seed: R, combine: Callable[[R, T], R]) -> R:
    """
    Left fold: combine(...combine(combine(seed, x0), x1)..., xn).

    Elements are applied in source order, seed first. An empty sequence
    returns seed unchanged. Whether combine is associative is up to the
    caller; the order of application never changes.
    """
    _require_callable(combine, "combine")
    acc = seed
    for item in seq:
        acc = combine(acc, item)
    return acc


def for_each(seq: Iterable[T], action: Callable[[T], Any]) -> None:
    """Call action on each element in order, discarding the results."""
    _require_callable(action, "action")
    for item in seq:
        action(item)


def sum_over(start: int, stop: int, transform: Callable[[int], Any] = _identity) -> Any:
    """Sum of transform(i) for i from start to stop inclusive."""
    _require_callable(transform, "transform")
    if start > stop:
        raise InvalidArgument(f"Empty range: {start}..{stop}")
    return fold(map_seq(range(start, stop + 1), transform), 0, lambda acc, x: acc + x)


def apply_then(fn: Callable[[T], Any], value: T, delta: Any = 1) -> Any:
    """Return fn(value) + delta."""
    _require_callable(fn, "fn")
    return fn(value) + delta
