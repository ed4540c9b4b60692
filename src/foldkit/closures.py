"""Factories returning closures over captured state."""

from __future__ import annotations
from typing import Any, Callable

from .errors import InvalidArgument


def _require_int(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an int, got {value!r}")


def make_counter(start: int = 0, step: int = 1) -> Callable[[], int]:
    """
    Return a callable producing start, start + step, start + 2 * step, ...

    Each call returns the current value and then advances it. The value lives
    only inside the returned callable; nothing else can read or reset it.
    There is no bound and no locking, so one caller should own the counter.

    Example:
        counter = make_counter(1, 1)
        counter(), counter(), counter()  # 1, 2, 3
    """
    _require_int(start, "start")
    _require_int(step, "step")
    current = start

    def counter() -> int:
        nonlocal current
        value = current
        current += step
        return value

    return counter


def make_multiplier(factor: Any) -> Callable[[Any], Any]:
    """Return a callable multiplying its argument by factor."""

    def multiplier(value: Any) -> Any:
        return value * factor

    return multiplier


def apply_k_times(k: int, action: Callable[[], Any]) -> None:
    """Call a zero-argument action k times."""
    _require_int(k, "k")
    if k < 0:
        raise InvalidArgument(f"k must be non-negative, got {k}")
    if not callable(action):
        raise InvalidArgument("action must be callable")
    for _ in range(k):
        action()
