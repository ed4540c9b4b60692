"""Element-wise combination of two sequences."""

from __future__ import annotations
from typing import Callable, Iterable, TypeVar
import logging

from . import config
from .errors import InvalidArgument, LengthMismatch

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


def zip_combine(
    seq_a: Iterable[A],
    seq_b: Iterable[B],
    combine: Callable[[A, B], R],
    strict: bool | None = None,
) -> list[R]:
    """
    Combine two sequences position by position.

    combine is called exactly once per output position, in source order.

    Args:
        seq_a, seq_b: Finite iterables.
        combine: Function of one element from each sequence.
        strict: If True, unequal lengths raise LengthMismatch before combine
                is ever called. If False, the longer input is truncated.
                None reads the default from FOLDKIT_STRICT_ZIP.

    Example:
        zip_combine([1, 2, 3], [4, 5, 6], operator.mul)  # [4, 10, 18]
    """
    if not callable(combine):
        raise InvalidArgument("combine must be callable")
    if strict is None:
        strict = config.strict_zip()

    left = list(seq_a)
    right = list(seq_b)
    if len(left) != len(right):
        if strict:
            raise LengthMismatch(len(left), len(right))
        logger.debug("Truncating zip to %d of (%d, %d)", min(len(left), len(right)), len(left), len(right))

    return [combine(a, b) for a, b in zip(left, right)]
