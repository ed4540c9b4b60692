"""
Foldkit: higher-order combinators and lazy sequence utilities.

Provides comparator builders, lazy map/filter pipelines with a left fold,
closure factories with captured state, element-wise zip-combine and sorting
by a custom less-than predicate.

Usage:
    from foldkit import LazySeq, fold, make_counter, zip_combine, sort_by

    # Lazy pipeline ending in a fold
    total = LazySeq(numbers).filter(is_odd).map(square).fold(0, operator.add)

    # Stateful counter
    counter = make_counter(start=1, step=1)

    # Element-wise combination
    products = zip_combine([1, 2, 3], [4, 5, 6], operator.mul)

    # In-place stable sort with a custom predicate
    sort_by(items, compare_by(count_divisors))
"""

from .compare import (
    Direction,
    LessThan,
    build_comparator,
    compare_by,
    count_divisors,
    CachedCompare,
)
from .primitives import (
    LazySeq,
    map_seq,
    filter_seq,
    flat_map,
    fold,
    for_each,
    sum_over,
    apply_then,
)
from .closures import make_counter, make_multiplier, apply_k_times
from .pairwise import zip_combine
from .sort import sort_by, tree_sort
from .bst import BST
from .errors import FoldkitError, InvalidArgument, LengthMismatch
from .log import setup_logger

__version__ = "0.1.0"
__all__ = [
    # Comparators
    "Direction",
    "LessThan",
    "build_comparator",
    "compare_by",
    "count_divisors",
    "CachedCompare",
    # Pipeline
    "LazySeq",
    "map_seq",
    "filter_seq",
    "flat_map",
    "fold",
    "for_each",
    "sum_over",
    "apply_then",
    # Closures
    "make_counter",
    "make_multiplier",
    "apply_k_times",
    # Zip and sort
    "zip_combine",
    "sort_by",
    "tree_sort",
    "BST",
    # Errors
    "FoldkitError",
    "InvalidArgument",
    "LengthMismatch",
    "setup_logger",
]
