"""Tests for comparator builders."""

import random
import pytest
from foldkit import (
    sort_by,
    Direction,
    build_comparator,
    compare_by,
    count_divisors,
    CachedCompare,
    InvalidArgument,
)


class TestBuildComparator:
    def test_greater_than_flag(self):
        assert build_comparator(True)(4, 3) is True
        assert build_comparator(True)(3, 4) is False

    def test_less_than_flag(self):
        assert build_comparator(False)(4, 3) is False
        assert build_comparator(False)(3, 4) is True

    def test_direction_enum(self):
        assert build_comparator(Direction.DESCENDING)(4, 3)
        assert build_comparator(Direction.ASCENDING)(3, 4)

    def test_equal_values_do_not_precede(self):
        for direction in Direction:
            assert not build_comparator(direction)(5, 5)

    def test_works_on_any_ordered_type(self):
        assert build_comparator(Direction.ASCENDING)("apple", "banana")

    def test_unknown_direction(self):
        with pytest.raises(InvalidArgument):
            build_comparator("sideways")


class TestCompareBy:
    def test_orders_by_key(self):
        shorter = compare_by(len)
        assert shorter("a", "bb")
        assert not shorter("bb", "a")

    def test_descending(self):
        longer = compare_by(len, Direction.DESCENDING)
        assert longer("bb", "a")

    def test_rejects_non_callable_key(self):
        with pytest.raises(InvalidArgument):
            compare_by(3)


class TestCountDivisors:
    @pytest.mark.parametrize(
        "n,expected", [(1, 1), (2, 2), (4, 3), (6, 4), (12, 6), (49, 3)]
    )
    def test_counts(self, n, expected):
        assert count_divisors(n) == expected

    @pytest.mark.parametrize("bad", [0, -3, 2.0, True])
    def test_rejects_non_positive(self, bad):
        with pytest.raises(InvalidArgument):
            count_divisors(bad)


class TestCachedCompare:
    def test_caches_results(self):
        call_count = 0

        def counting_less(a: int, b: int) -> bool:
            nonlocal call_count
            call_count += 1
            return a < b

        cached = CachedCompare(counting_less)

        assert cached(3, 5) is True
        assert call_count == 1
        assert cached.misses == 1
        assert cached.hits == 0

        assert cached(3, 5) is True
        assert call_count == 1
        assert cached.hits == 1

    def test_reverse_lookup_of_true(self):
        call_count = 0

        def counting_less(a: int, b: int) -> bool:
            nonlocal call_count
            call_count += 1
            return a < b

        cached = CachedCompare(counting_less)
        assert cached(3, 5) is True
        assert cached(5, 3) is False
        assert call_count == 1
        assert cached.hits == 1

    def test_false_is_not_reversed(self):
        cached = CachedCompare(lambda a, b: a < b)
        assert cached(5, 3) is False
        assert cached(3, 5) is True
        assert cached.misses == 2

    def test_clear(self):
        cached = CachedCompare(lambda a, b: a < b)
        cached(1, 2)
        cached(1, 2)
        cached.clear()
        assert cached.hits == 0
        assert cached.misses == 0
        cached(1, 2)
        assert cached.misses == 1

    def test_reused_across_sorts_of_fresh_lists(self):
        cached = CachedCompare(build_comparator(False))
        for _ in range(200):
            items = [random.random() for _ in range(5)]
            sort_by(items, cached)
            assert items == sorted(items)

    def test_equal_values_in_distinct_objects_are_not_confused(self):
        cached = CachedCompare(lambda a, b: a[0] < b[0])
        first = [1]
        second = [2]
        assert cached(first, second) is True
        assert cached([2], [1]) is False
        assert cached.hits == 0
        assert cached.misses == 2

    def test_len_and_clear(self):
        cached = CachedCompare(lambda a, b: a < b)
        cached(1.5, 2.5)
        cached(2.5, 3.5)
        assert len(cached) == 2
        cached.clear()
        assert len(cached) == 0

    def test_rejects_non_callable(self):
        with pytest.raises(InvalidArgument):
            CachedCompare(None)
