from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.helpers import (
    calc_median,
    calc_pushed,
    drop_front,
    find_smallest,
    has_duplicates,
    is_strictly_ascending,
    prepend_reversed,
    sorted_copy,
)

int_lists = st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1))


@given(int_lists)
def test_sorted_copy_ascending_is_ordered_permutation(numbers):
    result = sorted_copy(numbers, False)
    assert Counter(result) == Counter(numbers)
    assert all(a <= b for a, b in zip(result, result[1:]))


@given(int_lists)
def test_sorted_copy_descending_is_ordered_permutation(numbers):
    result = sorted_copy(numbers, True)
    assert Counter(result) == Counter(numbers)
    assert all(a >= b for a, b in zip(result, result[1:]))


def test_sorted_copy_leaves_input_untouched():
    numbers = [3, 1, 2]
    sorted_copy(numbers, False)
    assert numbers == [3, 1, 2]


def test_find_smallest_empty_is_zero():
    assert find_smallest([]) == 0


@given(st.lists(st.integers(), min_size=1))
def test_find_smallest_is_member_and_lower_bound(numbers):
    smallest = find_smallest(numbers)
    assert smallest in numbers
    assert all(smallest <= n for n in numbers)


def test_has_duplicates_detects_repeat():
    assert has_duplicates([4, 7, 4])
    assert has_duplicates([-1, -1])


def test_has_duplicates_on_unique_values():
    assert not has_duplicates([4, 7, 9])
    assert not has_duplicates([])


@given(st.sets(st.integers(), min_size=1))
def test_has_duplicates_after_repeating_an_element(values):
    numbers = list(values)
    assert not has_duplicates(numbers)
    assert has_duplicates(numbers + [numbers[0]])


def test_is_strictly_ascending():
    assert is_strictly_ascending([1, 2, 3])
    assert not is_strictly_ascending([1, 1, 2])
    assert not is_strictly_ascending([3, 2])


def test_is_strictly_ascending_short_sequences_are_not_sorted():
    assert not is_strictly_ascending([5])
    assert not is_strictly_ascending([])


@given(int_lists, st.integers())
def test_calc_pushed_modes_partition(numbers, median):
    above = calc_pushed(numbers, median, 0)
    below = calc_pushed(numbers, median, 1)
    at_most = calc_pushed(numbers, median, 2)
    assert above + at_most == len(numbers)
    assert at_most - below == numbers.count(median)


def test_calc_pushed_rejects_unknown_mode():
    with pytest.raises(ValueError):
        calc_pushed([1, 2], 1, 7)


def test_calc_median_empty():
    assert calc_median([]) == -1


def test_calc_median_odd_takes_middle():
    assert calc_median([1, 5, 9]) == 5
    assert calc_median([8]) == 8


def test_calc_median_even_negative_rounds_down():
    assert calc_median([-3, 0]) == -2


@given(st.lists(st.integers(-10**6, 10**6), min_size=1).map(sorted))
def test_calc_median_lies_between_middle_items(numbers):
    median = calc_median(numbers)
    n = len(numbers)
    assert numbers[(n - 1) // 2] <= median <= numbers[n // 2]


def test_drop_front():
    assert drop_front([1, 2, 3], 1) == [2, 3]
    assert drop_front([1, 2, 3], 3) == []


def test_prepend_reversed():
    assert prepend_reversed([4, 5], [1, 2, 3], 2) == [2, 1, 4, 5]


@given(int_lists, int_lists, st.integers(0, 20))
def test_prepend_then_drop_round_trip(dst, src, count):
    count = min(count, len(src))
    combined = prepend_reversed(dst, src, count)
    assert len(combined) == len(dst) + count
    assert drop_front(combined, count) == dst
    assert list(reversed(combined[:count])) == src[:count]