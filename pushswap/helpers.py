"""Small list utilities shared by the sorting strategy."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence

_COMPARATORS = {
    0: operator.gt,
    1: operator.lt,
    2: operator.le,
}


def sorted_copy(numbers: Iterable[int], descending: bool = False) -> list[int]:
    """Return a sorted copy of ``numbers``, ascending unless ``descending``."""
    return sorted(numbers, reverse=bool(descending))


def find_smallest(numbers: Sequence[int]) -> int:
    """Return the smallest number, or 0 for an empty sequence."""
    return min(numbers, default=0)


def has_duplicates(numbers: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for number in numbers:
        if number in seen:
            return True
        seen.add(number)
    return False


def is_strictly_ascending(numbers: Sequence[int]) -> bool:
    """Tell whether the numbers are strictly increasing.

    Fewer than two numbers are never reported as ascending.
    """
    if len(numbers) < 2:
        return False
    return all(left < right for left, right in zip(numbers, numbers[1:]))


def calc_pushed(numbers: Iterable[int], median: int, mode: int) -> int:
    """Count the numbers that would move for a given median.

    Mode 0 counts values above the median, mode 1 values below it and
    mode 2 values at or below it.
    """
    try:
        compare = _COMPARATORS[mode]
    except KeyError:
        raise ValueError(f"unknown push mode: {mode!r}") from None
    return sum(1 for number in numbers if compare(number, median))


def calc_median(sorted_numbers: Sequence[int]) -> int:
    """Return the median of already sorted numbers, rounded down.

    An empty sequence yields -1.
    """
    size = len(sorted_numbers)
    if size == 0:
        return -1
    if size % 2 == 1:
        return sorted_numbers[size // 2]
    return (sorted_numbers[size // 2 - 1] + sorted_numbers[size // 2]) // 2


def drop_front(numbers: Sequence[int], count: int) -> list[int]:
    """Return the numbers without their first ``count`` items."""
    return list(numbers[count:])


def prepend_reversed(dst: Sequence[int], src: Sequence[int], count: int) -> list[int]:
    """Put the first ``count`` items of ``src``, reversed, in front of ``dst``."""
    return list(reversed(src[:count])) + list(dst)