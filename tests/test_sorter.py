from itertools import permutations

import pytest

from pushswap.sorter import Sorter, sort_numbers
from pushswap.stacks import Stacks

MOVE_NAMES = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _replay(numbers, moves):
    stacks = Stacks(numbers)
    for move in moves:
        getattr(stacks, move)()
    return stacks


def _all_permutations(values):
    return [list(p) for p in permutations(values) if list(p) != sorted(p)]


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_every_permutation_gets_sorted(size):
    for perm in _all_permutations(range(1, size + 1)):
        moves = sort_numbers(perm)
        result = _replay(perm, moves)
        assert list(result.a) == sorted(perm), perm
        assert not result.b


def test_negative_numbers_get_sorted():
    for perm in _all_permutations([-3, -1, 0, 4, 9]):
        result = _replay(perm, sort_numbers(perm))
        assert list(result.a) == sorted(perm)
        assert not result.b


def test_moves_are_known_instructions():
    for perm in _all_permutations(range(5)):
        assert set(sort_numbers(perm)) <= MOVE_NAMES


def test_run_state_matches_replay():
    numbers = [5, 2, 6, 1, 4, 3]
    sorter = Sorter(numbers)
    moves = sorter.run()
    replayed = _replay(numbers, moves)
    assert list(replayed.a) == list(sorter.stacks.a)
    assert list(replayed.b) == list(sorter.stacks.b)


def test_sorted_input_needs_no_moves():
    assert sort_numbers(range(100)) == []


def test_short_input_needs_no_moves():
    assert sort_numbers([7]) == []
    assert sort_numbers([]) == []


def test_duplicates_rejected():
    with pytest.raises(ValueError):
        sort_numbers([3, 1, 3])


@pytest.mark.parametrize("top", _all_permutations([1, 2, 3]))
def test_sort_3_sorts_top_of_longer_stack(top):
    sorter = Sorter(top + [10, 20])
    sorter.sort_3(0)
    assert list(sorter.stacks.a) == [1, 2, 3, 10, 20]
    assert not sorter.stacks.b


@pytest.mark.parametrize("perm", [list(p) for p in permutations([4, 1, 3, 2])])
def test_sort_4_sorts_four(perm):
    sorter = Sorter(perm)
    sorter.sorted_a = sorted(perm)
    sorter.sort_4(0)
    assert list(sorter.stacks.a) == [1, 2, 3, 4]
    assert not sorter.stacks.b


@pytest.mark.parametrize("perm", [list(p) for p in permutations([7, 8, 9])])
def test_first_sort_a_sorts_three(perm):
    sorter = Sorter(perm)
    sorter.first_sort_a()
    assert list(sorter.stacks.a) == [7, 8, 9]


def test_first_sort_a_ignores_other_sizes():
    sorter = Sorter([4, 3, 2, 1])
    sorter.first_sort_a()
    assert sorter.stacks.moves == []
    assert list(sorter.stacks.a) == [4, 3, 2, 1]


@pytest.mark.parametrize("perm", _all_permutations(range(1, 6)))
def test_push_phase_leaves_three_largest_on_a(perm):
    sorter = Sorter(perm)
    sorter.handle_median_push_b()
    assert list(sorter.stacks.a) == [3, 4, 5]
    assert sorted(sorter.stacks.b) == [1, 2]


def test_update_arrays_after_push_to_a():
    sorter = Sorter([3, 4, 5, 6])
    sorter.stacks.b.append(2)
    sorter.sorted_a = [5, 6]
    sorter.sorted_b = [4, 3, 2]
    sorter.last_pushed = 2
    sorter.update_arrays(0)
    assert sorter.sorted_a == sorted(sorter.stacks.a)
    assert sorter.sorted_b == sorted(sorter.stacks.b, reverse=True)


def test_update_arrays_after_push_to_b():
    sorter = Sorter([5, 6])
    sorter.stacks.b.extend([2, 1, 0])
    sorter.sorted_a = [1, 2, 5, 6]
    sorter.sorted_b = [0]
    sorter.last_pushed = 2
    sorter.update_arrays(1)
    assert sorter.sorted_a == sorted(sorter.stacks.a)
    assert sorter.sorted_b == sorted(sorter.stacks.b, reverse=True)


def test_update_arrays_rejects_unknown_flag():
    with pytest.raises(ValueError):
        Sorter([1, 2]).update_arrays(9)


def test_sort_6_push_rotate_moves_large_numbers_to_a():
    sorter = Sorter([10])
    sorter.stacks.b.extend([1, 5, 2, 6])
    sorter.med1 = 3
    left = sorter.sort_6_push_rotate(2)
    assert left == 0
    assert sorted(list(sorter.stacks.a)[:2]) == [5, 6]
    assert sorted(sorter.stacks.b) == [1, 2]
    assert sorter.last_rotated == sorter.stacks.moves.count("rb")