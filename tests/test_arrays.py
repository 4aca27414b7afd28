from collections import Counter

import pytest

from dsakit.arrays import (
    find_subarray_with_sum,
    longest_alternating_parity,
    max_window_sum,
    move_zeroes,
    sqrt_floor,
    two_unique,
)


def test_sqrt_floor_bounds_small_numbers():
    for x in range(200):
        r = sqrt_floor(x)
        assert r * r <= x < (r + 1) * (r + 1)


def test_sqrt_floor_large_value():
    x = 2147395599
    r = sqrt_floor(x)
    assert r * r <= x < (r + 1) * (r + 1)


def test_sqrt_floor_perfect_squares():
    for root in range(1, 100):
        assert sqrt_floor(root * root) == root


def test_sqrt_floor_negative_raises():
    with pytest.raises(ValueError):
        sqrt_floor(-4)


def test_move_zeroes_example():
    assert move_zeroes([0, 1, 0, 3, 12]) == [1, 3, 12, 0, 0]


def test_move_zeroes_invariants():
    values = [0, 5, 0, 0, -2, 7, 0, 9]
    result = move_zeroes(values)
    assert len(result) == len(values)
    assert Counter(result) == Counter(values)
    nonzero = [v for v in values if v != 0]
    assert result[: len(nonzero)] == nonzero
    assert all(v == 0 for v in result[len(nonzero):])


def test_move_zeroes_does_not_mutate_input():
    values = [0, 1, 0]
    move_zeroes(values)
    assert values == [0, 1, 0]


def test_max_window_sum_example():
    assert max_window_sum([2, 1, 5, 1, 3, 2], 3) == 9


def test_max_window_sum_whole_list():
    values = [4, -1, 6, 2]
    assert max_window_sum(values, len(values)) == sum(values)


def test_max_window_sum_single():
    values = [4, -1, 6, 2]
    assert max_window_sum(values, 1) == max(values)


def test_max_window_sum_too_short_raises():
    with pytest.raises(ValueError):
        max_window_sum([1, 2], 3)


def test_max_window_sum_bad_k_raises():
    with pytest.raises(ValueError):
        max_window_sum([1, 2], 0)


def test_longest_alternating_example():
    assert longest_alternating_parity([5, 10, 20, 6, 3, 8]) == 3


def test_longest_alternating_full_run():
    values = [1, 2, 3, 4, 5, 6, 7]
    assert longest_alternating_parity(values) == len(values)


def test_longest_alternating_no_run():
    values = [2, 4, 6, 8]
    assert longest_alternating_parity(values) == 1


def test_longest_alternating_negative_numbers():
    values = [-3, 2, -5, 4]
    assert longest_alternating_parity(values) == len(values)


def test_find_subarray_sum_matches_target():
    values = [1, 2, 3, 7, 5]
    target = 12
    start, end = find_subarray_with_sum(values, target)
    assert 1 <= start <= end <= len(values)
    assert sum(values[start - 1:end]) == target


def test_find_subarray_single_element():
    values = [4, 9, 1]
    start, end = find_subarray_with_sum(values, 9)
    assert start == end
    assert values[start - 1] == 9


def test_find_subarray_not_found():
    assert find_subarray_with_sum([1, 2, 3], 100) is None


def test_two_unique_recovers_pair():
    a, b = 3, 4
    values = [1, 2, a, b, 1, 2]
    assert set(two_unique(values)) == {a, b}


def test_two_unique_larger_input():
    a, b = 17, 40
    values = [9, 11, a, 9, 23, b, 11, 23]
    result = two_unique(values)
    assert set(result) == {a, b}
    assert result[0] ^ result[1] == a ^ b