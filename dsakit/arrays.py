"""Array algorithms: square roots, window sums, subarrays and bit tricks."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def sqrt_floor(x: int) -> int:
    """Return the largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError(f"cannot take the square root of negative number {x}")
    return math.isqrt(x)


def move_zeroes(values: Iterable[int]) -> list[int]:
    """Return the values with every zero moved to the end, others kept in order."""
    items = list(values)
    non_zero = [v for v in items if v != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive values."""
    items = list(values)
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    if len(items) < k:
        raise ValueError(f"window size {k} exceeds length {len(items)}")
    window = sum(items[:k])
    best = window
    for leaving, entering in zip(items, items[k:]):
        window += entering - leaving
        best = max(best, window)
    return best


def longest_alternating_parity(values: Iterable[int]) -> int:
    """Return the length of the longest run whose neighbours alternate even and odd."""
    items = list(values)
    if not items:
        return 0
    run = best = 1
    for previous, current in zip(items, items[1:]):
        if previous % 2 != current % 2:
            run += 1
            best = max(best, run)
        else:
            run = 1
    return best


def find_subarray_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find a contiguous run summing to ``target``.

    Returns the 1-based (start, end) positions of the first run found, or
    ``None`` when there is none. Intended for non-negative values.
    """
    items = list(values)
    start = 0
    total = 0
    for end, value in enumerate(items):
        total += value
        while total > target and start < end:
            total -= items[start]
            start += 1
        if total == target:
            return start + 1, end + 1
    return None


def two_unique(values: Iterable[int]) -> tuple[int, int]:
    """Return the two values that occur an odd number of times when all others pair up.

    The first value returned is the one holding the lowest bit where the two differ.
    """
    items = list(values)
    xor_all = 0
    for value in items:
        xor_all ^= value
    set_bit = xor_all & -xor_all
    first = second = 0
    for value in items:
        if value & set_bit:
            first ^= value
        else:
            second ^= value
    return first, second