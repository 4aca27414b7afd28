"""Frequency counting and counting sort."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Hashable


def frequencies(values: Iterable[Hashable]) -> dict:
    """Return a mapping from each value to the number of times it occurs."""
    return dict(Counter(values))


def count_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ascending order using counting sort."""
    items = list(values)
    if not items:
        return []
    smallest = min(items)
    if smallest < 0:
        raise ValueError(f"counting sort needs non-negative values, got {smallest}")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]