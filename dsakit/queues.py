"""Queue and heap based algorithms."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def kth_largest(values: Iterable[int], k: int) -> int:
    """Return the k-th largest value using a bounded min-heap.

    When ``k`` exceeds the number of values the smallest value is returned.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    heap: list[int] = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            heapq.heappop(heap)
    if not heap:
        raise ValueError("no values given")
    return heap[0]


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of each window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    items = list(values)
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(items):
        if window and window[0] <= i - k:
            window.popleft()
        while window and value >= items[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(items[window[0]])
    return result


def drain_max_first(values: Iterable[int]) -> list[int]:
    """Push all values on a max-heap and pop them, largest first."""
    heap = [-v for v in values]
    heapq.heapify(heap)
    drained = []
    while heap:
        drained.append(-heapq.heappop(heap))
    return drained


def binary_numbers(n: int) -> Iterator[str]:
    """Yield the binary representations of 1 through ``n``."""
    pending = deque(["1"])
    for _ in range(n):
        current = pending.popleft()
        yield current
        pending.append(current + "0")
        pending.append(current + "1")