"""Greedy algorithms: activity selection, platforms and coin change."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class InexactChangeError(ValueError):
    """Raised when the greedy choice of coins cannot reach the amount exactly."""

    def __init__(self, amount: int, used: list[int], remainder: int) -> None:
        super().__init__(
            f"cannot make exact amount {amount} with given coins; {remainder} left over"
        )
        self.amount = amount
        self.used = used
        self.remainder = remainder


def select_activities(
    starts: Sequence[int], ends: Sequence[int]
) -> list[tuple[int, int]]:
    """Choose the most non-overlapping activities, earliest finish first.

    Returns the chosen (start, end) pairs in the order they are taken.
    """
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    activities = sorted(zip(ends, starts))
    chosen: list[tuple[int, int]] = []
    last_end = None
    for end, start in activities:
        if last_end is None or start >= last_end:
            chosen.append((start, end))
            last_end = end
    return chosen


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Return the fewest platforms needed so that no train waits."""
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    arr = sorted(arrivals)
    dep = sorted(departures)
    platforms = best = 0
    i = j = 0
    while i < len(arr) and j < len(dep):
        if arr[i] <= dep[j]:
            platforms += 1
            i += 1
        else:
            platforms -= 1
            j += 1
        best = max(best, platforms)
    return best


def greedy_change(coins: Iterable[int], amount: int) -> list[int]:
    """Return the coins chosen largest first to make ``amount``.

    Raises InexactChangeError when something is left over.
    """
    denominations = sorted(coins, reverse=True)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    used: list[int] = []
    remaining = amount
    for coin in denominations:
        count, remaining = divmod(remaining, coin) if remaining > 0 else (0, remaining)
        used.extend([coin] * count)
    if remaining != 0:
        raise InexactChangeError(amount, used, remaining)
    return used