"""Dynamic programming classics."""

from __future__ import annotations

from functools import lru_cache


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking 1 or 2 at a time."""
    if n <= 1:
        return 1
    ways = [0] * (n + 1)
    ways[0] = ways[1] = 1
    for i in range(2, n + 1):
        ways[i] = ways[i - 1] + ways[i - 2]
    return ways[n]


@lru_cache(maxsize=None)
def _fib_cached(n: int) -> int:
    if n <= 1:
        return n
    return _fib_cached(n - 1) + _fib_cached(n - 2)


def fib_memo(n: int) -> int:
    """Return the n-th Fibonacci number by memoised recursion."""
    # Warm the cache in steps so deep values never exceed the recursion limit.
    for step in range(0, n, 256):
        _fib_cached(step)
    return _fib_cached(n)


def fib_table(n: int) -> int:
    """Return the n-th Fibonacci number by bottom-up tabulation."""
    if n <= 1:
        return n
    table = [0] * (n + 1)
    table[1] = 1
    for i in range(2, n + 1):
        table[i] = table[i - 1] + table[i - 2]
    return table[n]


def fibonacci_series(n: int) -> list[int]:
    """Return the Fibonacci numbers from index 0 through ``n``."""
    return [fib_memo(i) for i in range(n + 1)]


def lcs_length(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        current = [0]
        for j, b in enumerate(text2, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]