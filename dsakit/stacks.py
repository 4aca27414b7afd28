"""Stack based algorithms."""

from __future__ import annotations

from collections.abc import Sequence

_OPENERS = {")": "(", "}": "{", "]": "["}


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days until a warmer one, or 0 if none."""
    items = list(temperatures)
    result = [0] * len(items)
    waiting: list[int] = []
    for i, temperature in enumerate(items):
        while waiting and temperature > items[waiting[-1]]:
            previous = waiting.pop()
            result[previous] = i - previous
        waiting.append(i)
    return result


def is_valid_parentheses(text: str) -> bool:
    """Return whether the brackets in ``text`` are balanced and properly nested.

    Any character that is not an opening bracket closes the most recent one;
    it is only checked against it when it is itself a closing bracket.
    """
    stack: list[str] = []
    for ch in text:
        if ch in "({[":
            stack.append(ch)
            continue
        if not stack:
            return False
        top = stack.pop()
        if ch in _OPENERS and _OPENERS[ch] != top:
            return False
    return not stack