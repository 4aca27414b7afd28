"""Singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list with insertion and deletion at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        for value in values:
            self.insert_at_end(value)

    def insert_at_beginning(self, data: Any) -> None:
        """Put ``data`` at the front."""
        self._head = _Node(data, self._head)

    def insert_at_end(self, data: Any) -> None:
        """Put ``data`` at the back."""
        new = _Node(data)
        if self._head is None:
            self._head = new
            return
        node = self._head
        while node.next is not None:
            node = node.next
        node.next = new

    def delete_at_end(self) -> Any:
        """Remove and return the last value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("list is empty")
        if self._head.next is None:
            data = self._head.data
            self._head = None
            return data
        node = self._head
        while node.next.next is not None:
            node = node.next
        data = node.next.data
        node.next = None
        return data

    def delete_at_position(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        if position <= 0:
            raise ValueError(f"invalid position {position}")
        if self._head is None:
            raise IndexError("list is empty")
        if position == 1:
            data = self._head.data
            self._head = self._head.next
            return data
        prev = self._head
        for _ in range(position - 2):
            prev = prev.next
            if prev is None:
                break
        if prev is None or prev.next is None:
            raise IndexError(f"position {position} out of bounds")
        data = prev.next.data
        prev.next = prev.next.next
        return data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self))

    def is_circular(self) -> bool:
        """Return whether following the links ever returns to an earlier node."""
        if self._head is None:
            return False
        slow = self._head
        fast = self._head.next
        while fast is not None and fast.next is not None:
            if slow is fast:
                return True
            slow = slow.next
            fast = fast.next.next
        return False

    def is_palindrome(self) -> bool:
        """Return whether the values read the same in both directions."""
        items = list(self)
        return items == items[::-1]

    def format(self) -> str:
        """Render the list front to back."""
        return "List: " + "".join(f"{v} -> " for v in self) + "NULL"

    def format_reverse(self) -> str:
        """Render the list back to front."""
        return "Reverse: " + "".join(f"{v} <- " for v in reversed(self)) + "NULL"