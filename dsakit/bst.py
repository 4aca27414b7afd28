"""Binary search tree with insertion, deletion and in-order traversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    val: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """An unbalanced binary search tree; equal keys go to the right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def insert(self, key: int) -> None:
        """Add ``key`` to the tree."""
        new = _Node(key)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if key < node.val:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def delete(self, key: int) -> bool:
        """Remove one occurrence of ``key``; return whether it was present."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.val != key:
            parent = node
            node = node.left if key < node.val else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.val = successor.val
            parent, node = successor_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True

    def search(self, key: int) -> bool:
        """Return whether ``key`` is in the tree."""
        node = self._root
        while node is not None:
            if key == node.val:
                return True
            node = node.left if key < node.val else node.right
        return False

    def __contains__(self, key: object) -> bool:
        return self.search(key)  # type: ignore[arg-type]

    def minimum(self) -> int:
        """Return the smallest key; raise ValueError when the tree is empty."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.val

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.val
            node = node.right