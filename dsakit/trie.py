"""Prefix tree over lower-case ASCII words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    is_end: bool = False


def _check(word: str) -> None:
    bad = set(word) - _ALPHABET
    if bad:
        raise ValueError(f"only letters a-z are allowed, got {sorted(bad)!r}")


class Trie:
    """A trie storing words made of the letters a to z."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _find(self, text: str) -> _TrieNode | None:
        _check(text)
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _check(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Return whether ``word`` was inserted as a whole word."""
        node = self._find(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Return whether any inserted word begins with ``prefix``."""
        return self._find(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)