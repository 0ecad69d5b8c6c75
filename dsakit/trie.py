"""A trie of lower-case words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_terminal: bool = False


def _check_word(word: str) -> str:
    if not set(word) <= _ALPHABET:
        raise ValueError(f"words may hold only the letters a-z, got {word!r}")
    return word


class Trie:
    """A set of words over the letters a-z, stored by shared prefixes."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and set(word) <= _ALPHABET and self.search(word)

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for letter in _check_word(word):
            node = node.children.setdefault(letter, _TrieNode())
        node.is_terminal = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted and not removed since."""
        node = self._root
        for letter in _check_word(word):
            child = node.children.get(letter)
            if child is None:
                return False
            node = child
        return node.is_terminal

    def remove(self, word: str) -> None:
        """Remove ``word`` if present, dropping nodes no other word needs."""
        path = [self._root]
        for letter in _check_word(word):
            child = path[-1].children.get(letter)
            if child is None:
                return
            path.append(child)
        path[-1].is_terminal = False
        for letter, parent, child in zip(reversed(word), reversed(path[:-1]), reversed(path[1:])):
            if child.is_terminal or child.children:
                break
            del parent.children[letter]