"""Prefix trie for word lookup, prefix checks and autocomplete."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from prefixtree.node import TrieNode


class Trie:
    """Prefix trie over a growing vocabulary.

    Every operation delegates to a descent from ``root``, which stands for
    the empty prefix.  Missing words and prefixes are reported as ``None``
    so a stored empty string stays distinguishable from no match.
    """

    def __init__(self, words: Iterable[str] | None = None):
        self.root = TrieNode()
        self._size = 0
        if words is not None:
            self.insert_all(words)

    def insert(self, word: str) -> None:
        """Add ``word``; inserting a stored word again is a no-op."""
        if self.root.insert(word):
            self._size += 1

    def insert_all(self, words: Iterable[str]) -> int:
        """Insert every word and return how many were new."""
        before = self._size
        for word in words:
            self.insert(word)
        return self._size - before

    def lookup(self, word: str) -> str | None:
        """``word`` if it is stored, else None."""
        if self.root.lookup(word):
            return word
        return None

    def is_prefix(self, prefix: str) -> bool:
        """True if some stored word starts with ``prefix`` (or equals it)."""
        return self.root.lookup(prefix, match_prefix=True)

    def auto_complete(self, prefix: str) -> list[str] | None:
        """All stored words starting with ``prefix``, sorted.

        None when no stored word has that prefix.
        """
        end = self.root.prefix_end_node(prefix)
        if end is None:
            return None
        return end.collect_words(prefix)

    def get_all_words(self) -> list[str]:
        return self.root.collect_words("")

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.root.lookup(word)

    def __iter__(self) -> Iterator[str]:
        return self.root.iter_words("")

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"<Trie words={self._size}>"
