"""Trie vertex with insert, prefix descent and word collection."""

from __future__ import annotations

from collections.abc import Iterator


class TrieNode:
    """Single node in the prefix trie.

    ``children`` maps one character to the next node.  ``terminal`` is True
    when the path from the root to this node spells a stored word; a node can
    be terminal and still have children ("End" and "Endorphine").
    """

    __slots__ = ("children", "terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.terminal: bool = False

    def insert(self, word: str) -> bool:
        """Store ``word`` below this node.

        Returns True if the word was new, False if it was already stored.
        The empty string marks this node itself.
        """
        node = self
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if node.terminal:
            return False
        node.terminal = True
        return True

    def prefix_end_node(self, word: str) -> TrieNode | None:
        """Node reached by following ``word`` from here, or None."""
        node = self
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def lookup(self, word: str, match_prefix: bool = False) -> bool:
        """True if ``word`` is stored below this node.

        With ``match_prefix`` the path only has to exist; otherwise it has to
        end on a terminal node.
        """
        node = self.prefix_end_node(word)
        if node is None:
            return False
        return match_prefix or node.terminal

    def iter_words(self, prefix: str = "") -> Iterator[str]:
        """Yield every word in this subtree, each prefixed with ``prefix``.

        Words come out in code point order: a node's own word before its
        extensions, siblings sorted by key.
        """
        stack: list[tuple[str, TrieNode]] = [(prefix, self)]
        while stack:
            path, node = stack.pop()
            if node.terminal:
                yield path
            # reversed so the smallest key is popped first
            for ch in sorted(node.children, reverse=True):
                stack.append((path + ch, node.children[ch]))

    def collect_words(self, prefix: str = "") -> list[str]:
        return list(self.iter_words(prefix))

    def __repr__(self) -> str:
        return f"TrieNode(children={sorted(self.children)!r}, terminal={self.terminal})"
