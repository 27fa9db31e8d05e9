"""Word list loading with a built-in fallback vocabulary."""

from __future__ import annotations

import logging
import os

from prefixtree.constants import DEFAULT_WORDS, LOGGER_NAME
from prefixtree.trie import Trie

log = logging.getLogger(LOGGER_NAME)


def load_words(path: str | os.PathLike[str]) -> list[str]:
    """Read one word per line; blank lines are skipped, case is kept."""
    words: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word:
                words.append(word)
    return words


class Vocabulary:
    """Word list loaded into a trie."""

    def __init__(self, path: str | os.PathLike[str] | None = None):
        self.words: list[str] = []
        self.trie = Trie()
        self.source = "default"
        self._load(path)

    def _load(self, path: str | os.PathLike[str] | None) -> None:
        if path is None:
            log.warning("No path given, using default set of words: %s", list(DEFAULT_WORDS))
            self._load_default()
            return

        try:
            words = load_words(path)
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Could not read %s (%s)", path, exc)
            log.warning("Using default set of words: %s", list(DEFAULT_WORDS))
            self._load_default()
            return

        self.words = words
        self.source = os.fspath(path)
        added = self.trie.insert_all(words)
        log.info("Loaded %s words from %s", f"{added:,}", self.source)
        if added != len(words):
            log.debug("%d duplicate lines ignored", len(words) - added)

    def _load_default(self) -> None:
        self.words = list(DEFAULT_WORDS)
        self.source = "default"
        self.trie.insert_all(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
