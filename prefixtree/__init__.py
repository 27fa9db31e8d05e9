"""Prefix trie with word lookup, prefix checks and autocomplete."""

from prefixtree.constants import DEFAULT_WORDS, EXIT_NO_CONSOLE
from prefixtree.node import TrieNode
from prefixtree.trie import Trie
from prefixtree.vocabulary import Vocabulary, load_words
from prefixtree.cli import complete_prefix, run_cli

__all__ = [
    "DEFAULT_WORDS",
    "EXIT_NO_CONSOLE",
    "Trie",
    "TrieNode",
    "Vocabulary",
    "complete_prefix",
    "load_words",
    "run_cli",
]
