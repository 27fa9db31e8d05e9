#!/usr/bin/env python3
"""
Trie Autocomplete

Loads a word list (one word per line) into a prefix trie and completes
prefixes typed at the prompt. Without a readable word list a small
built-in vocabulary is used.

TIP: on most Linux machines you can pass /usr/share/dict/words.
"""

from __future__ import annotations

import argparse
import logging
import sys

from prefixtree.cli import run_cli
from prefixtree.constants import LOGGER_NAME
from prefixtree.vocabulary import Vocabulary

log = logging.getLogger(LOGGER_NAME)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Trie Autocomplete -- completes prefixes from a word list",
    )
    parser.add_argument("words", nargs="?", default=None,
                        help="Path to a word list file (one word per line)")
    parser.add_argument("--prefix", "-p", action="append", default=None,
                        help="Complete this prefix and exit (repeatable)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    vocabulary = Vocabulary(args.words)
    log.debug("Vocabulary source: %s", vocabulary.source)
    print(f"Inserted {len(vocabulary.trie)} words into the trie.")

    return run_cli(vocabulary.trie, args.prefix)


if __name__ == "__main__":
    sys.exit(main())
