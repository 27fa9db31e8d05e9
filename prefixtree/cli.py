"""Interactive autocomplete prompt."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable

from prefixtree.constants import EXIT_NO_CONSOLE, LOGGER_NAME, PROMPT
from prefixtree.trie import Trie

log = logging.getLogger(LOGGER_NAME)


def _has_console() -> bool:
    """True when both stdin and stdout are attached to a terminal."""
    return all(
        stream is not None and stream.isatty()
        for stream in (sys.stdin, sys.stdout)
    )


def complete_prefix(trie: Trie, prefix: str) -> str:
    """One line of output for ``prefix``."""
    words = trie.auto_complete(prefix)
    if words is None:
        return f"No words start with {prefix!r}"
    return f"Prefix {prefix} matched the following words: {words}"


def run_cli(trie: Trie, prefixes: Iterable[str] | None = None) -> int:
    """Answer ``prefixes``, or prompt for them until EOF or ctrl-c.

    Returns the process exit status.
    """
    if prefixes is not None:
        for prefix in prefixes:
            print(complete_prefix(trie, prefix))
        return 0

    if not _has_console():
        log.error("Could not find a console, quitting!")
        return EXIT_NO_CONSOLE

    while True:
        try:
            prefix = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        print(complete_prefix(trie, prefix))

    return 0
