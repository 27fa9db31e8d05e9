"""Shared constants for the prefix trie tools."""

LOGGER_NAME = "prefixtree"

# Used when no word list is given or it cannot be read
DEFAULT_WORDS: tuple[str, ...] = (
    "Dopamine",
    "Adrenalin",
    "Endorphine",
    "Advil",
    "End",
    "Dope",
)

PROMPT = "Enter a prefix to auto complete (ctrl-c to quit): "

EXIT_NO_CONSOLE = 99  # interactive mode without a terminal on stdin
