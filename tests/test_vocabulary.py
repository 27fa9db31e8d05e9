import logging

import pytest

from prefixtree.constants import DEFAULT_WORDS
from prefixtree.vocabulary import Vocabulary, load_words


def test_load_words_strips_and_skips_blank(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"alpha\r\n\r\n  beta  \nGamma\n\n")

    assert load_words(path) == ["alpha", "beta", "Gamma"]


def test_load_words_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.txt")


def test_vocabulary_from_file(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="prefixtree")
    path = tmp_path / "words.txt"
    path.write_text("car\ncart\ncar\ncat\n", encoding="utf-8")

    vocab = Vocabulary(path)

    assert vocab.source == str(path)
    assert vocab.words == ["car", "cart", "car", "cat"]
    assert len(vocab) == 3
    assert "cart" in vocab
    assert vocab.trie.auto_complete("car") == ["car", "cart"]
    assert "Loaded 3 words" in caplog.text


def test_vocabulary_without_path_uses_defaults(caplog):
    vocab = Vocabulary()

    assert vocab.source == "default"
    assert vocab.words == list(DEFAULT_WORDS)
    assert vocab.trie.get_all_words() == sorted(DEFAULT_WORDS)
    assert "No path given" in caplog.text


def test_vocabulary_missing_file_falls_back(tmp_path, caplog):
    vocab = Vocabulary(tmp_path / "missing.txt")

    assert vocab.source == "default"
    assert len(vocab) == len(DEFAULT_WORDS)
    assert "Could not read" in caplog.text
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_vocabulary_undecodable_file_falls_back(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")

    vocab = Vocabulary(path)

    assert vocab.source == "default"
    assert "End" in vocab


def test_vocabulary_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    vocab = Vocabulary(path)

    assert vocab.source == str(path)
    assert len(vocab) == 0
    assert vocab.trie.get_all_words() == []
