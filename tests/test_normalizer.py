"""Tests for normalizer.py."""

import logging

import pytest

from models import WordInput
from normalizer import coerce_input, is_valid_word, normalize_word, normalize_words


class TestNormalizeWords:
    def test_uppercases_and_trims(self):
        result = normalize_words([WordInput("  coffee ", "  Morning drink  ")])
        assert result == [WordInput("COFFEE", "Morning drink")]

    def test_rejects_punctuation(self):
        result = normalize_words([WordInput("co-ffee", "x"), WordInput("coffee", "y")])
        assert [w.word for w in result] == ["COFFEE"]

    def test_rejects_short_words(self):
        result = normalize_words([WordInput("a", "x"), WordInput(" b ", "y"), WordInput("ab", "z")])
        assert [w.word for w in result] == ["AB"]

    def test_rejects_inner_space_and_digits(self):
        result = normalize_words([WordInput("ice cream", "x"), WordInput("R2D2", "y")])
        assert result == []

    def test_rejects_non_ascii_letters(self):
        assert normalize_words([WordInput("café", "x")]) == []

    def test_keeps_empty_clue(self):
        assert normalize_words([WordInput("cat", "")]) == [WordInput("CAT", "")]

    def test_keeps_duplicates_in_order(self):
        result = normalize_words([WordInput("cat", "1"), WordInput("dog", "2"), WordInput("CAT", "3")])
        assert [w.clue for w in result] == ["1", "2", "3"]

    def test_accepts_mappings(self):
        result = normalize_words([{"word": "dog", "clue": " Canine "}])
        assert result == [WordInput("DOG", "Canine")]

    def test_empty(self):
        assert normalize_words([]) == []

    def test_logs_rejections(self, caplog):
        with caplog.at_level(logging.WARNING, logger="normalizer"):
            normalize_words([WordInput("x1", "bad")])
        assert "x1" in caplog.text


class TestHelpers:
    def test_normalize_word_keeps_inner_characters(self):
        assert normalize_word(" well-known ") == "WELL-KNOWN"

    def test_normalize_word_none(self):
        assert normalize_word(None) == ""

    @pytest.mark.parametrize("word,ok", [
        ("AB", True), ("A", False), ("", False), ("AB-C", False), ("abc", False),
    ])
    def test_is_valid_word(self, word, ok):
        assert is_valid_word(word) is ok

    def test_coerce_rejects_other_types(self):
        with pytest.raises(TypeError):
            coerce_input(("CAT", "x"))

    def test_coerce_mapping_missing_clue(self):
        assert coerce_input({"word": "cat"}) == WordInput("cat", "")
