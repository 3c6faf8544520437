"""Tests for word/sentence tokenization and phrase counting."""
from __future__ import annotations

from interview_eval.scoring.tokenizer import (
    contains_any,
    count_phrase,
    count_phrases,
    split_sentences,
    tokenize,
    word_count,
)


class TestTokenize:
    """Tests for tokenize()."""

    def test_alphanumeric_runs_case_preserved(self):
        assert tokenize("Hello, world! It's 2024.") == ["Hello", "world", "It", "s", "2024"]

    def test_empty_and_whitespace(self):
        assert tokenize("") == []
        assert tokenize("   \n\t") == []

    def test_punctuation_only(self):
        assert tokenize("... !!! ???") == []

    def test_underscore_is_separator(self):
        assert tokenize("snake_case") == ["snake", "case"]

    def test_word_count(self):
        assert word_count("one two, three.") == 3


class TestSplitSentences:
    """Tests for split_sentences()."""

    def test_terminal_punctuation(self):
        assert split_sentences("First one. Second one! Third?") == [
            "First one.",
            "Second one!",
            "Third?",
        ]

    def test_trailing_fragment_kept_without_punctuation(self):
        assert split_sentences("Done. And then") == ["Done.", "And then"]

    def test_repeated_terminators_stay_attached(self):
        assert split_sentences("Wait... what?!") == ["Wait...", "what?!"]

    def test_no_sentences_in_punctuation(self):
        assert split_sentences("...") == []
        assert split_sentences("Hi. . .") == ["Hi."]

    def test_empty(self):
        assert split_sentences("") == []


class TestPhraseCounting:
    """Tests for whole-word cue phrase matching."""

    def test_whole_word_only(self):
        text = "Um, I um like it. Likely."
        assert count_phrase(text, "um") == 2
        assert count_phrase(text, "like") == 1

    def test_multi_word_phrase_flexible_whitespace(self):
        assert count_phrase("You know, you  know", "you know") == 2

    def test_blank_phrase(self):
        assert count_phrase("anything", "  ") == 0

    def test_weighted_sum(self):
        weights = {"maybe": -8, "definitely": 10}
        assert count_phrases("Maybe. Definitely, definitely.", weights) == 12

    def test_contains_any(self):
        assert contains_any("Tools such as Docker", ["for example", "such as"])
        assert not contains_any("Tools like Docker", ["for example", "such as"])
