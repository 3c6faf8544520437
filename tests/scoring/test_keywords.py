"""Tests for keyword relevance scoring."""
from __future__ import annotations

import pytest

from interview_eval.scoring.keywords import KeywordMatcher, levenshtein


@pytest.fixture
def matcher(config) -> KeywordMatcher:
    return KeywordMatcher(config.get_section("keywords"))


class TestLevenshtein:
    """Tests for the edit distance helper."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("kitten", "sitting", 3),
            ("", "abc", 3),
            ("same", "same", 0),
            ("skill", "skills", 1),
            ("flaw", "lawn", 2),
        ],
    )
    def test_distance(self, a, b, expected):
        assert levenshtein(a, b) == expected
        assert levenshtein(b, a) == expected


class TestRelevance:
    """Tests for KeywordMatcher.relevance()."""

    def test_all_keywords_verbatim_scores_100(self, matcher):
        answer = "I have strong experience in background and skills development."
        assert matcher.relevance(answer, ["background", "experience", "skills"]) == 100

    def test_case_insensitive(self, matcher):
        assert matcher.relevance("PYTHON and SQL", ["python", "Sql"]) == 100

    def test_no_keywords_is_neutral(self, matcher):
        assert matcher.relevance("Any answer at all.", []) == 50

    def test_empty_answer_scores_zero(self, matcher):
        assert matcher.relevance("", ["x", "y"]) == 0
        assert matcher.relevance("   ", ["x"]) == 0

    def test_empty_answer_checked_before_keywords(self, matcher):
        assert matcher.relevance("", []) == 0

    def test_partial_credit_for_near_miss(self, matcher):
        assert matcher.relevance("I enjoy debuging code", ["debugging"]) == 50

    def test_short_tokens_never_earn_partial_credit(self, matcher):
        assert matcher.relevance("I use jav daily", ["java"]) == 0

    def test_partial_credit_accumulates_and_caps(self, matcher):
        answer = "testng tesing testin"
        assert matcher.relevance(answer, ["testing"]) == 100
        assert matcher.relevance(answer, ["testing", "zebra"]) == 75

    def test_partial_match(self, matcher):
        assert matcher.relevance("We used caching.", ["caching", "sharding"]) == 50

    def test_score_always_in_range(self, matcher):
        for answer in ["", "x", "caching caching caching", "a " * 500]:
            score = matcher.relevance(answer, ["caching", "queue"])
            assert isinstance(score, int)
            assert 0 <= score <= 100


class TestMatches:
    """Tests for KeywordMatcher.matches()."""

    def test_order_preserved(self, matcher):
        matches = matcher.matches("Skills and background", ["skills", "zebra", "background"])
        assert [(m.keyword, m.found) for m in matches] == [
            ("skills", True),
            ("zebra", False),
            ("background", True),
        ]

    def test_partial_credit_keyword_reported_not_found(self, matcher):
        """Near misses raise relevance but are still reported as not found."""
        answer = "I enjoy debuging code"
        assert matcher.relevance(answer, ["debugging"]) > 0
        assert [m.found for m in matcher.matches(answer, ["debugging"])] == [False]

    def test_empty_answer(self, matcher):
        assert [m.found for m in matcher.matches("", ["x", "y"])] == [False, False]
