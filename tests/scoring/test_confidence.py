"""Tests for confidence scoring."""
from __future__ import annotations

import pytest

from interview_eval.scoring.confidence import ConfidenceScorer


@pytest.fixture
def make_scorer(lexicon, config):
    def _make(provider=None) -> ConfidenceScorer:
        return ConfidenceScorer(lexicon, provider, config.get_section("confidence"))
    return _make


@pytest.fixture
def no_verbs(make_scorer, make_provider) -> ConfidenceScorer:
    return make_scorer(make_provider(verbs=[]))


class TestConfidenceCues:
    """Assertive/hedging phrases, numbers and examples."""

    def test_empty(self, no_verbs):
        assert no_verbs.score("") == 0

    def test_baseline(self, no_verbs):
        assert no_verbs.score("The weather report.") == 50

    def test_verb_bonus(self, make_scorer, make_provider):
        scorer = make_scorer(make_provider(verbs=["have"]))
        assert scorer.score("I have a plan.") == 60

    def test_assertive_phrases(self, no_verbs):
        assert no_verbs.score("I believe this is definitely right.") == 70

    def test_each_occurrence_counts(self, no_verbs):
        assert no_verbs.score("Definitely, definitely.") == 70

    def test_hedging_phrases(self, no_verbs):
        assert no_verbs.score("Maybe, perhaps I think so.") == 26

    def test_numbers(self, no_verbs):
        assert no_verbs.score("I shipped 3 releases.") == 60

    def test_examples(self, no_verbs):
        assert no_verbs.score("Tools such as Docker.") == 65

    def test_clamped_high(self, no_verbs):
        assert no_verbs.score("Absolutely. " * 10) == 100

    def test_clamped_low(self, no_verbs):
        assert no_verbs.score("Maybe. " * 10) == 0


class TestVerbFallback:
    """Provider failures fall back to the common-verb list."""

    def test_failing_provider_uses_common_verbs(self, make_scorer, failing_provider):
        scorer = make_scorer(failing_provider)
        assert scorer.score("I managed the team.") == 60
        assert scorer.score("The weather report.") == 50

    def test_no_provider_uses_common_verbs(self, make_scorer):
        scorer = make_scorer(None)
        assert scorer.score("We built it.") == 60

    def test_textblob_provider_never_raises(self, make_scorer):
        from interview_eval.scoring.sentiment import TextBlobProvider

        scorer = make_scorer(TextBlobProvider())
        score = scorer.score("I managed the team and we built a great product.")
        assert 50 <= score <= 100
