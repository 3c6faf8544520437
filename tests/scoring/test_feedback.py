"""Tests for feedback, strengths and improvements synthesis."""
from __future__ import annotations

import pytest

from interview_eval.models.evaluation import DimensionScores
from interview_eval.scoring.feedback import (
    FEEDBACK_TEMPLATES,
    FeedbackSynthesizer,
    band,
)


def scores(relevance: int, clarity: int, completeness: int, confidence: int) -> DimensionScores:
    return DimensionScores.from_dimensions(relevance, clarity, completeness, confidence)


def words(n: int) -> str:
    return " ".join(["word"] * n)


@pytest.fixture
def synth(lexicon) -> FeedbackSynthesizer:
    return FeedbackSynthesizer(lexicon)


class TestBands:
    """Threshold bands for feedback sentences."""

    @pytest.mark.parametrize(
        "score, expected",
        [(100, "high"), (75, "high"), (74, "mid"), (50, "mid"), (49, "low"), (0, "low")],
    )
    def test_band(self, score, expected):
        assert band(score) == expected


class TestFeedback:
    """Tests for FeedbackSynthesizer.feedback()."""

    def test_all_high(self, synth):
        text = synth.feedback(scores(90, 90, 90, 90))
        assert text == " ".join(FEEDBACK_TEMPLATES[d]["high"] for d in
                                ("relevance", "clarity", "completeness", "confidence"))

    def test_mixed_bands_in_fixed_order(self, synth):
        text = synth.feedback(scores(80, 60, 20, 50))
        assert text == " ".join([
            FEEDBACK_TEMPLATES["relevance"]["high"],
            FEEDBACK_TEMPLATES["clarity"]["mid"],
            FEEDBACK_TEMPLATES["completeness"]["low"],
            FEEDBACK_TEMPLATES["confidence"]["mid"],
        ])

    def test_templates_are_distinct(self):
        sentences = [s for bands in FEEDBACK_TEMPLATES.values() for s in bands.values()]
        assert len(sentences) == len(set(sentences)) == 12

    def test_every_dimension_has_three_bands(self, synth):
        for bands in FEEDBACK_TEMPLATES.values():
            assert set(bands) == {"high", "mid", "low"}
        scores = DimensionScores.from_dimensions(80, 80, 80, 60)
        assert synth.feedback(scores).endswith(FEEDBACK_TEMPLATES["confidence"]["mid"])


class TestStrengths:
    """Tests for FeedbackSynthesizer.strengths()."""

    def test_dimension_strengths(self, synth):
        result = synth.strengths("A plain answer.", scores(70, 70, 70, 70))
        assert result == [
            "Strong understanding of the topic",
            "Clear and articulate communication",
            "Comprehensive and detailed response",
            "Confident delivery",
        ]

    def test_example_and_structure_cues_not_capped(self, synth):
        answer = "First, for example, we profiled the service. Finally we fixed it."
        result = synth.strengths(answer, scores(90, 90, 90, 90))
        assert len(result) == 6
        assert result[-2:] == ["Good use of examples", "Well-structured answer"]

    def test_cue_without_high_scores(self, synth):
        assert synth.strengths("Tools such as Docker.", scores(10, 10, 10, 10)) == [
            "Good use of examples"
        ]

    def test_fallback(self, synth):
        assert synth.strengths("ok", scores(69, 10, 0, 50)) == [
            "Provided an answer to the question"
        ]


class TestImprovements:
    """Tests for FeedbackSynthesizer.improvements()."""

    def test_low_scores_and_short_answer(self, synth):
        result = synth.improvements(words(10), scores(59, 59, 59, 59))
        assert result == [
            "Focus more on key concepts and relevant topics",
            "Improve sentence structure and reduce filler words",
            "Provide more detailed and comprehensive answers",
            "Use more confident and assertive language",
            "Expand your answers with more detail",
        ]

    def test_long_answer(self, synth):
        assert synth.improvements(words(251), scores(80, 80, 80, 80)) == [
            "Be more concise in your responses"
        ]

    def test_fallback(self, synth):
        assert synth.improvements(words(40), scores(60, 60, 60, 60)) == [
            "Continue practicing to refine your interview skills"
        ]
