"""Feedback, strengths and improvements synthesized from dimension scores.

All four dimensions share the same three bands (high >= 75, mid >= 50,
low), so there are twelve feedback sentences; confidence has a mid
sentence of its own instead of a single pass/fail split at 70.
"""
from __future__ import annotations

from interview_eval.config.lexicon import CueLexicon
from interview_eval.models.evaluation import DimensionScores
from interview_eval.scoring.tokenizer import contains_any, word_count

DIMENSIONS = ("relevance", "clarity", "completeness", "confidence")

HIGH_BAND = 75
MID_BAND = 50

FEEDBACK_TEMPLATES: dict[str, dict[str, str]] = {
    "relevance": {
        "high": "Excellent relevance! You addressed all key points effectively.",
        "mid": "Good relevance, but try to incorporate more key concepts from the question.",
        "low": "Focus more on the core topic and use relevant keywords.",
    },
    "clarity": {
        "high": "Very clear and well-structured answer.",
        "mid": "Fairly clear, but work on sentence structure and reduce filler words.",
        "low": "Improve clarity by using shorter, more focused sentences.",
    },
    "completeness": {
        "high": "Comprehensive answer with good detail.",
        "mid": "Add more examples or specifics to make your answer more complete.",
        "low": "Your answer needs more depth and detail.",
    },
    "confidence": {
        "high": "You demonstrated strong confidence in your response.",
        "mid": "Reasonably confident, but commit to your points with fewer hedges.",
        "low": "Try to sound more confident by using assertive language and specific examples.",
    },
}

STRENGTH_THRESHOLD = 70
STRENGTH_PHRASES = {
    "relevance": "Strong understanding of the topic",
    "clarity": "Clear and articulate communication",
    "completeness": "Comprehensive and detailed response",
    "confidence": "Confident delivery",
}
EXAMPLES_STRENGTH = "Good use of examples"
STRUCTURE_STRENGTH = "Well-structured answer"
FALLBACK_STRENGTH = "Provided an answer to the question"

IMPROVEMENT_THRESHOLD = 60
IMPROVEMENT_PHRASES = {
    "relevance": "Focus more on key concepts and relevant topics",
    "clarity": "Improve sentence structure and reduce filler words",
    "completeness": "Provide more detailed and comprehensive answers",
    "confidence": "Use more confident and assertive language",
}
SHORT_ANSWER_WORDS = 30
LONG_ANSWER_WORDS = 250
SHORT_ANSWER_IMPROVEMENT = "Expand your answers with more detail"
LONG_ANSWER_IMPROVEMENT = "Be more concise in your responses"
FALLBACK_IMPROVEMENT = "Continue practicing to refine your interview skills"


def band(score: int) -> str:
    """Threshold band for a dimension score: high (>=75), mid (50-74), low."""
    if score >= HIGH_BAND:
        return "high"
    if score >= MID_BAND:
        return "mid"
    return "low"


class FeedbackSynthesizer:
    """Turns the four dimension scores into human-readable output."""

    def __init__(self, lexicon: CueLexicon):
        self.lexicon = lexicon

    def feedback(self, scores: DimensionScores) -> str:
        """One sentence per dimension, relevance first, joined by spaces."""
        return " ".join(
            FEEDBACK_TEMPLATES[dim][band(getattr(scores, dim))] for dim in DIMENSIONS
        )

    def strengths(self, answer: str, scores: DimensionScores) -> list[str]:
        strengths = [
            STRENGTH_PHRASES[dim]
            for dim in DIMENSIONS
            if getattr(scores, dim) >= STRENGTH_THRESHOLD
        ]

        if contains_any(answer, self.lexicon.examples):
            strengths.append(EXAMPLES_STRENGTH)
        if contains_any(answer, self.lexicon.enumeration):
            strengths.append(STRUCTURE_STRENGTH)

        return strengths or [FALLBACK_STRENGTH]

    def improvements(self, answer: str, scores: DimensionScores) -> list[str]:
        improvements = [
            IMPROVEMENT_PHRASES[dim]
            for dim in DIMENSIONS
            if getattr(scores, dim) < IMPROVEMENT_THRESHOLD
        ]

        words = word_count(answer)
        if words < SHORT_ANSWER_WORDS:
            improvements.append(SHORT_ANSWER_IMPROVEMENT)
        if words > LONG_ANSWER_WORDS:
            improvements.append(LONG_ANSWER_IMPROVEMENT)

        return improvements or [FALLBACK_IMPROVEMENT]
