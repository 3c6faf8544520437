"""Clarity scoring from sentence structure and filler density.

Starting from a baseline of 50:
- Average sentence length in the ideal range (10-30 words): +20
- Average sentence length under 5 or over 50 words: -15
- Well-formed sentences (> 10 chars, terminal punctuation): up to +20,
  scaled by their share of all sentences
- More than 5 filler words: -min(2 * fillers, 20)
"""
from __future__ import annotations

from typing import Any, Optional

from interview_eval.config.lexicon import CueLexicon
from interview_eval.scoring.tokenizer import (
    TERMINAL_PUNCTUATION,
    count_phrases,
    is_blank,
    split_sentences,
    tokenize,
)
from interview_eval.utils.rounding import clamp_score


class ClarityScorer:
    """Scores sentence-structure quality of an answer."""

    def __init__(self, lexicon: CueLexicon, config: Optional[dict[str, Any]] = None):
        config = config or {}
        self.fillers = lexicon.fillers
        self.baseline = float(config.get("baseline", 50))
        self.no_sentence_score = int(config.get("no_sentence_score", 20))
        low, high = config.get("ideal_sentence_words", (10, 30))
        self.ideal_range = (float(low), float(high))
        self.ideal_bonus = float(config.get("ideal_sentence_bonus", 20))
        self.short_sentence_words = float(config.get("short_sentence_words", 5))
        self.long_sentence_words = float(config.get("long_sentence_words", 50))
        self.length_penalty = float(config.get("sentence_length_penalty", 15))
        self.well_formed_min_chars = int(config.get("well_formed_min_chars", 11))
        self.well_formed_bonus = float(config.get("well_formed_bonus", 20))
        self.filler_threshold = float(config.get("filler_threshold", 5))
        self.filler_penalty_per_hit = float(config.get("filler_penalty_per_hit", 2))
        self.filler_penalty_cap = float(config.get("filler_penalty_cap", 20))

    def _is_well_formed(self, sentence: str) -> bool:
        return (
            len(sentence) >= self.well_formed_min_chars
            and sentence.endswith(TERMINAL_PUNCTUATION)
        )

    def _sentence_length_adjustment(self, avg_words: float) -> float:
        low, high = self.ideal_range
        if low <= avg_words <= high:
            return self.ideal_bonus
        if avg_words < self.short_sentence_words or avg_words > self.long_sentence_words:
            return -self.length_penalty
        return 0.0

    def filler_count(self, answer: str) -> float:
        return count_phrases(answer, self.fillers)

    def score(self, answer: str) -> int:
        """Clarity score in [0, 100]."""
        if is_blank(answer):
            return 0

        sentences = split_sentences(answer)
        if not sentences:
            return self.no_sentence_score

        clarity = self.baseline

        avg_words = len(tokenize(answer)) / len(sentences)
        clarity += self._sentence_length_adjustment(avg_words)

        well_formed = sum(1 for s in sentences if self._is_well_formed(s))
        clarity += self.well_formed_bonus * well_formed / len(sentences)

        fillers = self.filler_count(answer)
        if fillers > self.filler_threshold:
            clarity -= min(self.filler_penalty_per_hit * fillers, self.filler_penalty_cap)

        return clamp_score(clarity)
