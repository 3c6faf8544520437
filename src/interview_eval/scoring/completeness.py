"""Completeness scoring from word count relative to an ideal target.

Piecewise by word count ``w``:
- ``w < 20``: ``round(w / 20 * 30)``
- ``50 <= w <= 200``: ideal band, ``85 + 15 * bonus``
- otherwise: ``100 * min(w / ideal, 1)``, minus 0.1 per word past 300,
  clamped to [30, 100]

The ideal-band bonus comes from a ``BonusSource``. The default derives it
from a digest of the answer text, so identical answers always score the
same; ``RandomBonus`` restores randomized bonuses where wanted.
"""
from __future__ import annotations

import hashlib
import random
from typing import Any, Callable, Optional

from interview_eval.scoring.tokenizer import is_blank, tokenize
from interview_eval.utils.rounding import clamp, round_half_up

# Maps answer text to a bonus fraction in [0, 1).
BonusSource = Callable[[str], float]


def digest_bonus(text: str) -> float:
    """Stable bonus derived from the SHA-256 digest of the text."""
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") / 2 ** 64


def no_bonus(text: str) -> float:
    return 0.0


class RandomBonus:
    """Randomized bonus; seed it to make runs reproducible."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def __call__(self, text: str) -> float:
        return self._rng.random()


class CompletenessScorer:
    """Scores answer depth from its word count."""

    def __init__(
        self,
        config: Optional[dict[str, Any]] = None,
        bonus_source: BonusSource = digest_bonus,
    ):
        config = config or {}
        self.bonus_source = bonus_source
        self.short_answer_words = int(config.get("short_answer_words", 20))
        self.short_answer_cap = float(config.get("short_answer_cap", 30))
        low, high = config.get("ideal_band", (50, 200))
        self.ideal_band = (int(low), int(high))
        self.ideal_band_floor = float(config.get("ideal_band_floor", 85))
        self.ideal_band_spread = float(config.get("ideal_band_spread", 15))
        self.long_answer_words = int(config.get("long_answer_words", 300))
        self.long_answer_penalty = float(config.get("long_answer_penalty_per_word", 0.1))
        self.floor = float(config.get("floor", 30))

    def _ideal_band_score(self, answer: str) -> int:
        bonus = clamp(self.bonus_source(answer), 0.0, 1.0)
        score = round_half_up(self.ideal_band_floor + self.ideal_band_spread * bonus)
        return min(score, 100)

    def score(self, answer: str, ideal_word_count: int = 100) -> int:
        """Completeness score in [0, 100]."""
        if is_blank(answer):
            return 0

        words = len(tokenize(answer))

        if words < self.short_answer_words:
            return round_half_up(words / self.short_answer_words * self.short_answer_cap)

        low, high = self.ideal_band
        if low <= words <= high:
            return self._ideal_band_score(answer)

        ideal = ideal_word_count if ideal_word_count > 0 else 100
        score = 100 * min(words / ideal, 1.0)
        if words > self.long_answer_words:
            score -= (words - self.long_answer_words) * self.long_answer_penalty

        return int(clamp(round_half_up(score), self.floor, 100))
