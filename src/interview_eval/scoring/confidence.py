"""Confidence scoring from assertive/hedging cues and concrete detail."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Optional

import structlog

from interview_eval.config.lexicon import CueLexicon
from interview_eval.scoring.tokenizer import contains_any, count_phrases, is_blank, tokenize
from interview_eval.utils.rounding import clamp_score

if TYPE_CHECKING:
    from interview_eval.scoring.sentiment import LexicalProvider

logger = structlog.get_logger(__name__)

DIGIT_PATTERN = re.compile(r"\d")


class ConfidenceScorer:
    """Scores how assertively an answer is delivered.

    Verb detection is delegated to the lexical provider. When no provider
    is configured, or it fails, the answer's tokens are checked against
    the lexicon's common-verb list instead.
    """

    def __init__(
        self,
        lexicon: CueLexicon,
        provider: Optional["LexicalProvider"] = None,
        config: Optional[dict[str, Any]] = None,
    ):
        config = config or {}
        self.lexicon = lexicon
        self.provider = provider
        self.cues = lexicon.confidence_cues
        self.common_verbs = frozenset(lexicon.common_verbs)
        self.baseline = float(config.get("baseline", 50))
        self.number_bonus = float(config.get("number_bonus", 10))
        self.example_bonus = float(config.get("example_bonus", 15))
        self.verb_bonus = float(config.get("verb_bonus", 10))

    def _fallback_has_verb(self, answer: str) -> bool:
        return any(token.lower() in self.common_verbs for token in tokenize(answer))

    def has_verb(self, answer: str) -> bool:
        if self.provider is None:
            return self._fallback_has_verb(answer)
        try:
            return len(self.provider.verbs_of(answer)) > 0
        except Exception as e:
            logger.warning(
                "provider_failed",
                capability="verbs_of",
                provider=type(self.provider).__name__,
                error=str(e)[:200],
            )
            return self._fallback_has_verb(answer)

    def score(self, answer: str) -> int:
        """Confidence score in [0, 100]."""
        if is_blank(answer):
            return 0

        confidence = self.baseline
        confidence += count_phrases(answer, self.cues)

        if DIGIT_PATTERN.search(answer):
            confidence += self.number_bonus
        if contains_any(answer, self.lexicon.examples):
            confidence += self.example_bonus
        if self.has_verb(answer):
            confidence += self.verb_bonus

        return clamp_score(confidence)
