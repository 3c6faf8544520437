"""Sentiment analysis delegated to a lexical provider.

The core does not define a sentiment algorithm of its own. Any object with
``analyze(text)`` and ``verbs_of(text)`` can serve as the provider;
``TextBlobProvider`` is the default. Provider failures never fail an
evaluation: the analyzer falls back to a neutral result.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

import structlog
from textblob import TextBlob

from interview_eval.models.evaluation import SentimentResult
from interview_eval.scoring.tokenizer import is_blank, word_count
from interview_eval.utils.error_handler import ProviderError
from interview_eval.utils.rounding import round_half_up

logger = structlog.get_logger(__name__)

# TextBlob polarity is in [-1, 1]; scale to the AFINN-style [-5, 5] range
POLARITY_SCALE = 5


def score_assessments(assessments) -> tuple[int, list[str], list[str]]:
    """Sum scaled TextBlob assessments into a score and word lists.

    Phrases are listed by the sign of their integer weight, so a phrase
    whose polarity rounds to zero appears in neither list.
    """
    score = 0
    positive: list[str] = []
    negative: list[str] = []
    for words, polarity, _subjectivity, _label in assessments:
        weight = round_half_up(polarity * POLARITY_SCALE)
        score += weight
        phrase = " ".join(words)
        if weight > 0:
            positive.append(phrase)
        elif weight < 0:
            negative.append(phrase)
    return score, positive, negative


@runtime_checkable
class LexicalProvider(Protocol):
    """Lexical capability consumed by the sentiment and confidence scorers."""

    def analyze(self, text: str) -> SentimentResult:
        ...

    def verbs_of(self, text: str) -> list[str]:
        ...


class TextBlobProvider:
    """Lexical provider backed by textblob.

    Sentiment uses TextBlob's pattern-based analyzer: every assessed word
    or phrase contributes its polarity, scaled to an integer in [-5, 5],
    to the total score. Verb tagging needs the NLTK perceptron tagger; if
    its corpus is missing ``verbs_of`` raises ``ProviderError``.
    """

    name = "textblob"

    def analyze(self, text: str) -> SentimentResult:
        try:
            assessments = TextBlob(text).sentiment_assessments.assessments
        except Exception as e:
            raise ProviderError(self.name, str(e)) from e

        score, positive, negative = score_assessments(assessments)
        count = word_count(text)
        return SentimentResult(
            score=score,
            comparative=score / count if count else 0.0,
            positive=positive,
            negative=negative,
        )

    def verbs_of(self, text: str) -> list[str]:
        try:
            tags = TextBlob(text).tags
        except Exception as e:
            raise ProviderError(self.name, str(e)) from e
        return [word for word, tag in tags if tag.startswith("VB")]


class SentimentAnalyzer:
    """Produces the sentiment profile of an answer."""

    def __init__(self, provider: LexicalProvider):
        self.provider = provider

    def analyze(self, answer: str) -> SentimentResult:
        if is_blank(answer):
            return SentimentResult.neutral()

        try:
            result = self.provider.analyze(answer)
        except Exception as e:
            logger.warning(
                "provider_failed",
                capability="analyze",
                provider=type(self.provider).__name__,
                error=str(e)[:200],
            )
            return SentimentResult.neutral()

        # Recompute against the core tokenizer so comparative is provider-independent
        count = word_count(answer)
        return SentimentResult(
            score=int(result.score),
            comparative=result.score / count if count else 0.0,
            positive=list(result.positive),
            negative=list(result.negative),
        )
