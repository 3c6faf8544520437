"""Evaluation orchestrator: scores one answer across every dimension.

Components are constructed once and injected; none of them keeps state
between calls, so a single ``AnswerEvaluator`` can serve concurrent
requests. ``evaluate()`` never raises for string input: empty and blank
answers produce the zero/neutral result defined by each scorer.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

import structlog
from pydantic import ValidationError

from interview_eval.config.loader import ConfigLoader, get_config
from interview_eval.models.evaluation import Answer, DimensionScores, Evaluation
from interview_eval.scoring.clarity import ClarityScorer
from interview_eval.scoring.completeness import BonusSource, CompletenessScorer, digest_bonus
from interview_eval.scoring.confidence import ConfidenceScorer
from interview_eval.scoring.feedback import FeedbackSynthesizer
from interview_eval.scoring.keywords import KeywordMatcher
from interview_eval.scoring.sentiment import LexicalProvider, SentimentAnalyzer, TextBlobProvider
from interview_eval.scoring.tokenizer import word_count
from interview_eval.utils.error_handler import InvalidInputError

logger = structlog.get_logger(__name__)


def _validation_details(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in error.errors()
    )


def build_answer(
    text: Any,
    keywords: Optional[Iterable[str]] = None,
    ideal_word_count: int = 100,
) -> Answer:
    """Validate raw arguments into an ``Answer``.

    ``keywords`` must be an iterable of strings; a bare string is rejected
    rather than split into characters.
    """
    if isinstance(keywords, (str, bytes)):
        raise InvalidInputError("keywords must be a list of strings, not a single string")
    try:
        return Answer(
            text=text,
            expected_keywords=list(keywords or []),
            ideal_word_count=ideal_word_count,
        )
    except ValidationError as e:
        raise InvalidInputError(_validation_details(e)) from e
    except TypeError as e:
        raise InvalidInputError(str(e)) from e


class AnswerEvaluator:
    """Composes the dimension scorers into a single evaluation."""

    def __init__(
        self,
        keyword_matcher: KeywordMatcher,
        clarity: ClarityScorer,
        completeness: CompletenessScorer,
        confidence: ConfidenceScorer,
        sentiment: SentimentAnalyzer,
        feedback: FeedbackSynthesizer,
    ):
        self.keyword_matcher = keyword_matcher
        self.clarity = clarity
        self.completeness = completeness
        self.confidence = confidence
        self.sentiment = sentiment
        self.feedback = feedback

    @classmethod
    def from_config(
        cls,
        config: Optional[ConfigLoader] = None,
        provider: Optional[LexicalProvider] = None,
        bonus_source: BonusSource = digest_bonus,
    ) -> AnswerEvaluator:
        """Build an evaluator from a config loader and a lexical provider.

        Defaults to the shipped configuration and ``TextBlobProvider``.
        """
        config = config or get_config()
        provider = provider or TextBlobProvider()
        lexicon = config.lexicon()

        return cls(
            keyword_matcher=KeywordMatcher(config.get_section("keywords")),
            clarity=ClarityScorer(lexicon, config.get_section("clarity")),
            completeness=CompletenessScorer(
                config.get_section("completeness"),
                bonus_source=bonus_source,
            ),
            confidence=ConfidenceScorer(lexicon, provider, config.get_section("confidence")),
            sentiment=SentimentAnalyzer(provider),
            feedback=FeedbackSynthesizer(lexicon),
        )

    def evaluate_answer(self, answer: Answer) -> Evaluation:
        text = answer.text
        keywords = answer.expected_keywords

        scores = DimensionScores.from_dimensions(
            relevance=self.keyword_matcher.relevance(text, keywords),
            clarity=self.clarity.score(text),
            completeness=self.completeness.score(text, answer.ideal_word_count),
            confidence=self.confidence.score(text),
        )
        sentiment = self.sentiment.analyze(text)

        evaluation = Evaluation(
            scores=scores,
            sentiment=sentiment,
            feedback=self.feedback.feedback(scores),
            strengths=self.feedback.strengths(text, scores),
            improvements=self.feedback.improvements(text, scores),
            word_count=word_count(text),
            keyword_matches=self.keyword_matcher.matches(text, keywords),
        )

        logger.debug(
            "answer_evaluated",
            word_count=evaluation.word_count,
            keywords=len(keywords),
            overall=scores.overall,
        )
        return evaluation

    def evaluate(
        self,
        text: str,
        keywords: Optional[Sequence[str]] = None,
        ideal_word_count: int = 100,
    ) -> Evaluation:
        """Evaluate one answer.

        Raises:
            InvalidInputError: ``text`` is not a string or
                ``ideal_word_count`` is not a positive integer.
        """
        return self.evaluate_answer(build_answer(text, keywords, ideal_word_count))

    def evaluate_many(self, answers: Iterable[Answer]) -> list[Evaluation]:
        """Evaluate answers independently, preserving submission order."""
        return [self.evaluate_answer(answer) for answer in answers]


@lru_cache(maxsize=4)
def _default_evaluator(config_path: Optional[str]) -> AnswerEvaluator:
    return AnswerEvaluator.from_config(get_config(config_path))


def default_evaluator(config_path: Optional[str | Path] = None) -> AnswerEvaluator:
    """Evaluator built from the shipped (or given) config and TextBlob."""
    return _default_evaluator(str(config_path) if config_path else None)


def evaluate(
    text: str,
    keywords: Optional[Sequence[str]] = None,
    ideal_word_count: int = 100,
) -> Evaluation:
    """Evaluate one answer with the default evaluator."""
    return default_evaluator().evaluate(text, keywords, ideal_word_count)
