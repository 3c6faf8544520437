"""Session aggregation over a finalized list of evaluations."""
from __future__ import annotations

from typing import Iterable, Sequence

import structlog

from interview_eval.models.evaluation import (
    Answer,
    AverageScores,
    BatchResult,
    Evaluation,
    SessionSummary,
)
from interview_eval.pipeline.evaluator import AnswerEvaluator
from interview_eval.utils.error_handler import EmptyInputError
from interview_eval.utils.rounding import round_half_up

logger = structlog.get_logger(__name__)

DEFAULT_MAX_ITEMS = 5


def _mean(values: Sequence[int]) -> int:
    return round_half_up(sum(values) / len(values))


def _unique_in_order(groups: Iterable[Iterable[str]], limit: int) -> list[str]:
    seen: set[str] = set()
    merged: list[str] = []
    for group in groups:
        for item in group:
            if item not in seen:
                seen.add(item)
                merged.append(item)
    return merged[:limit]


def summarize(
    evaluations: Sequence[Evaluation],
    max_items: int = DEFAULT_MAX_ITEMS,
) -> SessionSummary:
    """Combine per-answer evaluations into a session summary.

    Averages are half-up rounded means; strengths and improvements are
    deduplicated in first-seen order and capped at ``max_items``.

    Raises:
        EmptyInputError: ``evaluations`` is empty.
    """
    if not evaluations:
        raise EmptyInputError()

    scores = [e.scores for e in evaluations]
    summary = SessionSummary(
        overall_score=_mean([s.overall for s in scores]),
        average_scores=AverageScores(
            relevance=_mean([s.relevance for s in scores]),
            clarity=_mean([s.clarity for s in scores]),
            completeness=_mean([s.completeness for s in scores]),
            confidence=_mean([s.confidence for s in scores]),
        ),
        strengths=_unique_in_order((e.strengths for e in evaluations), max_items),
        improvements=_unique_in_order((e.improvements for e in evaluations), max_items),
    )

    logger.info(
        "session_summarized",
        evaluations=len(evaluations),
        overall_score=summary.overall_score,
    )
    return summary


def evaluate_batch(
    evaluator: AnswerEvaluator,
    answers: Sequence[Answer],
    max_items: int = DEFAULT_MAX_ITEMS,
) -> BatchResult:
    """Evaluate answers in submission order and summarize them."""
    if not answers:
        raise EmptyInputError("Batch input contains no answers")
    evaluations = evaluator.evaluate_many(answers)
    return BatchResult(
        evaluations=evaluations,
        summary=summarize(evaluations, max_items=max_items),
    )
