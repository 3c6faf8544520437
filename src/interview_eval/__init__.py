"""Heuristic scoring of free-text interview answers.

Usage:
    from interview_eval import evaluate, summarize

    evaluation = evaluate("I led the migration ...", ["migration", "testing"])
    summary = summarize([evaluation])
"""
from interview_eval.models.evaluation import (
    Answer,
    AverageScores,
    BatchResult,
    DimensionScores,
    Evaluation,
    KeywordMatch,
    SentimentResult,
    SessionSummary,
)
from interview_eval.pipeline.evaluator import AnswerEvaluator, evaluate
from interview_eval.pipeline.session import evaluate_batch, summarize
from interview_eval.utils.error_handler import (
    EmptyInputError,
    EvaluationError,
    InvalidInputError,
)

__version__ = "0.1.0"

__all__ = [
    "Answer",
    "AverageScores",
    "BatchResult",
    "DimensionScores",
    "Evaluation",
    "KeywordMatch",
    "SentimentResult",
    "SessionSummary",
    "AnswerEvaluator",
    "evaluate",
    "evaluate_batch",
    "summarize",
    "EmptyInputError",
    "EvaluationError",
    "InvalidInputError",
]
