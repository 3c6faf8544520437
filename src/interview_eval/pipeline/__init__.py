"""Evaluation orchestration and session aggregation."""
from interview_eval.pipeline.evaluator import (
    AnswerEvaluator,
    build_answer,
    default_evaluator,
    evaluate,
)
from interview_eval.pipeline.session import evaluate_batch, summarize

__all__ = [
    "AnswerEvaluator",
    "build_answer",
    "default_evaluator",
    "evaluate",
    "evaluate_batch",
    "summarize",
]
