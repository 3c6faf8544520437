"""Data models for answers, evaluations and session summaries."""
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

__all__ = [
    "Answer",
    "AverageScores",
    "BatchResult",
    "DimensionScores",
    "Evaluation",
    "KeywordMatch",
    "SentimentResult",
    "SessionSummary",
]
