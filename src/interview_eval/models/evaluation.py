"""Pydantic models for answer evaluation input and output.

Python attributes are snake_case; the serialized (wire) form uses the
camelCase field names expected by the HTTP layer (``wordCount``,
``keywordMatches``, ``overallScore``, ...). Both spellings are accepted
when constructing models.
"""
from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator
from pydantic.alias_generators import to_camel

from interview_eval.utils.rounding import round_half_up


class _WireModel(BaseModel):
    """Shared config: camelCase aliases, immutable instances."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the wire field names."""
        return self.model_dump(by_alias=True)


class Answer(_WireModel):
    """One free-text response to one interview question."""
    text: StrictStr
    expected_keywords: list[StrictStr] = Field(default_factory=list)
    ideal_word_count: StrictInt = Field(default=100, gt=0)


ScoreInt = Annotated[int, Field(ge=0, le=100)]


class DimensionScores(_WireModel):
    """Per-dimension scores plus their rounded mean.

    ``overall`` must equal the half-up rounded mean of the four
    dimensions; use :meth:`from_dimensions` to build consistent scores.
    """
    relevance: ScoreInt
    clarity: ScoreInt
    completeness: ScoreInt
    confidence: ScoreInt
    overall: ScoreInt

    @classmethod
    def from_dimensions(
        cls,
        relevance: int,
        clarity: int,
        completeness: int,
        confidence: int,
    ) -> DimensionScores:
        overall = round_half_up((relevance + clarity + completeness + confidence) / 4)
        return cls(
            relevance=relevance,
            clarity=clarity,
            completeness=completeness,
            confidence=confidence,
            overall=overall,
        )

    @model_validator(mode="after")
    def _check_overall(self) -> DimensionScores:
        expected = round_half_up(
            (self.relevance + self.clarity + self.completeness + self.confidence) / 4
        )
        if self.overall != expected:
            raise ValueError(f"overall={self.overall} does not match dimension mean {expected}")
        return self


class KeywordMatch(_WireModel):
    """Whether an expected keyword occurs verbatim in the answer."""
    keyword: str
    found: bool


class SentimentResult(_WireModel):
    """Lexical sentiment profile of an answer."""
    score: int = 0
    comparative: float = 0.0
    positive: list[str] = Field(default_factory=list)
    negative: list[str] = Field(default_factory=list)

    @classmethod
    def neutral(cls) -> SentimentResult:
        return cls()


class Evaluation(_WireModel):
    """Full scored result for one answer."""
    scores: DimensionScores
    sentiment: SentimentResult
    feedback: str
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    word_count: int = Field(ge=0)
    keyword_matches: list[KeywordMatch] = Field(default_factory=list)


class AverageScores(_WireModel):
    """Mean of each dimension across a session."""
    relevance: ScoreInt
    clarity: ScoreInt
    completeness: ScoreInt
    confidence: ScoreInt


class SessionSummary(_WireModel):
    """Aggregate of a finalized sequence of evaluations."""
    overall_score: ScoreInt
    average_scores: AverageScores
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class BatchResult(_WireModel):
    """Evaluations in submission order plus their session summary."""
    evaluations: list[Evaluation]
    summary: SessionSummary
