"""Cue vocabularies used by the scorers.

Each weighted vocabulary maps a lowercase phrase to a weight; plain
vocabularies are lists of lowercase phrases. Instances are immutable and
safe to share between concurrently running scorers.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CueLexicon(BaseModel):
    """Phrase vocabularies for clarity, confidence and feedback cues."""
    model_config = ConfigDict(frozen=True)

    fillers: dict[str, float] = Field(default_factory=dict)
    assertive: dict[str, float] = Field(default_factory=dict)
    hedging: dict[str, float] = Field(default_factory=dict)
    examples: list[str] = Field(default_factory=list)
    enumeration: list[str] = Field(default_factory=list)
    common_verbs: list[str] = Field(default_factory=list)

    @field_validator("fillers", "assertive", "hedging", mode="before")
    @classmethod
    def _normalize_weighted(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(k).strip().lower(): v for k, v in value.items()}
        # A bare list means "weight 1 per phrase"
        if isinstance(value, (list, tuple)):
            return {str(k).strip().lower(): 1 for k in value}
        return value

    @field_validator("examples", "enumeration", "common_verbs", mode="before")
    @classmethod
    def _normalize_phrases(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(v).strip().lower() for v in value]
        return value

    @property
    def confidence_cues(self) -> dict[str, float]:
        """Assertive and hedging phrases merged into one weight table."""
        cues = dict(self.assertive)
        cues.update(self.hedging)
        return cues
