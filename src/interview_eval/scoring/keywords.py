"""Keyword relevance scoring.

Relevance rewards answers that mention the rubric's expected keywords:
- Exact (case-insensitive substring) mention: 1.0 credit
- Near miss: 0.5 credit per answer token within edit distance 2 of the
  keyword, counting only tokens longer than 3 characters

Score = round(min(100, 100 * credit / keyword_count)).

``matches()`` reports only exact substring presence, so a keyword that
earned partial credit is still reported as ``found=False``. The relevance
number and the match list intentionally disagree in that case.
"""
from __future__ import annotations

from typing import Any, Optional, Sequence

from interview_eval.models.evaluation import KeywordMatch
from interview_eval.scoring.tokenizer import is_blank, tokenize
from interview_eval.utils.rounding import round_half_up


def levenshtein(a: str, b: str) -> int:
    """Edit distance (insertions, deletions, substitutions) between two strings."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


class KeywordMatcher:
    """Scores answer relevance against a list of expected keywords."""

    def __init__(self, config: Optional[dict[str, Any]] = None):
        config = config or {}
        self.partial_credit = float(config.get("partial_credit", 0.5))
        self.max_edit_distance = int(config.get("max_edit_distance", 2))
        self.min_token_length = int(config.get("min_token_length", 4))
        self.no_keywords_score = int(config.get("no_keywords_score", 50))

    def _keyword_credit(self, answer_lower: str, tokens: list[str], keyword: str) -> float:
        keyword_lower = keyword.lower()
        if keyword_lower in answer_lower:
            return 1.0

        credit = 0.0
        for token in tokens:
            if len(token) < self.min_token_length:
                continue
            if abs(len(token) - len(keyword_lower)) > self.max_edit_distance:
                continue
            if levenshtein(token, keyword_lower) <= self.max_edit_distance:
                credit += self.partial_credit
        return credit

    def relevance(self, answer: str, keywords: Sequence[str]) -> int:
        """Relevance score in [0, 100]."""
        if is_blank(answer):
            return 0
        if not keywords:
            return self.no_keywords_score

        answer_lower = answer.lower()
        tokens = tokenize(answer_lower)
        credit = sum(self._keyword_credit(answer_lower, tokens, kw) for kw in keywords)

        return round_half_up(min(100.0, 100.0 * credit / len(keywords)))

    def matches(self, answer: str, keywords: Sequence[str]) -> list[KeywordMatch]:
        """One entry per keyword, in input order, reporting exact presence."""
        answer_lower = (answer or "").lower()
        return [
            KeywordMatch(keyword=kw, found=kw.lower() in answer_lower)
            for kw in keywords
        ]
