"""Scoring modules for answer evaluation.

This package contains:
- tokenizer.py: Word/sentence splitting and cue-phrase counting
- keywords.py: Keyword relevance and match reporting
- clarity.py: Sentence-structure and filler scoring
- completeness.py: Word-count depth scoring
- confidence.py: Assertiveness scoring
- sentiment.py: Lexical provider protocol and sentiment analysis
- feedback.py: Feedback text, strengths and improvements
"""
from interview_eval.scoring.tokenizer import (
    contains_any,
    count_phrase,
    split_sentences,
    tokenize,
    word_count,
)
from interview_eval.scoring.keywords import KeywordMatcher, levenshtein
from interview_eval.scoring.clarity import ClarityScorer
from interview_eval.scoring.completeness import (
    BonusSource,
    CompletenessScorer,
    RandomBonus,
    digest_bonus,
    no_bonus,
)
from interview_eval.scoring.confidence import ConfidenceScorer
from interview_eval.scoring.sentiment import (
    LexicalProvider,
    SentimentAnalyzer,
    TextBlobProvider,
)
from interview_eval.scoring.feedback import FeedbackSynthesizer, band

__all__ = [
    # Tokenizer
    "contains_any",
    "count_phrase",
    "split_sentences",
    "tokenize",
    "word_count",
    # Dimension scorers
    "KeywordMatcher",
    "levenshtein",
    "ClarityScorer",
    "BonusSource",
    "CompletenessScorer",
    "RandomBonus",
    "digest_bonus",
    "no_bonus",
    "ConfidenceScorer",
    # Sentiment
    "LexicalProvider",
    "SentimentAnalyzer",
    "TextBlobProvider",
    # Feedback
    "FeedbackSynthesizer",
    "band",
]
