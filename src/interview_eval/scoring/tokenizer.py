"""Word and sentence tokenization shared by every scorer."""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

# Alphanumeric runs; underscores count as separators like punctuation.
WORD_PATTERN = re.compile(r"[^\W_]+")
# A sentence runs up to and including its terminal punctuation.
SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]*")
TERMINAL_PUNCTUATION = (".", "!", "?")


def tokenize(text: str) -> list[str]:
    """Split text into word tokens, preserving case."""
    if not text:
        return []
    return WORD_PATTERN.findall(text)


def word_count(text: str) -> int:
    return len(tokenize(text))


def split_sentences(text: str) -> list[str]:
    """Split text into trimmed sentences on ``.``, ``!`` and ``?``.

    Fragments with no alphanumeric content are dropped, so ``"..."`` has
    no sentences at all.
    """
    if not text:
        return []
    sentences = []
    for match in SENTENCE_PATTERN.finditer(text):
        sentence = match.group(0).strip()
        if sentence and WORD_PATTERN.search(sentence):
            sentences.append(sentence)
    return sentences


def is_blank(text: str) -> bool:
    return not text or not text.strip()


@lru_cache(maxsize=256)
def _phrase_pattern(phrase: str) -> re.Pattern[str]:
    words = phrase.lower().split()
    body = r"\s+".join(re.escape(w) for w in words)
    return re.compile(rf"\b{body}\b", re.IGNORECASE)


def count_phrase(text: str, phrase: str) -> int:
    """Count case-insensitive whole-word occurrences of a phrase."""
    if not text or not phrase.strip():
        return 0
    return len(_phrase_pattern(phrase).findall(text))


def count_phrases(text: str, weights: dict[str, float]) -> float:
    """Weighted sum of phrase occurrences."""
    return sum(weight * count_phrase(text, phrase) for phrase, weight in weights.items())


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    return any(count_phrase(text, phrase) > 0 for phrase in phrases)
