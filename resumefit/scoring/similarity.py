"""Word-set similarity between resume and job texts."""

from __future__ import annotations

import re

from nltk.stem import PorterStemmer

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "is", "are", "was", "were", "be", "been",
        "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "must", "can", "this", "that", "these", "those",
    }
)

_WORD = re.compile(r"[a-z0-9_]+")
_stemmer = PorterStemmer()


def word_set(text: str, stem: bool = False) -> set[str]:
    """Lowercase, tokenize and drop stop words; optionally stem."""
    tokens = (t for t in _WORD.findall(text.lower()) if t not in STOP_WORDS)
    if stem:
        return {_stemmer.stem(t) for t in tokens}
    return set(tokens)


def jaccard_similarity(first: set[str], second: set[str]) -> float:
    """Return |A∩B| / |A∪B|, or 0.0 when both sets are empty."""
    union = first | second
    if not union:
        return 0.0
    return len(first & second) / len(union)


def text_similarity(text1: str, text2: str, stem: bool = False) -> float:
    """Jaccard similarity of two texts' word sets, scaled to 0..100."""
    return 100.0 * jaccard_similarity(word_set(text1, stem), word_set(text2, stem))
