"""
Keyword-based sentiment scoring for free text.

Typical usage:
    >>> analyze_sentiment("Feeling so much better today")
    <Sentiment.POSITIVE: 'positive'>
"""
import re
from typing import List, Tuple

from src.models.chat import Sentiment
from src.services.constants import POSITIVE_KEYWORDS, NEGATIVE_KEYWORDS

_WORD_PATTERN = re.compile(r"[a-z']+")


def tokenize(text: str) -> List[str]:
    """Split text into lowercase word tokens."""
    return _WORD_PATTERN.findall((text or "").lower())


def score_sentiment(text: str) -> int:
    """
    Score text as positive keyword hits minus negative keyword hits.

    Args:
        text: Free text to score

    Returns:
        Signed integer score, 0 for empty or keyword-free text
    """
    positive, negative = count_keyword_hits(text)
    return positive - negative


def count_keyword_hits(text: str) -> Tuple[int, int]:
    """Count (positive, negative) keyword occurrences in text."""
    tokens = tokenize(text)
    positive = sum(1 for token in tokens if token in POSITIVE_KEYWORDS)
    negative = sum(1 for token in tokens if token in NEGATIVE_KEYWORDS)
    return positive, negative


def analyze_sentiment(text: str) -> Sentiment:
    """
    Classify text as positive, neutral or negative.

    Args:
        text: Free text, may be empty

    Returns:
        Sentiment label; ties and empty text resolve to neutral
    """
    score = score_sentiment(text)
    if score > 0:
        return Sentiment.POSITIVE
    if score < 0:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL
