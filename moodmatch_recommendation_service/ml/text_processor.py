"""Text processing utilities for catalog descriptions."""
import re
import pandas as pd
from typing import Iterable, List, Optional

STOPWORDS = frozenset([
    "the", "is", "at", "which", "on", "a", "an", "and", "or", "but",
    "in", "with", "to", "for", "of", "as", "by",
])

# Checked in order, first match wins
STEM_SUFFIXES = ("ing", "ed", "ly", "tion", "ness")


def clean_html(text: str | None) -> str:
    """
    Remove HTML tags from text.

    Args:
        text: Raw text possibly containing HTML (can be None)

    Returns:
        Cleaned text without HTML tags
    """
    if text is None or (not isinstance(text, str) and pd.isna(text)):
        return ""

    # Remove HTML tags
    text = re.sub(r'<[^>]+>', '', str(text))

    # Remove extra whitespace
    text = re.sub(r'\s+', ' ', text)

    return text.strip()


def stem(word: str) -> str:
    """
    Strip a single common English suffix.

    Args:
        word: Lowercase token

    Returns:
        Token without its -ing/-ed/-ly/-tion/-ness suffix
    """
    for suffix in STEM_SUFFIXES:
        if word.endswith(suffix):
            return word[:-len(suffix)]
    return word


def tokenize(text: str | None) -> List[str]:
    """
    Split text into stemmed tokens.

    Lowercases, turns punctuation into whitespace, drops stopwords and
    tokens of two characters or fewer, then stems what is left.

    Args:
        text: Raw text

    Returns:
        List of tokens in document order
    """
    if text is None or (not isinstance(text, str) and pd.isna(text)):
        return []

    cleaned = str(text).lower()
    cleaned = re.sub(r'[^\w\s]', ' ', cleaned)

    return [
        stem(word)
        for word in cleaned.split()
        if len(word) > 2 and word not in STOPWORDS
    ]


def combine_text_features(
    description: str | None,
    fields: Optional[Iterable[str | None]] = None
) -> str:
    """
    Combine an item's description with its categorical fields into one text.

    Args:
        description: Main free-text description
        fields: Optional extra text fields (genres, cast, host, ...)

    Returns:
        Combined text
    """
    texts = []

    if fields:
        texts.extend(clean_html(f) for f in fields if f)

    texts.append(clean_html(description))

    return " ".join(t for t in texts if t)
