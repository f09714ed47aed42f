"""
Text Processing Utilities.

Tokenization, sentence splitting and summary formatting shared by the
analysis and allocation packages. Keeping them here guarantees that the
summarizer, the topic extractor and the sentiment scorer all see the same
tokens for the same text.

    ┌──────────────────┐     ┌──────────────────┐     ┌──────────────────┐
    │    Transcript    │────→│   Tokenizer /    │────→│    Analyzers     │
    │    full_text     │     │ Sentence Splitter│     │ (frequency, ...) │
    └──────────────────┘     └──────────────────┘     └──────────────────┘

Functions
---------
**split_into_sentences(text)**
    Split on whitespace that follows ``.``, ``!`` or ``?``.

**tokenize(text)**
    Lower-case word tokens; punctuation is treated as a separator.

**clean_summary(text)**
    Normalize spacing around sentence punctuation. Idempotent.

**truncate_text(text, max_length)**
    Cut at a word boundary and append ``...``.

**count_words(text)** / **estimate_reading_time(text)**
    Whitespace word count and reading time in whole minutes.

All functions are pure: empty input yields an empty result, never an error.
"""

import math
import re
from typing import List

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
_NON_WORD = re.compile(r"[^\w\s]")
_DIGITS_ONLY = re.compile(r"\d+")


def split_into_sentences(text: str) -> List[str]:
    """Split text into sentences.

    Args:
        text: The text to split

    Returns:
        Trimmed, non-empty sentences in document order

    Examples:
        >>> split_into_sentences("Hello world. How are you?")
        ['Hello world.', 'How are you?']
        >>> split_into_sentences("")
        []
    """
    if not text:
        return []
    sentences = _SENTENCE_BOUNDARY.split(text)
    return [s.strip() for s in sentences if s.strip()]


def tokenize(text: str) -> List[str]:
    """Split text into normalized word tokens.

    Args:
        text: The text to tokenize

    Returns:
        Lower-cased tokens in order of appearance

    Examples:
        >>> tokenize("We need to review the budget by Friday.")
        ['we', 'need', 'to', 'review', 'the', 'budget', 'by', 'friday']
        >>> tokenize("follow-up")
        ['follow', 'up']
    """
    if not text:
        return []
    return _NON_WORD.sub(" ", text.lower()).split()


def is_numeric_token(token: str) -> bool:
    """Return True for tokens made only of digits."""
    return bool(_DIGITS_ONLY.fullmatch(token))


def normalize_whitespace(text: str) -> str:
    """Normalize all whitespace to single spaces.

    Examples:
        >>> normalize_whitespace("Hello\\n\\tWorld")
        'Hello World'
    """
    return re.sub(r"\s+", " ", text).strip()


def clean_summary(text: str) -> str:
    """Clean and format summary text.

    Collapses whitespace, puts exactly one space between sentence punctuation
    and a following lower-case letter, and removes whitespace before
    punctuation. Applying it twice gives the same result as applying it once.

    Examples:
        >>> clean_summary("  Budget approved .next  steps follow ")
        'Budget approved. next steps follow'
    """
    text = normalize_whitespace(text)
    text = re.sub(r"([.!?])\s*([a-z])", r"\1 \2", text)
    return re.sub(r"\s+([,.!?])", r"\1", text)


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate text at a word boundary, adding suffix if truncated.

    The cut happens at the last space inside the first max_length
    characters; without such a space the text is cut hard. The suffix is
    appended after the cut.

    Examples:
        >>> truncate_text("Review the budget proposal", 12)
        'Review the...'
        >>> truncate_text("Short", 10)
        'Short'
    """
    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > 0:
        return truncated[:last_space] + suffix
    return truncated + suffix


def count_words(text: str) -> int:
    """Count whitespace separated words."""
    return len(text.split())


def estimate_reading_time(text: str, words_per_minute: int = 200) -> int:
    """Estimate reading time in whole minutes (rounded up)."""
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    return math.ceil(count_words(text) / words_per_minute)
