"""
Keyword lists and keyword extraction for task allocation.

Task keywords are matched against skill names and department
responsibilities, so they keep only longer content words.
"""

import re
from typing import List

# Short function words; anything of three characters or fewer is dropped anyway
ALLOCATION_STOP_WORDS = frozenset(
    {"the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by"}
)

# Phrases that introduce an action item in a transcript segment
ACTION_KEYWORDS = (
    "need to", "should", "must", "will", "going to", "plan to", "follow up",
    "review", "prepare", "send", "schedule", "meet", "update", "create",
    "develop", "implement", "test", "deploy",
)

# Words that make a task time-sensitive
URGENCY_KEYWORDS = ("urgent", "asap", "today", "tomorrow", "deadline", "critical")

MIN_KEYWORD_LENGTH = 4

_PUNCTUATION = re.compile(r"[^\w\s]")


def extract_keywords(text: str) -> List[str]:
    """Extract task keywords from a description.

    Lower-cases the text, removes punctuation, splits on whitespace and drops
    short words and stop words. Order and duplicates are kept.

    Examples:
        >>> extract_keywords("Review and approve budget proposal")
        ['review', 'approve', 'budget', 'proposal']
    """
    words = _PUNCTUATION.sub("", text.lower()).split()
    return [
        w
        for w in words
        if len(w) >= MIN_KEYWORD_LENGTH and w not in ALLOCATION_STOP_WORDS
    ]


def has_urgency_keyword(text: str) -> bool:
    """True when the text contains any time-sensitive word."""
    lowered = text.lower()
    return any(keyword in lowered for keyword in URGENCY_KEYWORDS)
