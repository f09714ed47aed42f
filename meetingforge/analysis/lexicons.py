"""
Word lists used by the analyzers.

The lists are plain data; algorithms receive them through a ``Lexicon``
instance so that callers can extend them without touching the analyzers:

    lexicon = Lexicon.default().extended(positive_words=["shipped"])
    scorer = SentimentScorer(lexicon)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from meetingforge.core.config import LexiconConfig

STOP_WORDS = (
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "i", "you", "he", "she", "it", "we", "they", "me", "him",
    "her", "us", "them", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "can", "must", "shall", "this", "that", "these",
    "those", "here", "there", "where", "when", "why", "how", "all", "any",
    "both", "each", "few", "more", "most", "other", "some", "such", "no",
    "nor", "not", "only", "own", "same", "so", "than", "too", "very",
)

POSITIVE_WORDS = (
    "good", "great", "excellent", "amazing", "wonderful", "fantastic",
    "brilliant", "outstanding", "perfect", "superb", "terrific", "awesome",
    "incredible", "marvelous", "splendid", "success", "achieve", "win",
    "improve", "progress", "growth", "opportunity", "solution", "innovative",
    "creative", "efficient", "effective", "productive", "collaborative",
    "supportive",
)

NEGATIVE_WORDS = (
    "bad", "terrible", "awful", "horrible", "dreadful", "poor", "worst",
    "problem", "issue", "challenge", "difficulty", "obstacle", "barrier",
    "failure", "delay", "late", "slow", "inefficient", "ineffective",
    "unproductive", "conflict", "disagreement", "argument", "complaint",
    "criticism", "blame", "fault", "error",
)

ACTION_INDICATORS = (
    "need to", "should", "must", "will", "going to", "plan to", "decided",
    "agreed", "approved", "resolved", "determined", "important", "critical",
    "essential", "key", "major", "significant",
)


def _words(values: Iterable[str]) -> FrozenSet[str]:
    return frozenset(v.strip().lower() for v in values if v.strip())


@dataclass(frozen=True)
class Lexicon:
    """Immutable set of word lists shared by the analyzers."""

    stop_words: FrozenSet[str] = field(default_factory=lambda: _words(STOP_WORDS))
    positive_words: FrozenSet[str] = field(default_factory=lambda: _words(POSITIVE_WORDS))
    negative_words: FrozenSet[str] = field(default_factory=lambda: _words(NEGATIVE_WORDS))
    action_indicators: FrozenSet[str] = field(
        default_factory=lambda: _words(ACTION_INDICATORS)
    )

    @classmethod
    def default(cls) -> Lexicon:
        """Built-in English word lists."""
        return cls()

    def extended(
        self,
        stop_words: Optional[Iterable[str]] = None,
        positive_words: Optional[Iterable[str]] = None,
        negative_words: Optional[Iterable[str]] = None,
        action_indicators: Optional[Iterable[str]] = None,
    ) -> Lexicon:
        """Return a new lexicon with extra words merged in."""
        return Lexicon(
            stop_words=self.stop_words | _words(stop_words or ()),
            positive_words=self.positive_words | _words(positive_words or ()),
            negative_words=self.negative_words | _words(negative_words or ()),
            action_indicators=self.action_indicators | _words(action_indicators or ()),
        )

    @classmethod
    def from_config(cls, config: LexiconConfig) -> Lexicon:
        """Default lexicon extended with the configured extra words."""
        return cls.default().extended(
            stop_words=config.extra_stop_words,
            positive_words=config.extra_positive_words,
            negative_words=config.extra_negative_words,
            action_indicators=config.extra_action_indicators,
        )

# Key points kept by the executive and technical summary styles
EXECUTIVE_TERMS = ("decided", "agreed", "approved", "budget", "timeline")
TECHNICAL_TERMS = (
    "implementation", "architecture", "technology", "code", "system", "api",
    "database",
)
