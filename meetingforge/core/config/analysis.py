"""
Analysis configuration.

Provides configuration for the extractive summarizer, key point and topic
extraction, the sentiment scorer and lexicon extensions.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List

from meetingforge.core.exceptions import ConfigValidationError


@dataclass
class SummaryConfig:
    """Extractive summary configuration."""

    default_max_length: int = 200  # Characters, separators included
    frequency_weight: float = 0.6
    position_weight: float = 0.3
    length_weight: float = 0.1
    optimal_sentence_words: int = 20  # Sentences this long get the full length score
    max_key_points: int = 5
    max_topics: int = 5

    # Meeting-type presets for generate_meeting_summary()
    meeting_type_lengths: Dict[str, int] = field(
        default_factory=lambda: {
            "standup": 150,
            "planning": 400,
            "review": 350,
            "brainstorming": 250,
        }
    )
    meeting_default_length: int = 300
    executive_max_length: int = 150
    technical_max_length: int = 500

    def __post_init__(self) -> None:
        """Validate summary configuration."""
        total = self.frequency_weight + self.position_weight + self.length_weight
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ConfigValidationError(
                f"summary weights must sum to 1.0, got {total:.3f}",
                field="summary.frequency_weight",
                value=total,
            )
        if self.optimal_sentence_words <= 0:
            raise ConfigValidationError(
                "summary.optimal_sentence_words must be positive",
                field="summary.optimal_sentence_words",
                value=self.optimal_sentence_words,
            )
        for name in (
            "default_max_length",
            "max_key_points",
            "max_topics",
            "meeting_default_length",
            "executive_max_length",
            "technical_max_length",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ConfigValidationError(
                    f"summary.{name} must not be negative", field=f"summary.{name}", value=value
                )

    def length_for_meeting_type(self, meeting_type: str) -> int:
        """Return the summary length preset for a meeting type."""
        return self.meeting_type_lengths.get(
            meeting_type.lower(), self.meeting_default_length
        )


@dataclass
class SentimentConfig:
    """Ratio-based sentiment classification thresholds."""

    ratio_threshold: float = 0.05  # Minimum share of polar words
    dominance_factor: float = 1.5  # How much one polarity must outweigh the other

    def __post_init__(self) -> None:
        """Validate sentiment configuration."""
        if not 0.0 <= self.ratio_threshold < 1.0:
            raise ConfigValidationError(
                "sentiment.ratio_threshold must be in [0, 1)",
                field="sentiment.ratio_threshold",
                value=self.ratio_threshold,
            )
        if self.dominance_factor < 1.0:
            raise ConfigValidationError(
                "sentiment.dominance_factor must be at least 1.0",
                field="sentiment.dominance_factor",
                value=self.dominance_factor,
            )


@dataclass
class LexiconConfig:
    """Words merged into the built-in lexicons."""

    extra_stop_words: List[str] = field(default_factory=list)
    extra_positive_words: List[str] = field(default_factory=list)
    extra_negative_words: List[str] = field(default_factory=list)
    extra_action_indicators: List[str] = field(default_factory=list)
