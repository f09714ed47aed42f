"""
Lexicon-based sentiment scoring.

A text is positive when positive words make up more than a threshold share
of its content words and clearly outnumber negative words; negative is the
mirror case; everything else is neutral.

Content words are tokens that are not stop words. The classification only
depends on which tokens occur and how often, not on their order.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from meetingforge.analysis.lexicons import Lexicon
from meetingforge.core.config import SentimentConfig
from meetingforge.core.logging import get_logger
from meetingforge.models.summary import Sentiment
from meetingforge.shared.text_utils import tokenize

logger = get_logger(__name__)


@dataclass(frozen=True)
class SentimentCounts:
    """Lexicon hits of one text."""

    positive: int = 0
    negative: int = 0
    total_words: int = 0

    @property
    def positive_ratio(self) -> float:
        return self.positive / self.total_words if self.total_words else 0.0

    @property
    def negative_ratio(self) -> float:
        return self.negative / self.total_words if self.total_words else 0.0


class SentimentScorer:
    """Classify text polarity against a lexicon."""

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        config: Optional[SentimentConfig] = None,
    ) -> None:
        self.lexicon = lexicon or Lexicon.default()
        self.config = config or SentimentConfig()

    def count(self, tokens: Sequence[str]) -> SentimentCounts:
        """Count positive, negative and content tokens."""
        positive = negative = content = 0
        for token in tokens:
            if token in self.lexicon.stop_words:
                continue
            content += 1
            if token in self.lexicon.positive_words:
                positive += 1
            elif token in self.lexicon.negative_words:
                negative += 1
        return SentimentCounts(positive=positive, negative=negative, total_words=content)

    def classify(self, counts: SentimentCounts) -> Sentiment:
        """Apply the ratio and dominance rules to precomputed counts."""
        if counts.total_words == 0:
            return Sentiment.NEUTRAL

        threshold = self.config.ratio_threshold
        factor = self.config.dominance_factor
        pos_ratio = counts.positive_ratio
        neg_ratio = counts.negative_ratio

        if pos_ratio > threshold and pos_ratio > neg_ratio * factor:
            return Sentiment.POSITIVE
        if neg_ratio > threshold and neg_ratio > pos_ratio * factor:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL

    def analyze(self, text: str) -> Sentiment:
        """Classify the overall sentiment of ``text``."""
        counts = self.count(tokenize(text))
        sentiment = self.classify(counts)
        logger.debug(
            "Sentiment scored",
            sentiment=sentiment.value,
            positive=counts.positive,
            negative=counts.negative,
            total_words=counts.total_words,
        )
        return sentiment
