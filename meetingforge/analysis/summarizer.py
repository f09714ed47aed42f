"""
Extractive summarization.

Sentences are scored by how frequent their words are across the whole text,
how early they appear and how close they are to an optimal length. The best
scoring sentences are concatenated until the character budget is used up.
"""

from typing import List, Optional, Tuple

from meetingforge.analysis.frequency import word_frequency
from meetingforge.core.config import SummaryConfig
from meetingforge.core.logging import get_logger
from meetingforge.shared.text_utils import split_into_sentences, tokenize

logger = get_logger(__name__)


class ExtractiveSummarizer:
    """Select original sentences that best represent a text."""

    def __init__(self, config: Optional[SummaryConfig] = None) -> None:
        self.config = config or SummaryConfig()

    def score_sentences(self, text: str) -> List[Tuple[str, float]]:
        """Score every sentence of ``text``.

        Returns:
            (sentence, score) pairs in document order
        """
        sentences = split_into_sentences(text)
        if not sentences:
            return []

        frequency = word_frequency(text)
        cfg = self.config
        scored = []
        for index, sentence in enumerate(sentences):
            tokens = tokenize(sentence)
            if tokens:
                avg_frequency = sum(frequency.get(t, 0) for t in tokens) / len(tokens)
            else:
                avg_frequency = 0.0
            position_score = 1.0 / (index + 1)
            length_score = min(len(tokens) / cfg.optimal_sentence_words, 1.0)
            score = (
                cfg.frequency_weight * avg_frequency
                + cfg.position_weight * position_score
                + cfg.length_weight * length_score
            )
            scored.append((sentence, score))
        return scored

    def summarize(self, text: str, max_length: Optional[int] = None) -> str:
        """Build an extractive summary of at most ``max_length`` characters.

        Sentences are taken in descending score order (ties keep document
        order) and joined with single spaces; separators count towards the
        budget. Selection stops at the first sentence that does not fit.

        When not even the best sentence fits, the first sentence of the
        document is returned unchanged, even though it exceeds the budget.

        Args:
            text: Text to summarize
            max_length: Character budget; defaults to the configured length

        Returns:
            Summary text, or "" for empty text or a non-positive budget
        """
        if max_length is None:
            max_length = self.config.default_max_length
        if max_length <= 0:
            return ""

        scored = self.score_sentences(text)
        if not scored:
            return ""

        ranked = sorted(scored, key=lambda pair: -pair[1])
        selected: List[str] = []
        length = 0
        for sentence, _score in ranked:
            added = len(sentence) + (1 if selected else 0)
            if length + added > max_length:
                break
            selected.append(sentence)
            length += added

        if not selected:
            first = scored[0][0]
            logger.debug(
                "No sentence fits the budget, using first sentence",
                max_length=max_length,
                sentence_length=len(first),
            )
            return first

        return " ".join(selected)
