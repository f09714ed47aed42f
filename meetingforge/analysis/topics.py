"""
Topic extraction.

Topics are the most frequent content words of a text: longer than three
characters, not stop words and not plain numbers.
"""

from typing import List, Optional

from meetingforge.analysis.frequency import word_frequency
from meetingforge.analysis.lexicons import Lexicon
from meetingforge.shared.text_utils import is_numeric_token, tokenize

MIN_TOPIC_LENGTH = 4


class TopicExtractor:
    """Rank content words by frequency."""

    def __init__(self, lexicon: Optional[Lexicon] = None) -> None:
        self.lexicon = lexicon or Lexicon.default()

    def is_candidate(self, token: str) -> bool:
        """True for tokens that may become topics."""
        return (
            len(token) >= MIN_TOPIC_LENGTH
            and token not in self.lexicon.stop_words
            and not is_numeric_token(token)
        )

    def extract(self, text: str, max_topics: int = 5) -> List[str]:
        """Return up to ``max_topics`` distinct topics, most frequent first.

        Ties are broken by first occurrence in the text.
        """
        if max_topics <= 0:
            return []

        tokens = tokenize(text)
        frequency = word_frequency(text, tokens)
        # dict keeps first-occurrence order, which the stable sort preserves
        candidates = [t for t in frequency if self.is_candidate(t)]
        candidates.sort(key=lambda t: frequency[t], reverse=True)
        return candidates[:max_topics]
