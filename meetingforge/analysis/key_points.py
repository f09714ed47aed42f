"""Key point extraction."""

import re
from typing import List, Optional

from meetingforge.analysis.lexicons import Lexicon
from meetingforge.shared.text_utils import split_into_sentences

_HAS_DIGIT = re.compile(r"\d")


class KeyPointExtractor:
    """Pick sentences that state decisions, commitments or figures."""

    def __init__(self, lexicon: Optional[Lexicon] = None) -> None:
        self.lexicon = lexicon or Lexicon.default()

    def is_key_sentence(self, sentence: str) -> bool:
        """True for non-question sentences with an action indicator or a digit."""
        if sentence.rstrip().endswith("?"):
            return False
        lowered = sentence.lower()
        if any(indicator in lowered for indicator in self.lexicon.action_indicators):
            return True
        return bool(_HAS_DIGIT.search(sentence))

    def extract(self, text: str, max_points: int = 5) -> List[str]:
        """Extract up to ``max_points`` key sentences in document order.

        Qualifying sentences come first; remaining slots are filled with the
        earliest sentences not selected yet.
        """
        if max_points <= 0:
            return []

        sentences = split_into_sentences(text)
        points = [s for s in sentences if self.is_key_sentence(s)][:max_points]

        for sentence in sentences:
            if len(points) >= max_points:
                break
            if sentence not in points:
                points.append(sentence)

        return points[:max_points]
