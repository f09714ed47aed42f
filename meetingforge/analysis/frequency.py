"""Token frequency counting."""

from collections import Counter
from typing import Dict, Optional, Sequence

from meetingforge.shared.text_utils import tokenize


def word_frequency(text: str, tokens: Optional[Sequence[str]] = None) -> Dict[str, int]:
    """Count every token occurrence, stop words and duplicates included.

    Args:
        text: Text to tokenize when ``tokens`` is not given
        tokens: Already tokenized text; avoids tokenizing twice

    Returns:
        Mapping of token to occurrence count, in first-occurrence order
    """
    if tokens is None:
        tokens = tokenize(text)
    return dict(Counter(tokens))
