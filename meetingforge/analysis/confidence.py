"""Heuristic confidence of an analysis, based on text quality."""

from meetingforge.shared.text_utils import split_into_sentences, tokenize

WORD_SATURATION = 100
MIN_AVG_SENTENCE_WORDS = 5
MAX_AVG_SENTENCE_WORDS = 25


class ConfidenceEstimator:
    """Score how much text there is to work with, in [0, 1].

    The score is not a probability. Longer texts, sentences of reasonable
    length and a varied vocabulary raise it.
    """

    def estimate(self, text: str) -> float:
        tokens = tokenize(text)
        sentences = split_into_sentences(text)
        if not tokens or not sentences:
            return 0.0

        word_count = len(tokens)
        avg_sentence_length = word_count / len(sentences)
        if MIN_AVG_SENTENCE_WORDS <= avg_sentence_length <= MAX_AVG_SENTENCE_WORDS:
            sentence_quality = 1.0
        else:
            sentence_quality = 0.5
        vocabulary_diversity = len(set(tokens)) / word_count

        confidence = 0.5
        confidence += min(word_count / WORD_SATURATION, 1.0) * 0.2
        confidence += sentence_quality * 0.2
        confidence += vocabulary_diversity * 0.1
        return min(confidence, 1.0)
