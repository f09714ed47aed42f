"""Tests for the Confidence Estimator."""

import pytest

from meetingforge.analysis.confidence import ConfidenceEstimator


def _sentences(count: int, words_per_sentence: int = 10) -> str:
    """Build text of distinct words split into sentences."""
    sentences = []
    for s in range(count):
        words = [f"w{s}x{i}" for i in range(words_per_sentence)]
        sentences.append(" ".join(words) + ".")
    return " ".join(sentences)


class TestConfidenceEstimator:
    """Tests for estimate."""

    @pytest.mark.parametrize("text", ["", "   ", "...", "?!"])
    def test_zero_without_words(self, text):
        """Test texts without words score zero."""
        assert ConfidenceEstimator().estimate(text) == 0.0

    def test_budget_scenario(self, budget_text):
        """Test the formula on a short three-sentence text."""
        expected = 0.5 + (23 / 100) * 0.2 + 1.0 * 0.2 + (21 / 23) * 0.1

        assert ConfidenceEstimator().estimate(budget_text) == pytest.approx(expected)

    def test_long_sentences_score_lower_structure(self):
        """Test sentences outside 5 to 25 words get half the structure score."""
        short = ConfidenceEstimator().estimate(_sentences(1, 4))

        assert short == pytest.approx(0.5 + 0.04 * 0.2 + 0.5 * 0.2 + 0.1)

    def test_monotonic_in_word_count(self):
        """Test confidence never drops as text grows, up to saturation."""
        estimator = ConfidenceEstimator()

        scores = [estimator.estimate(_sentences(n)) for n in range(1, 12)]

        assert scores == sorted(scores)
        assert scores[-1] == pytest.approx(1.0)

    def test_bounded(self):
        """Test confidence stays in [0, 1]."""
        score = ConfidenceEstimator().estimate(_sentences(30))

        assert 0.0 <= score <= 1.0
