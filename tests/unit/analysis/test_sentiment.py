"""
Tests for Sentiment Scoring.

Organization
------------
- TestCounts: lexicon hit counting
- TestAnalyze: classification rules and invariants
"""

import random

import pytest

from meetingforge.analysis.lexicons import Lexicon
from meetingforge.analysis.sentiment import SentimentCounts, SentimentScorer
from meetingforge.core.config import SentimentConfig
from meetingforge.models.summary import Sentiment
from meetingforge.shared.text_utils import tokenize


@pytest.fixture
def scorer() -> SentimentScorer:
    """Scorer with default lexicon and thresholds."""
    return SentimentScorer()


class TestCounts:
    """Tests for count."""

    def test_counts_content_words(self, scorer, budget_text):
        """Test stop words are excluded from the total."""
        counts = scorer.count(tokenize(budget_text))

        assert counts == SentimentCounts(positive=1, negative=0, total_words=12)

    def test_ratios_without_words(self):
        """Test empty counts have zero ratios."""
        counts = SentimentCounts()

        assert counts.positive_ratio == 0.0
        assert counts.negative_ratio == 0.0


class TestAnalyze:
    """Tests for analyze."""

    def test_budget_scenario_is_positive(self, scorer, budget_text):
        """Test a single strong positive word in a short text."""
        assert scorer.analyze(budget_text) is Sentiment.POSITIVE

    def test_negative_text(self, scorer):
        """Test negative words dominate."""
        assert scorer.analyze("The delay is a problem.") is Sentiment.NEGATIVE

    def test_balanced_text_is_neutral(self, scorer):
        """Test equal polarity does not dominate."""
        assert scorer.analyze("Good results. Bad timing.") is Sentiment.NEUTRAL

    def test_below_threshold_is_neutral(self, scorer):
        """Test a rare positive word is not enough."""
        filler = " ".join(f"word{i}" for i in range(30))

        assert scorer.analyze(f"{filler} great") is Sentiment.NEUTRAL

    @pytest.mark.parametrize("text", ["", "   ", "the and of", "?!"])
    def test_no_content_is_neutral(self, scorer, text):
        """Test texts without content words are neutral."""
        assert scorer.analyze(text) is Sentiment.NEUTRAL

    def test_permutation_invariant(self, scorer, budget_text):
        """Test word order never changes the result."""
        words = budget_text.split()
        expected = scorer.analyze(budget_text)
        rng = random.Random(7)

        for _ in range(20):
            rng.shuffle(words)
            assert scorer.analyze(" ".join(words)) is expected

    def test_custom_lexicon(self, scorer):
        """Test extended lexicons change the outcome."""
        lexicon = Lexicon.default().extended(negative_words=["blocker"])

        assert scorer.analyze("Blocker remains.") is Sentiment.NEUTRAL
        assert SentimentScorer(lexicon).analyze("Blocker remains.") is Sentiment.NEGATIVE

    def test_configured_threshold(self, budget_text):
        """Test a higher ratio threshold turns the scenario neutral."""
        scorer = SentimentScorer(config=SentimentConfig(ratio_threshold=0.1))

        assert scorer.analyze(budget_text) is Sentiment.NEUTRAL
