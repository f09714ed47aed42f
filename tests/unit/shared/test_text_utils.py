"""
Tests for Text Processing Utilities.

Organization
------------
- TestSplitIntoSentences: sentence boundaries
- TestTokenize: normalization and idempotence
- TestCleanSummary: spacing fixes and idempotence
- TestTruncateText: word-boundary truncation
- TestCounting: word counts and reading time
"""

import pytest

from meetingforge.shared.text_utils import (
    clean_summary,
    count_words,
    estimate_reading_time,
    is_numeric_token,
    normalize_whitespace,
    split_into_sentences,
    tokenize,
    truncate_text,
)


class TestSplitIntoSentences:
    """Tests for split_into_sentences."""

    def test_splits_on_terminal_punctuation(self):
        """Test splitting after ., ! and ?."""
        text = "We shipped it. Great job! Any questions? None."

        assert split_into_sentences(text) == [
            "We shipped it.",
            "Great job!",
            "Any questions?",
            "None.",
        ]

    def test_requires_whitespace_after_punctuation(self):
        """Test decimals and abbreviations without space stay together."""
        assert split_into_sentences("Budget is 4.5 million.") == ["Budget is 4.5 million."]

    def test_empty_and_blank_input(self):
        """Test empty input yields no sentences."""
        assert split_into_sentences("") == []
        assert split_into_sentences("   \n ") == []

    def test_trailing_fragment_kept(self):
        """Test text without final punctuation is one sentence."""
        assert split_into_sentences("First. then the rest") == ["First.", "then the rest"]


class TestTokenize:
    """Tests for tokenize."""

    def test_lowercases_and_strips_punctuation(self):
        """Test punctuation becomes a separator."""
        assert tokenize("Let's follow-up, ASAP!") == ["let", "s", "follow", "up", "asap"]

    def test_empty_input(self):
        """Test empty text has no tokens."""
        assert tokenize("") == []
        assert tokenize("?!...") == []

    @pytest.mark.parametrize(
        "text",
        [
            "We need to review the budget by Friday.",
            "Q3 numbers: 42% up, costs -3%!",
            "  mixed\tWHITESPACE\nand_underscores ",
        ],
    )
    def test_idempotent(self, text):
        """Test re-tokenizing joined tokens gives the same tokens."""
        tokens = tokenize(text)

        assert tokenize(" ".join(tokens)) == tokens

    def test_numeric_token(self):
        """Test digit-only detection."""
        assert is_numeric_token("2024")
        assert not is_numeric_token("q3")
        assert not is_numeric_token("")


class TestCleanSummary:
    """Tests for clean_summary."""

    def test_fixes_spacing(self):
        """Test whitespace collapse and punctuation spacing."""
        assert clean_summary("  Budget approved .next  steps follow ") == (
            "Budget approved. next steps follow"
        )

    def test_removes_space_before_comma(self):
        """Test whitespace before commas is removed."""
        assert clean_summary("Alpha , beta") == "Alpha, beta"

    @pytest.mark.parametrize(
        "text",
        [
            "  Budget approved .next  steps follow ",
            "a .b ,c !d ?e",
            "Already clean. Nothing to do!",
            "",
        ],
    )
    def test_idempotent(self, text):
        """Test applying twice equals applying once."""
        once = clean_summary(text)

        assert clean_summary(once) == once

    def test_normalize_whitespace(self):
        """Test all whitespace runs become one space."""
        assert normalize_whitespace("Hello\n\t World ") == "Hello World"


class TestTruncateText:
    """Tests for truncate_text."""

    def test_short_text_unchanged(self):
        """Test text within the limit is returned as is."""
        assert truncate_text("Short", 10) == "Short"

    def test_cuts_at_word_boundary(self):
        """Test truncation at the last space."""
        assert truncate_text("Review the budget proposal", 12) == "Review the..."

    def test_hard_cut_without_space(self):
        """Test a single long word is cut hard."""
        assert truncate_text("Supercalifragilistic", 5) == "Super..."


class TestCounting:
    """Tests for count_words and estimate_reading_time."""

    def test_count_words(self):
        """Test whitespace word count."""
        assert count_words("one two  three") == 3
        assert count_words("") == 0

    def test_reading_time_rounds_up(self):
        """Test partial minutes round up."""
        assert estimate_reading_time("word " * 201) == 2
        assert estimate_reading_time("") == 0

    def test_reading_time_rejects_zero_rate(self):
        """Test a non-positive rate is rejected."""
        with pytest.raises(ValueError):
            estimate_reading_time("text", words_per_minute=0)
