"""Tests for action item extraction."""

import pytest

from meetingforge.allocation.extraction import ActionItemExtractor
from meetingforge.models import Transcript, TranscriptSegment


@pytest.fixture
def extractor() -> ActionItemExtractor:
    """Extractor with the default action keywords."""
    return ActionItemExtractor()


class TestExtractFromSegment:
    """Tests for extract_from_segment."""

    def test_one_draft_per_keyword(self, extractor):
        """Test every keyword found yields its own description."""
        segment = TranscriptSegment(text="We will send the report today.")

        drafts = extractor.extract_from_segment(segment)

        assert [d.description for d in drafts] == [
            "Will send the report today",
            "Send the report today",
        ]

    def test_description_runs_to_end_without_period(self, extractor):
        """Test a missing full stop extends the description to the end."""
        segment = TranscriptSegment(text="Please prepare slides for monday")

        drafts = extractor.extract_from_segment(segment)

        assert [d.description for d in drafts] == ["Prepare slides for monday"]

    def test_short_descriptions_dropped(self, extractor):
        """Test descriptions of ten characters or fewer are ignored."""
        segment = TranscriptSegment(text="Review it. Thanks.")

        assert extractor.extract_from_segment(segment) == []

    def test_duplicates_collapsed(self):
        """Test identical drafts within a segment appear once."""
        extractor = ActionItemExtractor(keywords=["send", "send"])
        segment = TranscriptSegment(text="Send the minutes to everyone.")

        drafts = extractor.extract_from_segment(segment)

        assert len(drafts) == 1

    def test_meeting_id_precedence(self, extractor):
        """Test segment id, then transcript id, then unknown."""
        own = TranscriptSegment(text="Send the minutes to everyone.", meeting_id="seg-m")
        bare = TranscriptSegment(text="Send the minutes to everyone.")

        assert extractor.extract_from_segment(own, "tr-m")[0].meeting_id == "seg-m"
        assert extractor.extract_from_segment(bare, "tr-m")[0].meeting_id == "tr-m"
        assert extractor.extract_from_segment(bare)[0].meeting_id == "unknown"


class TestExtract:
    """Tests for extract over a transcript."""

    def test_budget_transcript(self, extractor, make_transcript, budget_text):
        """Test drafts follow keyword order within a segment."""
        transcript = make_transcript([budget_text])

        drafts = extractor.extract(transcript)

        assert [d.description for d in drafts] == [
            "Need to review the budget by friday",
            "Should schedule a follow-up",
            "Review the budget by friday",
            "Schedule a follow-up",
        ]
        assert {d.meeting_id for d in drafts} == {"meeting-1"}

    def test_empty_transcript(self, extractor):
        """Test no segments give no drafts."""
        assert extractor.extract(Transcript()) == []
