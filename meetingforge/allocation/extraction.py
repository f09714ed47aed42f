"""
Action item extraction from transcript segments.

Every action keyword found in a segment yields one draft whose description
runs from the keyword to the next full stop:

    "We will send the report today."  ->  "Will send the report today"
                                          "Send the report today"
"""

from typing import List, Optional, Sequence

from meetingforge.allocation.keywords import ACTION_KEYWORDS
from meetingforge.core.logging import get_logger
from meetingforge.models.tasks import TaskDraft
from meetingforge.models.transcript import Transcript, TranscriptSegment

logger = get_logger(__name__)

MIN_DESCRIPTION_LENGTH = 11
UNKNOWN_MEETING = "unknown"


class ActionItemExtractor:
    """Keyword-based action item detection."""

    def __init__(self, keywords: Optional[Sequence[str]] = None) -> None:
        self.keywords = tuple(keywords) if keywords is not None else ACTION_KEYWORDS

    def extract_from_segment(
        self, segment: TranscriptSegment, meeting_id: Optional[str] = None
    ) -> List[TaskDraft]:
        """Drafts found in one segment, in keyword order, without duplicates."""
        text = segment.text.lower()
        meeting = segment.meeting_id or meeting_id or UNKNOWN_MEETING
        descriptions: List[str] = []

        for keyword in self.keywords:
            start = text.find(keyword)
            if start == -1:
                continue
            end = text.find(".", start)
            description = text[start:end] if end > start else text[start:]
            if len(description) < MIN_DESCRIPTION_LENGTH:
                continue
            description = description[0].upper() + description[1:]
            if description not in descriptions:
                descriptions.append(description)

        return [TaskDraft(description=d, meeting_id=meeting) for d in descriptions]

    def extract(self, transcript: Transcript) -> List[TaskDraft]:
        """Drafts of every segment, in segment order."""
        drafts: List[TaskDraft] = []
        for segment in transcript.segments:
            drafts.extend(self.extract_from_segment(segment, transcript.meeting_id))
        logger.debug(
            "Extracted action items",
            segments=len(transcript.segments),
            drafts=len(drafts),
        )
        return drafts
