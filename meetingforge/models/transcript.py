"""
Transcript Models.

Segments arrive from an external speech-to-text capability; the analytics
only read them.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class TranscriptSegment(BaseModel):
    """One timestamped utterance with recognizer confidence."""

    model_config = {"frozen": True}

    speaker: str = "Unknown"
    text: str
    start_time: float = Field(0.0, ge=0.0, description="Seconds from meeting start")
    end_time: float = Field(0.0, ge=0.0, description="Seconds from meeting start")
    confidence: float = Field(1.0, ge=0.0, le=1.0)
    id: Optional[str] = None
    meeting_id: Optional[str] = None


class Transcript(BaseModel):
    """Ordered segments of a meeting plus aggregate metadata."""

    model_config = {"frozen": True}

    segments: List[TranscriptSegment] = Field(default_factory=list)
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    language: str = "en"
    created_at: datetime = Field(default_factory=datetime.now)
    id: Optional[str] = None
    meeting_id: Optional[str] = None

    @property
    def full_text(self) -> str:
        """Segment texts joined in order with single spaces."""
        return " ".join(segment.text for segment in self.segments)

    @property
    def speakers(self) -> List[str]:
        """Distinct speakers in order of first appearance."""
        seen: List[str] = []
        for segment in self.segments:
            if segment.speaker not in seen:
                seen.append(segment.speaker)
        return seen

    @property
    def duration(self) -> float:
        """Seconds between the first segment start and the last segment end."""
        if not self.segments:
            return 0.0
        return max(s.end_time for s in self.segments) - min(
            s.start_time for s in self.segments
        )

    @classmethod
    def from_segments(
        cls,
        segments: List[TranscriptSegment],
        *,
        language: str = "en",
        meeting_id: Optional[str] = None,
        transcript_id: Optional[str] = None,
    ) -> "Transcript":
        """Build a transcript whose confidence is the mean segment confidence."""
        confidence = (
            sum(s.confidence for s in segments) / len(segments) if segments else 0.0
        )
        return cls(
            segments=list(segments),
            confidence=confidence,
            language=language,
            meeting_id=meeting_id,
            id=transcript_id,
        )
