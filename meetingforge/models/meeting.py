"""Meeting record consumed by the predictive analytics engine."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class Meeting(BaseModel):
    """A held or scheduled meeting."""

    id: str
    title: str = ""
    start_time: datetime
    duration_minutes: float = Field(0.0, ge=0.0)
    participants: List[str] = Field(default_factory=list)
    meeting_type: str = "general"
