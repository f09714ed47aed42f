"""
Summary Models.

SummaryResult is created fresh by every SummaryService call and is frozen.
"""

from datetime import timedelta
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class Sentiment(str, Enum):
    """Overall polarity of a text."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class SummaryStyle(str, Enum):
    """Summary flavours offered by SummaryService."""

    MEETING = "meeting"
    EXECUTIVE = "executive"
    TECHNICAL = "technical"


class SummaryOptions(BaseModel):
    """Per-call switches for SummaryService.generate_summary()."""

    model_config = {"frozen": True}

    max_length: int = Field(200, description="Character budget of the summary")
    include_key_points: bool = True
    include_topics: bool = True
    include_sentiment: bool = True
    style: SummaryStyle = SummaryStyle.MEETING


class SummaryResult(BaseModel):
    """Assembled output of one transcript analysis."""

    model_config = {"frozen": True}

    summary: str = ""
    key_points: List[str] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)
    sentiment: Sentiment = Sentiment.NEUTRAL
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    word_count: int = Field(0, ge=0, description="Words in the summary text")
    processing_time: timedelta = timedelta(0)
