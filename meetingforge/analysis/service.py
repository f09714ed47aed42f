"""
Summary Service.

Runs the analyzers over a transcript and assembles a SummaryResult.

    ┌─────────────┐     ┌──────────────┐     ┌──────────────────────┐
    │ Transcript  │────→│  full_text   │────→│ summarizer           │
    └─────────────┘     └──────────────┘     │ key points / topics  │
                                             │ sentiment            │
                                             │ confidence           │
                                             └──────────┬───────────┘
                                                        ↓
                                                 SummaryResult

The service holds no mutable state; one instance can serve any number of
callers. Lexicon and configuration are passed in explicitly:

    service = SummaryService(Lexicon.from_config(cfg.lexicon), cfg.summary)
    result = service.generate_summary(transcript)
"""

import time
from datetime import timedelta
from typing import Iterable, List, Optional

from meetingforge.analysis.confidence import ConfidenceEstimator
from meetingforge.analysis.key_points import KeyPointExtractor
from meetingforge.analysis.lexicons import EXECUTIVE_TERMS, TECHNICAL_TERMS, Lexicon
from meetingforge.analysis.sentiment import SentimentScorer
from meetingforge.analysis.summarizer import ExtractiveSummarizer
from meetingforge.analysis.topics import TopicExtractor
from meetingforge.core.config import SentimentConfig, SummaryConfig
from meetingforge.core.logging import AnalysisLogger
from meetingforge.models.summary import (
    Sentiment,
    SummaryOptions,
    SummaryResult,
    SummaryStyle,
)
from meetingforge.models.transcript import Transcript
from meetingforge.shared.text_utils import count_words, truncate_text

EXECUTIVE_FALLBACK_POINTS = 3


def _mentioning(points: List[str], terms: Iterable[str]) -> List[str]:
    terms = tuple(terms)
    return [p for p in points if any(term in p.lower() for term in terms)]


class SummaryService:
    """Assemble summaries, key points, topics, sentiment and confidence."""

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        config: Optional[SummaryConfig] = None,
        sentiment_config: Optional[SentimentConfig] = None,
    ) -> None:
        self.lexicon = lexicon or Lexicon.default()
        self.config = config or SummaryConfig()
        self.summarizer = ExtractiveSummarizer(self.config)
        self.key_points = KeyPointExtractor(self.lexicon)
        self.topics = TopicExtractor(self.lexicon)
        self.sentiment = SentimentScorer(self.lexicon, sentiment_config)
        self.confidence = ConfidenceEstimator()

    def generate_summary(
        self, transcript: Transcript, options: Optional[SummaryOptions] = None
    ) -> SummaryResult:
        """Analyze the concatenated text of a transcript."""
        subject = transcript.id or transcript.meeting_id or "transcript"
        return self._analyze(transcript.full_text, options, subject)

    def analyze_text(
        self, text: str, options: Optional[SummaryOptions] = None
    ) -> SummaryResult:
        """Analyze raw text."""
        return self._analyze(text, options, "text")

    def _analyze(
        self, text: str, options: Optional[SummaryOptions], subject: str
    ) -> SummaryResult:
        options = options or SummaryOptions(max_length=self.config.default_max_length)
        alog = AnalysisLogger(subject)
        started = time.perf_counter()

        alog.start_stage("summary")
        summary = self.summarizer.summarize(text, options.max_length)

        key_points: List[str] = []
        if options.include_key_points:
            alog.start_stage("key_points")
            key_points = self.key_points.extract(text, self.config.max_key_points)

        topics: List[str] = []
        if options.include_topics:
            alog.start_stage("topics")
            topics = self.topics.extract(text, self.config.max_topics)

        sentiment = Sentiment.NEUTRAL
        if options.include_sentiment:
            alog.start_stage("sentiment")
            sentiment = self.sentiment.analyze(text)

        alog.start_stage("confidence")
        confidence = self.confidence.estimate(text)

        elapsed = timedelta(seconds=time.perf_counter() - started)
        word_count = count_words(summary)
        alog.finish(
            success=True,
            style=options.style.value,
            word_count=word_count,
            sentiment=sentiment.value,
        )
        return SummaryResult(
            summary=summary,
            key_points=key_points,
            topics=topics,
            sentiment=sentiment,
            confidence=confidence,
            word_count=word_count,
            processing_time=elapsed,
        )

    def generate_meeting_summary(
        self, transcript: Transcript, meeting_type: str
    ) -> SummaryResult:
        """Summarize with the length preset of a meeting type.

        Unknown meeting types use the default meeting length.
        """
        options = SummaryOptions(
            max_length=self.config.length_for_meeting_type(meeting_type),
            style=SummaryStyle.MEETING,
        )
        return self.generate_summary(transcript, options)

    def generate_executive_summary(self, transcript: Transcript) -> SummaryResult:
        """Short summary focused on decisions, budget and timeline.

        Key points that mention none of those fall back to the first three.
        A summary longer than the executive length is cut at a word boundary
        and ends with ``...``.
        """
        max_length = self.config.executive_max_length
        result = self.generate_summary(
            transcript,
            SummaryOptions(max_length=max_length, style=SummaryStyle.EXECUTIVE),
        )
        focused = _mentioning(result.key_points, EXECUTIVE_TERMS)
        summary = truncate_text(result.summary, max_length)
        return result.model_copy(
            update={
                "key_points": focused or result.key_points[:EXECUTIVE_FALLBACK_POINTS],
                "summary": summary,
                "word_count": count_words(summary),
            }
        )

    def generate_technical_summary(self, transcript: Transcript) -> SummaryResult:
        """Longer summary whose key points favour technical statements.

        Without any technical key point, all key points are kept.
        """
        result = self.generate_summary(
            transcript,
            SummaryOptions(
                max_length=self.config.technical_max_length,
                style=SummaryStyle.TECHNICAL,
            ),
        )
        focused = _mentioning(result.key_points, TECHNICAL_TERMS)
        return result.model_copy(update={"key_points": focused or result.key_points})
