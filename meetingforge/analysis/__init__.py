"""
Extractive text analytics over meeting transcripts.

    from meetingforge.analysis import SummaryService
    result = SummaryService().generate_summary(transcript)
"""

from meetingforge.analysis.confidence import ConfidenceEstimator
from meetingforge.analysis.frequency import word_frequency
from meetingforge.analysis.key_points import KeyPointExtractor
from meetingforge.analysis.lexicons import Lexicon
from meetingforge.analysis.sentiment import SentimentCounts, SentimentScorer
from meetingforge.analysis.service import SummaryService
from meetingforge.analysis.summarizer import ExtractiveSummarizer
from meetingforge.analysis.topics import TopicExtractor

__all__ = [
    "ConfidenceEstimator",
    "ExtractiveSummarizer",
    "KeyPointExtractor",
    "Lexicon",
    "SentimentCounts",
    "SentimentScorer",
    "SummaryService",
    "TopicExtractor",
    "word_frequency",
]
