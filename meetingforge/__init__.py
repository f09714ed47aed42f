"""MeetingForge - Extractive analytics for meeting transcripts.

This package provides lexicon- and frequency-based summarization, key point,
topic and sentiment extraction, plus scoring-based task allocation.
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
