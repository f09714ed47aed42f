"""
Configuration Management for MeetingForge.

Dataclass configs mapped to meetingforge.yaml, re-exported here:

    from meetingforge.core.config import Config, SummaryConfig

    config/
    ├── base.py          # ProjectConfig, LoggingSettings
    ├── analysis.py      # SummaryConfig, SentimentConfig, LexiconConfig
    ├── allocation.py    # AllocationConfig
    ├── forecast.py      # ForecastConfig
    └── config.py        # Main Config class
"""

from meetingforge.core.config.config import Config
from meetingforge.core.config.base import LoggingSettings, ProjectConfig
from meetingforge.core.config.analysis import (
    LexiconConfig,
    SentimentConfig,
    SummaryConfig,
)
from meetingforge.core.config.allocation import AllocationConfig
from meetingforge.core.config.forecast import ForecastConfig

__all__ = [
    "Config",
    "ProjectConfig",
    "LoggingSettings",
    "SummaryConfig",
    "SentimentConfig",
    "LexiconConfig",
    "AllocationConfig",
    "ForecastConfig",
]
