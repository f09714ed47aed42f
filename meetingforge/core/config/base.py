"""
Base configuration classes for project and logging settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ProjectConfig:
    """Project-level configuration."""

    name: str = "meetingforge"
    version: str = "0.3.0"


@dataclass
class LoggingSettings:
    """Logging configuration as stored in meetingforge.yaml."""

    level: str = "INFO"
    file: Optional[str] = None  # Optional log file path, relative to base path
    console: bool = True

    def __post_init__(self) -> None:
        """Normalize the log level name."""
        self.level = self.level.upper()
