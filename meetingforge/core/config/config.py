"""
Main configuration class for MeetingForge.

The Config dataclass aggregates the sub-configs and converts to and from the
plain dictionaries stored in meetingforge.yaml.

    meetingforge.yaml
           ↓
    load_config() → Config
           ↓
    Passed to: SummaryService, TaskAllocationEngine, PredictiveAnalyticsEngine

Configuration Hierarchy
-----------------------
    Config
    ├── ProjectConfig      # Name and version
    ├── LoggingSettings    # Level, optional log file
    ├── SummaryConfig      # Summarizer weights, lengths, presets
    ├── SentimentConfig    # Ratio threshold, dominance factor
    ├── LexiconConfig      # Extra lexicon words
    ├── AllocationConfig   # Assignment/priority weights, due dates
    └── ForecastConfig     # Predictive analytics thresholds

Every field has a default, so ``Config()`` is a working configuration.
"""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, get_type_hints

from meetingforge.core.config.allocation import AllocationConfig
from meetingforge.core.config.analysis import LexiconConfig, SentimentConfig, SummaryConfig
from meetingforge.core.config.base import LoggingSettings, ProjectConfig
from meetingforge.core.config.forecast import ForecastConfig
from meetingforge.core.exceptions import ConfigValidationError

SECTIONS = {
    "project": ProjectConfig,
    "logging": LoggingSettings,
    "summary": SummaryConfig,
    "sentiment": SentimentConfig,
    "lexicon": LexiconConfig,
    "allocation": AllocationConfig,
    "forecast": ForecastConfig,
}


_SECTION_NAMES = {section: name for name, section in SECTIONS.items()}
_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0"}


def _coerce_scalar(section: Any, name: str, hint: Any, value: Any) -> Any:
    """Convert a string value to a bool, int or float field type."""
    if not isinstance(value, str) or hint not in (bool, int, float):
        return value

    text = value.strip()
    if hint is bool:
        if text.lower() in _TRUE_STRINGS:
            return True
        if text.lower() in _FALSE_STRINGS:
            return False
    else:
        try:
            return hint(text)
        except ValueError:
            pass
    qualified = f"{_SECTION_NAMES.get(section, section.__name__)}.{name}"
    raise ConfigValidationError(
        f"{qualified} must be {hint.__name__}, got {value!r}",
        field=qualified,
        value=value,
    )


@dataclass
class Config:
    """Main MeetingForge configuration."""

    project: ProjectConfig = field(default_factory=ProjectConfig)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    summary: SummaryConfig = field(default_factory=SummaryConfig)
    sentiment: SentimentConfig = field(default_factory=SentimentConfig)
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    allocation: AllocationConfig = field(default_factory=AllocationConfig)
    forecast: ForecastConfig = field(default_factory=ForecastConfig)

    # Set by the loader; relative log paths resolve against it
    _base_path: Path = field(default_factory=Path.cwd, repr=False)

    def __post_init__(self) -> None:
        for name, section in SECTIONS.items():
            value = getattr(self, name)
            if not isinstance(value, section):
                raise ConfigValidationError(
                    f"{name} must be a {section.__name__}, got {type(value).__name__}",
                    field=name,
                    value=value,
                )

    @property
    def log_path(self) -> Optional[Path]:
        """Absolute path of the log file, if one is configured."""
        if not self.logging.file:
            return None
        path = Path(self.logging.file)
        return path if path.is_absolute() else self._base_path / path

    def to_dict(self) -> Dict[str, Any]:
        """Plain section dictionaries, as written to meetingforge.yaml."""
        return {name: asdict(getattr(self, name)) for name in SECTIONS}

    @staticmethod
    def _section_kwargs(section: Any, data: Any) -> Dict[str, Any]:
        """Keyword arguments for one section; unknown keys are dropped.

        Strings given for bool, int and float fields (typically produced by
        ``${VAR:default}`` expansion) are converted to the field's type.
        """
        if not data:
            return {}
        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"{section.__name__} section must be a mapping", value=data
            )
        hints = get_type_hints(section)
        names = {f.name for f in fields(section)}
        return {
            key: _coerce_scalar(section, key, hints.get(key), value)
            for key, value in data.items()
            if key in names
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], base_path: Optional[Path] = None
    ) -> "Config":
        """Create Config from dictionary, expanding ${VAR} references."""
        # config_loaders imports this module
        from meetingforge.core.config_loaders import expand_env_vars

        data = expand_env_vars(data or {})
        config = cls(
            **{
                name: section(**cls._section_kwargs(section, data.get(name)))
                for name, section in SECTIONS.items()
            }
        )
        if base_path:
            config._base_path = base_path
        return config
