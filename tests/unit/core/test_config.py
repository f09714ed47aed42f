"""
Tests for Configuration Dataclasses.

Organization
------------
- TestSummaryConfig: weights, lengths and meeting presets
- TestSentimentConfig: threshold ranges
- TestAllocationConfig: weight groups, thresholds and due days
- TestForecastConfig: forecast thresholds
- TestConfig: aggregation, to_dict and from_dict
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from meetingforge.core.config import (
    AllocationConfig,
    Config,
    ForecastConfig,
    LoggingSettings,
    SentimentConfig,
    SummaryConfig,
)
from meetingforge.core.exceptions import ConfigurationError, ConfigValidationError


class TestSummaryConfig:
    """Tests for SummaryConfig."""

    def test_defaults(self):
        """Test the documented default weights and length."""
        config = SummaryConfig()

        assert config.default_max_length == 200
        assert (config.frequency_weight, config.position_weight, config.length_weight) == (
            0.6,
            0.3,
            0.1,
        )

    def test_weights_must_sum_to_one(self):
        """Test invalid weights are rejected."""
        with pytest.raises(ConfigValidationError) as exc_info:
            SummaryConfig(frequency_weight=0.9)

        assert exc_info.value.field == "summary.frequency_weight"

    def test_negative_length_rejected(self):
        """Test negative lengths are rejected."""
        with pytest.raises(ConfigValidationError):
            SummaryConfig(default_max_length=-1)

    @pytest.mark.parametrize(
        "meeting_type,expected",
        [
            ("standup", 150),
            ("Planning", 400),
            ("review", 350),
            ("brainstorming", 250),
            ("retrospective", 300),
        ],
    )
    def test_length_for_meeting_type(self, meeting_type, expected):
        """Test meeting-type presets and the default length."""
        assert SummaryConfig().length_for_meeting_type(meeting_type) == expected


class TestSentimentConfig:
    """Tests for SentimentConfig."""

    def test_threshold_out_of_range(self):
        """Test ratio threshold must be below 1."""
        with pytest.raises(ConfigValidationError):
            SentimentConfig(ratio_threshold=1.0)

    def test_dominance_factor_below_one(self):
        """Test dominance factor must be at least 1."""
        with pytest.raises(ConfigValidationError):
            SentimentConfig(dominance_factor=0.5)


class TestAllocationConfig:
    """Tests for AllocationConfig."""

    def test_defaults_are_valid(self):
        """Test default configuration passes validation."""
        config = AllocationConfig()

        assert config.due_days == {"urgent": 1, "high": 3, "medium": 7, "low": 14}
        assert config.optimal_workload == 5

    def test_assignment_weights_checked(self):
        """Test assignment weights must sum to 1."""
        with pytest.raises(ConfigValidationError) as exc_info:
            AllocationConfig(skill_weight=0.5)

        assert exc_info.value.field == "allocation.assignment_weights"

    def test_priority_weights_checked(self):
        """Test priority weights must sum to 1."""
        with pytest.raises(ConfigValidationError):
            AllocationConfig(urgency_weight=0.1)

    def test_thresholds_must_be_ordered(self):
        """Test thresholds must descend from urgent to medium."""
        with pytest.raises(ConfigValidationError):
            AllocationConfig(high_threshold=0.9)

    def test_due_days_complete(self):
        """Test every priority needs a due-day offset."""
        with pytest.raises(ConfigValidationError):
            AllocationConfig(due_days={"urgent": 1})


class TestForecastConfig:
    """Tests for ForecastConfig."""

    def test_tasks_per_person_positive(self):
        """Test zero tasks per person is rejected with the field name."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ForecastConfig(tasks_per_person=0)

        assert exc_info.value.field == "forecast.tasks_per_person"
        assert exc_info.value.value == 0

    def test_burnout_bounds_ordered(self):
        """Test the low burnout bound cannot exceed the medium bound."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ForecastConfig(burnout_low_max=9, burnout_medium_max=8)

        assert exc_info.value.field == "forecast.burnout_low_max"

    def test_reduction_factor_range(self):
        """Test a reduction factor above 1 is rejected."""
        with pytest.raises(ConfigValidationError):
            ForecastConfig(duration_reduction_factor=1.5)

    def test_invalid_section_caught_as_configuration_error(self):
        """Test a bad forecast section is a ConfigurationError."""
        with pytest.raises(ConfigurationError):
            Config.from_dict({"forecast": {"max_meeting_participants": 0}})


class TestConfig:
    """Tests for the aggregate Config."""

    def test_default_config(self):
        """Test Config() builds every section."""
        config = Config()

        assert isinstance(config.summary, SummaryConfig)
        assert isinstance(config.allocation, AllocationConfig)
        assert config.log_path is None

    def test_logging_level_normalized(self):
        """Test the log level is upper-cased."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_to_dict_skips_private_fields(self):
        """Test runtime paths are not serialized."""
        data = Config().to_dict()

        assert "_base_path" not in data
        assert data["summary"]["default_max_length"] == 200

    def test_from_dict_ignores_unknown_keys(self):
        """Test unknown keys are filtered per section."""
        config = Config.from_dict(
            {"summary": {"max_topics": 3, "unknown": True}, "extra": {}}
        )

        assert config.summary.max_topics == 3

    def test_from_dict_expands_env_vars(self):
        """Test ${VAR:default} references are expanded."""
        with patch.dict(os.environ, {"MF_TEST_LOG": "logs/mf.log"}):
            config = Config.from_dict(
                {"logging": {"file": "${MF_TEST_LOG}", "level": "${MF_MISSING:info}"}},
                base_path=Path("/srv/app"),
            )

        assert config.logging.file == "logs/mf.log"
        assert config.logging.level == "INFO"
        assert config.log_path == Path("/srv/app/logs/mf.log")

    def test_from_dict_validates_sections(self):
        """Test invalid section values raise ConfigValidationError."""
        with pytest.raises(ConfigValidationError):
            Config.from_dict({"allocation": {"skill_weight": 0.9}})

    def test_section_must_be_a_mapping(self):
        """Test a scalar section is rejected."""
        with pytest.raises(ConfigValidationError):
            Config.from_dict({"summary": 200})

    def test_section_type_checked(self):
        """Test a wrongly typed section names the offending field."""
        with pytest.raises(ConfigValidationError) as exc_info:
            Config(summary={"max_topics": 3})

        assert exc_info.value.field == "summary"
