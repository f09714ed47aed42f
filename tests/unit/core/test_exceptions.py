"""
Tests for Exception Hierarchy.

All exceptions should inherit from MeetingForgeError and carry an error
code, an explanation and suggested fixes.

Organization
------------
- TestBaseException: MeetingForgeError
- TestAllocationExceptions: AllocationError, NoCandidatesError
- TestConfigurationExceptions: ConfigurationError, ConfigValidationError
- TestAnalysisError: host-raised analysis failures
"""

import pytest

from meetingforge.core.exceptions import (
    AllocationError,
    AnalysisError,
    ConfigurationError,
    ConfigValidationError,
    MeetingForgeError,
    NoCandidatesError,
)


class TestBaseException:
    """Tests for MeetingForgeError base exception."""

    def test_create_base_exception(self):
        """Test creating base MeetingForgeError."""
        error = MeetingForgeError("test error")

        assert str(error) == "test error"
        assert error.user_message == "test error"
        assert error.error_code == "MF-ERR-000"

    def test_overrides_per_instance(self):
        """Test keyword overrides replace the class defaults."""
        error = MeetingForgeError(
            "boom",
            error_code="MF-X-001",
            why_it_happened="because",
            how_to_fix=["retry"],
        )

        assert error.error_code == "MF-X-001"
        assert error.why_it_happened == "because"
        assert error.how_to_fix == ["retry"]
        assert MeetingForgeError.error_code == "MF-ERR-000"

    @pytest.mark.parametrize(
        "exc_class",
        [AnalysisError, AllocationError, ConfigurationError],
    )
    def test_subclasses_catchable_as_base(self, exc_class):
        """Test every family is catchable as MeetingForgeError."""
        with pytest.raises(MeetingForgeError):
            raise exc_class("failure")


class TestAllocationExceptions:
    """Tests for allocation errors."""

    def test_no_candidates_error_message(self):
        """Test the message names the task description."""
        error = NoCandidatesError("Review budget")

        assert "Review budget" in str(error)
        assert error.description == "Review budget"
        assert error.error_code == "MF-ALLOC-001"

    def test_no_candidates_is_allocation_error(self):
        """Test NoCandidatesError inherits from AllocationError."""
        assert issubclass(NoCandidatesError, AllocationError)


class TestConfigurationExceptions:
    """Tests for configuration errors."""

    def test_validation_error_attributes(self):
        """Test field and value are kept."""
        error = ConfigValidationError(
            "weights must sum to 1.0", field="summary.frequency_weight", value=1.2
        )

        assert error.field == "summary.frequency_weight"
        assert error.value == 1.2
        assert isinstance(error, ConfigurationError)
        assert error.how_to_fix


class TestAnalysisError:
    """Tests for AnalysisError as used by host applications."""

    def test_analyzers_do_not_raise_on_empty_input(self):
        """Test empty text yields an empty result rather than AnalysisError."""
        from meetingforge.analysis import SummaryService

        result = SummaryService().analyze_text("")

        assert result.summary == ""
        assert result.confidence == 0

    def test_host_raised_error_carries_guidance(self):
        """Test the analysis error code and fixes are available to hosts."""
        with pytest.raises(MeetingForgeError) as exc_info:
            raise AnalysisError("Empty summary for meeting m-1")

        assert exc_info.value.error_code == "MF-ANA-000"
        assert exc_info.value.how_to_fix
