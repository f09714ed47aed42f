"""
Exception Hierarchy for MeetingForge.

All exceptions raised by the package inherit from MeetingForgeError and
carry helpful information for the host application:

- error_code: Stable identifier (e.g., "MF-ALLOC-001")
- why_it_happened: Explanation of the root cause
- how_to_fix: Actionable suggestions

Exception Hierarchy
-------------------
    MeetingForgeError (base)
    ├── AnalysisError          (raised by host applications)
    ├── AllocationError
    │   └── NoCandidatesError
    └── ConfigurationError
        └── ConfigValidationError

Degenerate inputs (empty transcripts, texts without tokens) are not errors:
the analytics resolve them to defined defaults instead of raising.
"""

from typing import Any, List, Optional


class MeetingForgeError(Exception):
    """
    Base exception for all MeetingForge errors.

    Example
    -------
        try:
            engine.allocate(task, candidates)
        except MeetingForgeError as e:
            logger.error(f"Allocation failed: {e}", error_code=e.error_code)
    """

    error_code: str = "MF-ERR-000"
    why_it_happened: str = "An unexpected error occurred"
    how_to_fix: List[str] = ["Check the error message for details"]

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message)
        if error_code is not None:
            self.error_code = error_code
        if why_it_happened is not None:
            self.why_it_happened = why_it_happened
        if how_to_fix is not None:
            self.how_to_fix = how_to_fix

    @property
    def user_message(self) -> str:
        """Get the user-friendly error message."""
        return str(self)


# ============================================================================
# Analysis Exceptions
# ============================================================================


class AnalysisError(MeetingForgeError):
    """
    Analysis failure raised by host applications.

    The analyzers never raise it themselves: degenerate transcripts resolve
    to empty results. Hosts that require a usable summary (for example a
    non-empty one) raise it so callers can catch every MeetingForge failure
    through one hierarchy.

    Example
    -------
        result = service.generate_summary(transcript)
        if not result.summary:
            raise AnalysisError(f"Empty summary for meeting {transcript.meeting_id}")
    """

    error_code = "MF-ANA-000"
    why_it_happened = "The transcript or text could not be analyzed"
    how_to_fix = [
        "Check that the transcript segments contain text",
        "Verify the summary options are within range",
    ]


# ============================================================================
# Allocation Exceptions
# ============================================================================


class AllocationError(MeetingForgeError):
    """Base exception for task allocation failures."""

    error_code = "MF-ALLOC-000"
    why_it_happened = "A task could not be allocated"
    how_to_fix = ["Check the task description and the candidate roster"]


class NoCandidatesError(AllocationError):
    """
    Raised when a task is allocated against an empty candidate list.

    Example
    -------
        engine.allocate(TaskDraft(description="Review budget"), [])
        # Raises: NoCandidatesError("No candidates supplied for task ...")
    """

    error_code = "MF-ALLOC-001"
    why_it_happened = "The candidate roster passed to the allocator was empty"
    how_to_fix = [
        "Pass the meeting participants as candidates",
        "Skip allocation for meetings without participants",
    ]

    def __init__(self, description: str, **kwargs: Any) -> None:
        super().__init__(f"No candidates supplied for task: {description!r}", **kwargs)
        self.description = description


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(MeetingForgeError):
    """Raised when configuration cannot be loaded."""

    error_code = "MF-CFG-000"
    why_it_happened = "The configuration file could not be read or parsed"
    how_to_fix = [
        "Check meetingforge.yaml for YAML syntax errors",
        "Remove the file to fall back to built-in defaults",
    ]


class ConfigValidationError(ConfigurationError):
    """
    Raised when a configuration value is out of range.

    Attributes
    ----------
    field : str
        The configuration field that failed validation
    value : any
        The invalid value
    """

    error_code = "MF-CFG-001"
    why_it_happened = "A configuration value is outside its allowed range"
    how_to_fix = [
        "Check that weights of each scoring group sum to 1.0",
        "Check that lengths and counts are not negative",
        "Check that priority thresholds are in descending order",
    ]

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
