"""
Shared pytest fixtures and configuration for MeetingForge tests.

This file is automatically discovered by pytest and provides fixtures
that can be used across all test files.

Fixture Organization
--------------------
- **temp_dir**: Temporary directory for config files
- **now**: Fixed reference time for due dates and forecasts
- **budget_text**: Short meeting text with action items and praise
- **make_transcript**: Builder for transcripts from plain strings
- **participants**: Candidate roster with and without history
- **allocation_context**: Organizational structure and task history
"""

import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable, Generator, List, Optional

import pytest

from meetingforge.core.logging import configure_logging
from meetingforge.models import (
    AllocationContext,
    Department,
    HistoricalTaskData,
    OrganizationalStructure,
    Participant,
    Role,
    Transcript,
    TranscriptSegment,
    UserTaskStats,
)

BUDGET_TEXT = (
    "We need to review the budget by Friday. "
    "The team did great work this quarter. "
    "I think we should schedule a follow-up."
)


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Keep test output free of console log lines."""
    configure_logging(level="WARNING", console=False)


# ============================================================================
# Path and Time Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory (cleaned up after test)
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time."""
    return datetime(2024, 3, 4, 9, 0, 0)


# ============================================================================
# Transcript Fixtures
# ============================================================================


@pytest.fixture
def budget_text() -> str:
    """Three sentence meeting excerpt."""
    return BUDGET_TEXT


@pytest.fixture
def make_transcript() -> Callable[..., Transcript]:
    """Build a transcript with one segment per string.

    Example:
        def test_summary(make_transcript):
            transcript = make_transcript(["Hello team.", "Let's start."])
    """

    def _make(
        texts: List[str],
        meeting_id: Optional[str] = "meeting-1",
        speaker: str = "Alice",
    ) -> Transcript:
        segments = [
            TranscriptSegment(
                speaker=speaker,
                text=text,
                start_time=float(i * 10),
                end_time=float(i * 10 + 9),
                confidence=0.9,
            )
            for i, text in enumerate(texts)
        ]
        return Transcript.from_segments(segments, meeting_id=meeting_id)

    return _make


# ============================================================================
# Allocation Fixtures
# ============================================================================


@pytest.fixture
def participants() -> List[Participant]:
    """Candidate A has a strong budget history, candidate B has none."""
    return [
        Participant(id="user-a", role="analyst", name="Ana"),
        Participant(id="user-b", role="user", name="Ben"),
    ]


@pytest.fixture
def historical_data() -> HistoricalTaskData:
    """History for candidate A only."""
    return HistoricalTaskData(
        user_task_history={
            "user-a": UserTaskStats(
                user_id="user-a",
                completed_tasks=10,
                average_completion_time=5.0,
                skill_proficiency={"budget": 0.9},
                current_workload=1,
            )
        }
    )


@pytest.fixture
def organization() -> OrganizationalStructure:
    """Finance department owning the analyst role."""
    return OrganizationalStructure(
        departments=[
            Department(
                id="finance",
                name="Finance",
                members=["user-a"],
                responsibilities=["Budget planning", "Expense review"],
            )
        ],
        roles=[Role(id="analyst", name="Analyst", department_id="finance")],
    )


@pytest.fixture
def allocation_context(
    organization: OrganizationalStructure, historical_data: HistoricalTaskData
) -> AllocationContext:
    """Context combining the finance organization and candidate A's history."""
    return AllocationContext(
        organizational_structure=organization, historical_data=historical_data
    )
