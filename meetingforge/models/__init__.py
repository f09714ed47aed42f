"""
Data records exchanged between MeetingForge and its host application.

    from meetingforge.models import Transcript, SummaryResult, ActionItem
"""

from meetingforge.models.meeting import Meeting
from meetingforge.models.organization import (
    AllocationContext,
    Department,
    DepartmentTaskStats,
    HistoricalTaskData,
    OrganizationalStructure,
    Participant,
    ProjectTaskStats,
    ReportingLine,
    Role,
    UserTaskStats,
)
from meetingforge.models.predictions import (
    Impact,
    MeetingOptimization,
    OpportunityPrediction,
    Prediction,
    PredictionReport,
    ProjectTimelineForecast,
    ResourceForecast,
    ResourcePrediction,
    RiskPrediction,
    Timeframe,
    TimelinePrediction,
    WorkloadForecast,
    WorkloadPrediction,
)
from meetingforge.models.summary import (
    Sentiment,
    SummaryOptions,
    SummaryResult,
    SummaryStyle,
)
from meetingforge.models.tasks import ActionItem, Priority, TaskDraft, TaskStatus
from meetingforge.models.transcript import Transcript, TranscriptSegment

__all__ = [
    "ActionItem",
    "AllocationContext",
    "Department",
    "DepartmentTaskStats",
    "HistoricalTaskData",
    "Impact",
    "Meeting",
    "MeetingOptimization",
    "OpportunityPrediction",
    "OrganizationalStructure",
    "Participant",
    "Prediction",
    "PredictionReport",
    "Priority",
    "ProjectTaskStats",
    "ProjectTimelineForecast",
    "ReportingLine",
    "ResourceForecast",
    "ResourcePrediction",
    "RiskPrediction",
    "Role",
    "Sentiment",
    "SummaryOptions",
    "SummaryResult",
    "SummaryStyle",
    "TaskDraft",
    "TaskStatus",
    "Timeframe",
    "TimelinePrediction",
    "Transcript",
    "TranscriptSegment",
    "UserTaskStats",
    "WorkloadForecast",
    "WorkloadPrediction",
]
