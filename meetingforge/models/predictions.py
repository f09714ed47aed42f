"""
Prediction Models.

Predictions are tagged variants: every variant carries the shared fields
plus only the fields relevant to its kind, and the ``kind`` field
discriminates them when validating plain dictionaries:

    report = PredictionReport.model_validate(payload)
    for prediction in report.predictions:
        if prediction.kind == "workload":
            print(prediction.user_id, prediction.active_tasks)
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field


class Impact(str, Enum):
    """Expected impact of a predicted event."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Timeframe(str, Enum):
    """When a predicted event is expected to matter."""

    IMMEDIATE = "immediate"
    SHORT_TERM = "short_term"
    MEDIUM_TERM = "medium_term"
    LONG_TERM = "long_term"


class _PredictionBase(BaseModel):
    """Fields shared by every prediction kind."""

    model_config = {"frozen": True}

    id: str
    title: str
    description: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    probability: float = Field(..., ge=0.0, le=1.0)
    impact: Impact
    timeframe: Timeframe
    affected_users: List[str] = Field(default_factory=list)
    affected_departments: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """True once the prediction is past its expiry."""
        return now >= self.expires_at


class ResourcePrediction(_PredictionBase):
    """Many open tasks fall due within the resource horizon."""

    kind: Literal["resource"] = "resource"
    task_count: int = Field(..., ge=0)


class TimelinePrediction(_PredictionBase):
    """Recent meetings run longer than the optimal length."""

    kind: Literal["timeline"] = "timeline"
    average_duration_minutes: float = Field(..., ge=0.0)


class RiskPrediction(_PredictionBase):
    """Overdue tasks or meetings that produce little output."""

    kind: Literal["risk"] = "risk"
    risk_factor: Literal["overdue_tasks", "low_meeting_output"]
    task_count: int = Field(0, ge=0)


class OpportunityPrediction(_PredictionBase):
    """A replicable pattern of short, productive meetings."""

    kind: Literal["opportunity"] = "opportunity"
    meeting_count: int = Field(..., ge=0)


class WorkloadPrediction(_PredictionBase):
    """A single user carries too many pending tasks."""

    kind: Literal["workload"] = "workload"
    user_id: str
    active_tasks: int = Field(..., ge=0)


Prediction = Annotated[
    Union[
        ResourcePrediction,
        TimelinePrediction,
        RiskPrediction,
        OpportunityPrediction,
        WorkloadPrediction,
    ],
    Field(discriminator="kind"),
]


class ResourceForecast(BaseModel):
    """Predicted demand against current capacity for one resource."""

    model_config = {"frozen": True}

    id: str
    resource_type: Literal["personnel", "time"]
    current_capacity: float
    predicted_demand: float
    capacity_gap: float = Field(..., ge=0.0)
    timeframe: datetime
    confidence: float = Field(..., ge=0.0, le=1.0)
    recommendations: List[str] = Field(default_factory=list)


class WorkloadForecast(BaseModel):
    """Current and predicted task load of one user."""

    model_config = {"frozen": True}

    user_id: str
    current_workload: int = Field(..., ge=0)
    predicted_workload: int = Field(..., ge=0)
    trend: Literal["increasing", "stable", "decreasing"]
    burnout_risk: Impact
    recommendations: List[str] = Field(default_factory=list)
    timeframe: datetime


class ProjectTimelineForecast(BaseModel):
    """Predicted completion of the open items of one project."""

    model_config = {"frozen": True}

    id: str
    project_id: str
    current_deadline: datetime
    predicted_completion: datetime
    confidence: float = Field(..., ge=0.0, le=1.0)
    risk_factors: List[str] = Field(default_factory=list)
    mitigation_strategies: List[str] = Field(default_factory=list)


class MeetingOptimization(BaseModel):
    """Suggested changes for one meeting type that tends to run long."""

    model_config = {"frozen": True}

    id: str
    meeting_type: str
    current_duration: float = Field(..., ge=0.0, description="Average minutes")
    recommended_duration: float = Field(..., ge=0.0)
    participant_optimization: List[str] = Field(default_factory=list)
    agenda_optimization: List[str] = Field(default_factory=list)
    expected_outcome: str
    confidence: float = Field(..., ge=0.0, le=1.0)


class PredictionReport(BaseModel):
    """Everything generate_predictions() produces in one call."""

    predictions: List[Prediction] = Field(default_factory=list)
    resource_forecasts: List[ResourceForecast] = Field(default_factory=list)
    workload_forecasts: List[WorkloadForecast] = Field(default_factory=list)
    timeline_forecasts: List[ProjectTimelineForecast] = Field(default_factory=list)
    meeting_optimizations: List[MeetingOptimization] = Field(default_factory=list)

    def of_kind(self, kind: str) -> List[Prediction]:
        """Predictions whose kind tag equals ``kind``."""
        return [p for p in self.predictions if p.kind == kind]
