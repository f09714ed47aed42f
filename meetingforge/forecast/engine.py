"""
Predictive Analytics Engine.

Accumulates meetings, action items and the team roster, and derives
heuristic predictions from them:

    ┌────────────┐
    │  Meetings  │──┐     ┌──────────────────────────┐     ┌──────────────────┐
    ├────────────┤  ├────→│ PredictiveAnalyticsEngine│────→│ PredictionReport │
    │ActionItems │──┤     └──────────────────────────┘     └──────────────────┘
    ├────────────┤  │
    │   Roster   │──┘
    └────────────┘

Predictions are rule based, not learned; confidence and probability values
are fixed per rule. One engine instance belongs to one caller; it is not
shared between threads.
"""

import math
import uuid
from collections import defaultdict
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional, Sequence

from meetingforge.core.config import ForecastConfig
from meetingforge.core.logging import get_logger
from meetingforge.models.meeting import Meeting
from meetingforge.models.organization import OrganizationalStructure, Participant
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
from meetingforge.models.tasks import ActionItem, Priority, TaskStatus

logger = get_logger(__name__)

# Days until a prediction of each rule expires
EXPIRY_DAYS = {
    "resource": 7,
    "timeline": 14,
    "overdue_tasks": 3,
    "low_meeting_output": 7,
    "opportunity": 30,
    "workload": 5,
}
HIGH_PRIORITY_CONCENTRATION = 3


def calculate_prediction_confidence(data_points: int, accuracy: float) -> float:
    """Confidence from data volume and observed accuracy, capped at 0.95."""
    return min(0.95, data_points / 100 * accuracy + 0.3)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def _unique(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


class PredictiveAnalyticsEngine:
    """Rule-based forecasting over accumulated meeting data."""

    def __init__(
        self,
        config: Optional[ForecastConfig] = None,
        organization: Optional[OrganizationalStructure] = None,
    ) -> None:
        self.config = config or ForecastConfig()
        self.organization = organization or OrganizationalStructure()
        self.meetings: List[Meeting] = []
        self.action_items: List[ActionItem] = []
        self.participants: List[Participant] = []

    def add_data(self, meeting: Meeting, action_items: Sequence[ActionItem]) -> None:
        """Record a meeting together with the action items it produced."""
        self.meetings.append(meeting)
        self.action_items.extend(action_items)
        logger.debug(
            "Forecast data added", meeting_id=meeting.id, action_items=len(action_items)
        )

    def add_participants(self, participants: Sequence[Participant]) -> None:
        """Add roster members; a participant id already known is replaced."""
        known = {p.id: p for p in self.participants}
        for participant in participants:
            known[participant.id] = participant
        self.participants = list(known.values())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _items_for_meeting(self, meeting_id: str) -> List[ActionItem]:
        return [item for item in self.action_items if item.meeting_id == meeting_id]

    def _due_within(self, now: datetime, days: float) -> List[ActionItem]:
        horizon = now + timedelta(days=days)
        return [item for item in self.action_items if now < item.due_date <= horizon]

    def _departments_of(self, user_ids: Iterable[str]) -> List[str]:
        users = set(user_ids)
        return [
            department.name or department.id
            for department in self.organization.departments
            if users.intersection(department.members)
        ]

    def _participants_of(self, meetings: Iterable[Meeting]) -> List[str]:
        return _unique(p for meeting in meetings for p in meeting.participants)

    def _pending_count(self, user_id: str) -> int:
        return sum(
            1
            for item in self.action_items
            if item.assignee == user_id and item.status == TaskStatus.PENDING
        )

    # ------------------------------------------------------------------
    # Predictions
    # ------------------------------------------------------------------

    def _resource_predictions(self, now: datetime) -> List[Prediction]:
        cfg = self.config
        upcoming = [
            item
            for item in self._due_within(now, cfg.resource_horizon_days)
            if item.is_open()
        ]
        if len(upcoming) <= cfg.resource_task_threshold:
            return []

        users = _unique(item.assignee for item in upcoming)
        return [
            ResourcePrediction(
                id=_new_id("pred"),
                title="High Resource Demand Predicted",
                description=(
                    f"{len(upcoming)} tasks are due in the next "
                    f"{cfg.resource_horizon_days} days, indicating potential "
                    "resource constraints."
                ),
                confidence=0.8,
                probability=0.7,
                impact=Impact.HIGH,
                timeframe=Timeframe.SHORT_TERM,
                affected_users=users,
                affected_departments=self._departments_of(users),
                recommendations=[
                    "Consider redistributing workload",
                    "Prioritize tasks by business impact",
                    "Evaluate need for additional resources",
                ],
                created_at=now,
                expires_at=now + timedelta(days=EXPIRY_DAYS["resource"]),
                task_count=len(upcoming),
            )
        ]

    def _timeline_predictions(self, now: datetime) -> List[Prediction]:
        cfg = self.config
        since = now - timedelta(days=cfg.recent_meeting_days)
        recent = [m for m in self.meetings if m.start_time > since]
        if len(recent) <= cfg.recent_meeting_threshold:
            return []

        average = sum(m.duration_minutes for m in recent) / len(recent)
        if average <= cfg.long_meeting_minutes:
            return []

        users = self._participants_of(recent)
        return [
            TimelinePrediction(
                id=_new_id("pred"),
                title="Meeting Duration Optimization Opportunity",
                description=(
                    f"Recent meetings are averaging {round(average)} minutes, "
                    f"above the optimal {cfg.long_meeting_minutes:g} minutes."
                ),
                confidence=0.7,
                probability=0.8,
                impact=Impact.MEDIUM,
                timeframe=Timeframe.IMMEDIATE,
                affected_users=users,
                affected_departments=self._departments_of(users),
                recommendations=[
                    "Set stricter time limits for meetings",
                    "Use time-boxing techniques",
                    "Prepare detailed agendas in advance",
                ],
                created_at=now,
                expires_at=now + timedelta(days=EXPIRY_DAYS["timeline"]),
                average_duration_minutes=average,
            )
        ]

    def _risk_predictions(self, now: datetime) -> List[Prediction]:
        cfg = self.config
        predictions: List[Prediction] = []

        overdue = [item for item in self.action_items if item.is_overdue(now)]
        if len(overdue) > cfg.overdue_task_threshold:
            users = _unique(item.assignee for item in overdue)
            predictions.append(
                RiskPrediction(
                    id=_new_id("pred"),
                    title="Task Completion Risk Detected",
                    description=(
                        f"{len(overdue)} tasks are overdue, indicating potential "
                        "project delays and resource allocation issues."
                    ),
                    confidence=0.9,
                    probability=0.8,
                    impact=Impact.HIGH,
                    timeframe=Timeframe.IMMEDIATE,
                    affected_users=users,
                    affected_departments=self._departments_of(users),
                    recommendations=[
                        "Review and reprioritize overdue tasks",
                        "Assess resource availability",
                        "Communicate delays to stakeholders",
                        "Implement catch-up plans",
                    ],
                    created_at=now,
                    expires_at=now + timedelta(days=EXPIRY_DAYS["overdue_tasks"]),
                    risk_factor="overdue_tasks",
                    task_count=len(overdue),
                )
            )

        low_output = [
            m
            for m in self.meetings
            if len(self._items_for_meeting(m.id)) < cfg.low_output_action_items
        ]
        if len(low_output) > cfg.low_output_meeting_threshold:
            users = self._participants_of(low_output)
            predictions.append(
                RiskPrediction(
                    id=_new_id("pred"),
                    title="Meeting Effectiveness Declining",
                    description=(
                        f"{len(low_output)} recent meetings produced few action "
                        "items, indicating declining meeting productivity."
                    ),
                    confidence=0.6,
                    probability=0.7,
                    impact=Impact.MEDIUM,
                    timeframe=Timeframe.SHORT_TERM,
                    affected_users=users,
                    affected_departments=self._departments_of(users),
                    recommendations=[
                        "Review meeting formats and agendas",
                        "Implement meeting effectiveness metrics",
                        "Provide facilitation training",
                        "Consider canceling low-value meetings",
                    ],
                    created_at=now,
                    expires_at=now + timedelta(days=EXPIRY_DAYS["low_meeting_output"]),
                    risk_factor="low_meeting_output",
                    task_count=sum(
                        len(self._items_for_meeting(m.id)) for m in low_output
                    ),
                )
            )
        return predictions

    def _opportunity_predictions(self, now: datetime) -> List[Prediction]:
        cfg = self.config
        productive = [
            m
            for m in self.meetings
            if len(self._items_for_meeting(m.id)) >= cfg.productive_action_items
            and m.duration_minutes <= cfg.long_meeting_minutes
        ]
        if len(productive) <= cfg.productive_meeting_threshold:
            return []

        users = self._participants_of(productive)
        return [
            OpportunityPrediction(
                id=_new_id("pred"),
                title="High-Performance Meeting Pattern Identified",
                description=(
                    f"{len(productive)} meetings achieved high output with optimal "
                    "duration, creating a replicable success pattern."
                ),
                confidence=0.8,
                probability=0.9,
                impact=Impact.MEDIUM,
                timeframe=Timeframe.IMMEDIATE,
                affected_users=users,
                affected_departments=self._departments_of(users),
                recommendations=[
                    "Document successful meeting format",
                    "Train other teams on this approach",
                    "Standardize agenda templates",
                    "Share best practices across organization",
                ],
                created_at=now,
                expires_at=now + timedelta(days=EXPIRY_DAYS["opportunity"]),
                meeting_count=len(productive),
            )
        ]

    def _workload_predictions(self, now: datetime) -> List[Prediction]:
        predictions: List[Prediction] = []
        for participant in self.participants:
            active = self._pending_count(participant.id)
            if active <= self.config.high_workload_tasks:
                continue
            predictions.append(
                WorkloadPrediction(
                    id=_new_id("pred"),
                    title="High Workload Risk for User",
                    description=(
                        f"User has {active} active tasks, which may lead to "
                        "burnout or missed deadlines."
                    ),
                    confidence=0.7,
                    probability=0.6,
                    impact=Impact.MEDIUM,
                    timeframe=Timeframe.SHORT_TERM,
                    affected_users=[participant.id],
                    affected_departments=self._departments_of([participant.id]),
                    recommendations=[
                        "Redistribute some tasks to other team members",
                        "Extend deadlines for non-urgent tasks",
                        "Provide additional support or resources",
                        "Schedule workload review meeting",
                    ],
                    created_at=now,
                    expires_at=now + timedelta(days=EXPIRY_DAYS["workload"]),
                    user_id=participant.id,
                    active_tasks=active,
                )
            )
        return predictions

    # ------------------------------------------------------------------
    # Forecasts
    # ------------------------------------------------------------------

    def resource_forecasts(self, now: datetime) -> List[ResourceForecast]:
        """Personnel and time demand over the capacity horizon.

        A forecast is only emitted when demand exceeds capacity.
        """
        cfg = self.config
        upcoming = self._due_within(now, cfg.capacity_horizon_days)
        horizon = now + timedelta(days=cfg.capacity_horizon_days)
        forecasts: List[ResourceForecast] = []

        capacity = len(self.participants)
        demand = math.ceil(len(upcoming) / cfg.tasks_per_person)
        if demand - capacity > 0:
            forecasts.append(
                ResourceForecast(
                    id=_new_id("forecast"),
                    resource_type="personnel",
                    current_capacity=capacity,
                    predicted_demand=demand,
                    capacity_gap=demand - capacity,
                    timeframe=horizon,
                    confidence=0.7,
                    recommendations=[
                        "Consider temporary contractors",
                        "Redistribute workload across team",
                        "Extend non-critical deadlines",
                        "Prioritize high-impact tasks",
                    ],
                )
            )

        task_hours = len(upcoming) * cfg.hours_per_task
        available_hours = capacity * cfg.working_hours_per_day * cfg.working_days
        if task_hours - available_hours > 0:
            forecasts.append(
                ResourceForecast(
                    id=_new_id("forecast"),
                    resource_type="time",
                    current_capacity=available_hours,
                    predicted_demand=task_hours,
                    capacity_gap=task_hours - available_hours,
                    timeframe=horizon,
                    confidence=0.8,
                    recommendations=[
                        "Extend project timelines",
                        "Reduce scope of non-critical tasks",
                        "Increase team size temporarily",
                        "Implement overtime or weekend work",
                    ],
                )
            )
        return forecasts

    def workload_trend(self, user_id: str, now: datetime) -> str:
        """Compare tasks created in the last week with the week before."""
        week = timedelta(days=self.config.workload_horizon_days)
        created = [i.created_at for i in self.action_items if i.assignee == user_id]
        recent = sum(1 for c in created if c > now - week)
        previous = sum(1 for c in created if now - 2 * week < c <= now - week)

        if recent > previous * 1.2:
            return "increasing"
        if recent < previous * 0.8:
            return "decreasing"
        return "stable"

    def burnout_risk(self, predicted_workload: int) -> Impact:
        if predicted_workload <= self.config.burnout_low_max:
            return Impact.LOW
        if predicted_workload <= self.config.burnout_medium_max:
            return Impact.MEDIUM
        return Impact.HIGH

    def workload_forecasts(self, now: datetime) -> List[WorkloadForecast]:
        """One forecast per roster member."""
        horizon_days = self.config.workload_horizon_days
        upcoming = self._due_within(now, horizon_days)
        forecasts = []
        for participant in self.participants:
            current = self._pending_count(participant.id)
            due_soon = sum(1 for item in upcoming if item.assignee == participant.id)
            predicted = current + due_soon
            risk = self.burnout_risk(predicted)
            forecasts.append(
                WorkloadForecast(
                    user_id=participant.id,
                    current_workload=current,
                    predicted_workload=predicted,
                    trend=self.workload_trend(participant.id, now),
                    burnout_risk=risk,
                    recommendations=_WORKLOAD_RECOMMENDATIONS[risk],
                    timeframe=now + timedelta(days=horizon_days),
                )
            )
        return forecasts

    def _average_completion_days(self, completed: Sequence[ActionItem]) -> float:
        if not completed:
            return self.config.default_completion_days
        days = [
            math.ceil((item.updated_at - item.created_at).total_seconds() / 86400)
            for item in completed
        ]
        return sum(days) / len(days)

    def timeline_forecasts(self, now: datetime) -> List[ProjectTimelineForecast]:
        """Completion forecasts for each meeting that still has pending items.

        Action items are grouped by meeting id; a meeting stands in for a
        project.
        """
        groups: Dict[str, List[ActionItem]] = defaultdict(list)
        for item in self.action_items:
            groups[item.meeting_id].append(item)

        forecasts = []
        for project_id, items in groups.items():
            pending = [i for i in items if i.status == TaskStatus.PENDING]
            if not pending:
                continue
            completed = [i for i in items if i.status == TaskStatus.COMPLETED]
            completion_rate = len(completed) / (len(completed) + len(pending))
            average_days = self._average_completion_days(completed)
            deadlines = [i.due_date for i in items]

            overdue = [i for i in items if i.is_overdue(now)]
            high_priority = [
                i for i in items if i.priority in (Priority.HIGH, Priority.URGENT)
            ]
            risk_factors = []
            strategies = []
            if overdue:
                risk_factors.append(f"{len(overdue)} overdue tasks")
                strategies.append("Immediately address overdue tasks")
                strategies.append("Reassess priorities and deadlines")
            if len(high_priority) > HIGH_PRIORITY_CONCENTRATION:
                risk_factors.append("High concentration of high-priority tasks")
            strategies.append("Implement daily progress tracking")
            strategies.append("Consider additional resources if needed")

            forecasts.append(
                ProjectTimelineForecast(
                    id=_new_id("timeline"),
                    project_id=project_id,
                    current_deadline=max(deadlines),
                    predicted_completion=now
                    + timedelta(days=len(pending) * average_days),
                    confidence=min(0.9, completion_rate + 0.3),
                    risk_factors=risk_factors,
                    mitigation_strategies=strategies,
                )
            )
        return forecasts

    def _meeting_type_stats(self) -> Dict[str, Dict[str, Any]]:
        """Average duration, participants and peak action items per meeting type."""
        groups: Dict[str, List[Meeting]] = defaultdict(list)
        for meeting in self.meetings:
            groups[meeting.meeting_type or "general"].append(meeting)

        stats = {}
        for meeting_type, meetings in groups.items():
            stats[meeting_type] = {
                "average_duration": sum(m.duration_minutes for m in meetings)
                / len(meetings),
                "participants": self._participants_of(meetings),
                "action_items": max(
                    len(self._items_for_meeting(m.id)) for m in meetings
                ),
            }
        return stats

    def _agenda_advice(self, action_items: int) -> List[str]:
        if action_items == 0:
            return ["Consider if meeting is necessary", "Focus on information sharing only"]
        if action_items > self.config.split_meeting_action_items:
            return ["Break into multiple focused meetings", "Prioritize top 3 action items"]
        return []

    def meeting_optimizations(self) -> List[MeetingOptimization]:
        """Shorter, smaller meetings for meeting types that run long on average."""
        cfg = self.config
        optimizations = []
        for meeting_type, stats in self._meeting_type_stats().items():
            average = stats["average_duration"]
            if average <= cfg.optimize_above_minutes:
                continue
            recommended = max(
                cfg.minimum_meeting_minutes, average * cfg.duration_reduction_factor
            )
            optimizations.append(
                MeetingOptimization(
                    id=_new_id("opt"),
                    meeting_type=meeting_type,
                    current_duration=average,
                    recommended_duration=recommended,
                    participant_optimization=stats["participants"][
                        : cfg.max_meeting_participants
                    ],
                    agenda_optimization=self._agenda_advice(stats["action_items"]),
                    expected_outcome=(
                        f"Reduce meeting duration by {round(average - recommended)} "
                        "minutes while maintaining effectiveness"
                    ),
                    confidence=0.7,
                )
            )
        return optimizations

    def generate_predictions(self, now: Optional[datetime] = None) -> PredictionReport:
        """Evaluate every rule against the accumulated data."""
        now = now or datetime.now()
        predictions: List[Prediction] = []
        predictions.extend(self._resource_predictions(now))
        predictions.extend(self._timeline_predictions(now))
        predictions.extend(self._risk_predictions(now))
        predictions.extend(self._opportunity_predictions(now))
        predictions.extend(self._workload_predictions(now))

        report = PredictionReport(
            predictions=predictions,
            resource_forecasts=self.resource_forecasts(now),
            workload_forecasts=self.workload_forecasts(now),
            timeline_forecasts=self.timeline_forecasts(now),
            meeting_optimizations=self.meeting_optimizations(),
        )
        logger.info(
            "Predictions generated",
            meetings=len(self.meetings),
            action_items=len(self.action_items),
            predictions=len(report.predictions),
            optimizations=len(report.meeting_optimizations),
        )
        return report


_WORKLOAD_RECOMMENDATIONS = {
    Impact.HIGH: [
        "Immediate workload reduction required",
        "Consider task delegation to other team members",
        "Schedule workload review with manager",
    ],
    Impact.MEDIUM: [
        "Monitor workload closely",
        "Consider extending non-urgent deadlines",
    ],
    Impact.LOW: [
        "Workload is manageable",
        "Continue current pace",
    ],
}
