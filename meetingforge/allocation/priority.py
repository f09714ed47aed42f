"""
Priority and due date derivation.

The priority score combines time urgency, stakeholder seniority, project
phase and dependencies. Phase and dependency have no data source yet and
contribute configured constants.
"""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from meetingforge.allocation.keywords import has_urgency_keyword
from meetingforge.core.config import AllocationConfig
from meetingforge.models.organization import Participant
from meetingforge.models.tasks import Priority


class PriorityCalculator:
    """Derive a task priority and its due date."""

    def __init__(self, config: Optional[AllocationConfig] = None) -> None:
        self.config = config or AllocationConfig()

    def urgency_score(self, description: str) -> float:
        return 1.0 if has_urgency_keyword(description) else 0.0

    def stakeholder_score(self, participants: Sequence[Participant]) -> float:
        """Score the most senior role present among the participants."""
        roles = {p.role.lower() for p in participants}
        if roles & {r.lower() for r in self.config.executive_roles}:
            return self.config.executive_score
        if roles & {r.lower() for r in self.config.manager_roles}:
            return self.config.manager_score
        return self.config.default_stakeholder_score

    def score(self, description: str, participants: Sequence[Participant]) -> float:
        cfg = self.config
        return (
            cfg.urgency_weight * self.urgency_score(description)
            + cfg.stakeholder_weight * self.stakeholder_score(participants)
            + cfg.project_phase_weight * cfg.project_phase_score
            + cfg.dependency_weight * cfg.dependency_score
        )

    def priority_for_score(self, score: float) -> Priority:
        """Map a priority score onto the configured thresholds."""
        if score >= self.config.urgent_threshold:
            return Priority.URGENT
        if score >= self.config.high_threshold:
            return Priority.HIGH
        if score >= self.config.medium_threshold:
            return Priority.MEDIUM
        return Priority.LOW

    def priority(self, description: str, participants: Sequence[Participant]) -> Priority:
        return self.priority_for_score(self.score(description, participants))

    def due_date(self, priority: Priority, now: Optional[datetime] = None) -> datetime:
        """``now`` plus the fixed day offset of the priority."""
        now = now or datetime.now()
        return now + timedelta(days=self.config.due_days[priority.value])
