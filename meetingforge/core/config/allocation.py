"""
Task allocation configuration.

Weights of the assignment score and the priority score, priority thresholds,
due-date offsets and the role names treated as senior stakeholders.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List

from meetingforge.core.exceptions import ConfigValidationError


@dataclass
class AllocationConfig:
    """Assignment scoring and priority derivation settings."""

    # Assignment score weights
    skill_weight: float = 0.4
    workload_weight: float = 0.3
    performance_weight: float = 0.2
    department_weight: float = 0.1

    optimal_workload: int = 5  # Active tasks at which the workload score hits 0
    baseline_completion_hours: float = 24.0
    default_factor_score: float = 0.5  # Used when a factor has no data

    # Priority score weights
    urgency_weight: float = 0.4
    stakeholder_weight: float = 0.3
    project_phase_weight: float = 0.2
    dependency_weight: float = 0.1

    urgent_threshold: float = 0.8
    high_threshold: float = 0.6
    medium_threshold: float = 0.4

    due_days: Dict[str, int] = field(
        default_factory=lambda: {"urgent": 1, "high": 3, "medium": 7, "low": 14}
    )

    executive_roles: List[str] = field(default_factory=lambda: ["executive", "director"])
    manager_roles: List[str] = field(default_factory=lambda: ["manager", "lead"])
    executive_score: float = 1.0
    manager_score: float = 0.7
    default_stakeholder_score: float = 0.4

    # Placeholders until project phase and dependency signals exist
    project_phase_score: float = 0.5
    dependency_score: float = 0.5

    def __post_init__(self) -> None:
        """Validate allocation configuration."""
        self._check_weights(
            "assignment",
            self.skill_weight,
            self.workload_weight,
            self.performance_weight,
            self.department_weight,
        )
        self._check_weights(
            "priority",
            self.urgency_weight,
            self.stakeholder_weight,
            self.project_phase_weight,
            self.dependency_weight,
        )
        if not self.urgent_threshold >= self.high_threshold >= self.medium_threshold:
            raise ConfigValidationError(
                "priority thresholds must satisfy urgent >= high >= medium",
                field="allocation.urgent_threshold",
                value=(self.urgent_threshold, self.high_threshold, self.medium_threshold),
            )
        if self.optimal_workload <= 0:
            raise ConfigValidationError(
                "allocation.optimal_workload must be positive",
                field="allocation.optimal_workload",
                value=self.optimal_workload,
            )
        if self.baseline_completion_hours <= 0:
            raise ConfigValidationError(
                "allocation.baseline_completion_hours must be positive",
                field="allocation.baseline_completion_hours",
                value=self.baseline_completion_hours,
            )
        missing = {"urgent", "high", "medium", "low"} - set(self.due_days)
        if missing:
            raise ConfigValidationError(
                f"allocation.due_days is missing priorities: {sorted(missing)}",
                field="allocation.due_days",
                value=self.due_days,
            )

    @staticmethod
    def _check_weights(group: str, *weights: float) -> None:
        total = sum(weights)
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ConfigValidationError(
                f"{group} weights must sum to 1.0, got {total:.3f}",
                field=f"allocation.{group}_weights",
                value=total,
            )
