"""
Predictive analytics configuration.

Horizons (in days) and the thresholds at which the predictive engine emits
resource, timeline, risk, opportunity and workload predictions and meeting
optimizations.
"""

from dataclasses import dataclass

from meetingforge.core.exceptions import ConfigValidationError


@dataclass
class ForecastConfig:
    """Thresholds of the predictive analytics engine."""

    resource_horizon_days: int = 30
    resource_task_threshold: int = 10  # Open tasks due within the horizon

    recent_meeting_days: int = 7
    recent_meeting_threshold: int = 5
    long_meeting_minutes: float = 60.0

    overdue_task_threshold: int = 3
    low_output_action_items: int = 2  # Meetings below this count are low output
    low_output_meeting_threshold: int = 5

    productive_action_items: int = 3
    productive_meeting_threshold: int = 3

    high_workload_tasks: int = 8

    capacity_horizon_days: int = 14
    tasks_per_person: int = 3
    hours_per_task: float = 2.0
    working_hours_per_day: float = 8.0
    working_days: int = 10

    workload_horizon_days: int = 7
    burnout_low_max: int = 5
    burnout_medium_max: int = 8
    default_completion_days: float = 3.0

    # Meeting optimizations, per meeting type
    optimize_above_minutes: float = 45.0  # Average duration that triggers advice
    duration_reduction_factor: float = 0.8
    minimum_meeting_minutes: float = 30.0
    max_meeting_participants: int = 8
    split_meeting_action_items: int = 5  # More items than this: split the meeting

    def __post_init__(self) -> None:
        """Validate forecast configuration."""
        for name in (
            "tasks_per_person",
            "working_days",
            "max_meeting_participants",
        ):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigValidationError(
                    f"forecast.{name} must be positive",
                    field=f"forecast.{name}",
                    value=value,
                )
        if self.burnout_low_max > self.burnout_medium_max:
            raise ConfigValidationError(
                "forecast.burnout_low_max must not exceed forecast.burnout_medium_max",
                field="forecast.burnout_low_max",
                value=self.burnout_low_max,
            )
        if not 0.0 < self.duration_reduction_factor <= 1.0:
            raise ConfigValidationError(
                "forecast.duration_reduction_factor must be in (0, 1]",
                field="forecast.duration_reduction_factor",
                value=self.duration_reduction_factor,
            )
        if self.minimum_meeting_minutes < 0:
            raise ConfigValidationError(
                "forecast.minimum_meeting_minutes must not be negative",
                field="forecast.minimum_meeting_minutes",
                value=self.minimum_meeting_minutes,
            )
