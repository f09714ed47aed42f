"""
Action Item Models.

TaskDraft is what transcript scanning produces; ActionItem is the allocated
record handed to the task tracker, which later updates its status.
"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Priority(str, Enum):
    """Action item priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TaskStatus(str, Enum):
    """Action item lifecycle state."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskDraft(BaseModel):
    """An extracted task description that has not been allocated yet."""

    model_config = {"frozen": True}

    description: str
    meeting_id: str = "unknown"


class ActionItem(BaseModel):
    """An allocated task."""

    id: str = Field(default_factory=lambda: f"task_{uuid.uuid4().hex[:12]}")
    meeting_id: str = "unknown"
    description: str
    assignee: str
    priority: Priority
    due_date: datetime
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_open(self) -> bool:
        """True while the task still needs work."""
        return self.status in (TaskStatus.PENDING, TaskStatus.IN_PROGRESS)

    def is_overdue(self, now: datetime) -> bool:
        """True for open tasks whose due date has passed."""
        return self.is_open() and self.due_date < now
