"""
Organization and History Models.

Reference data supplied by the org directory and the task tracker. The
allocation engine reads these records and never mutates them.

Invariants: proficiency scores lie in [0, 1]; workloads are non-negative
counts of active tasks.
"""

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


def _check_proficiency(value: Dict[str, float]) -> Dict[str, float]:
    for skill, score in value.items():
        if not 0.0 <= score <= 1.0:
            raise ValueError(f"proficiency for {skill!r} must be in [0, 1], got {score}")
    return {skill.lower(): score for skill, score in value.items()}


class Participant(BaseModel):
    """A candidate assignee (meeting participant)."""

    model_config = {"frozen": True}

    id: str
    role: str = "user"
    name: Optional[str] = None
    skill_proficiency: Dict[str, float] = Field(default_factory=dict)
    current_workload: int = Field(0, ge=0, description="Active tasks")

    @field_validator("skill_proficiency")
    @classmethod
    def validate_proficiency(cls, value: Dict[str, float]) -> Dict[str, float]:
        """Reject scores outside [0, 1] and lower-case skill names."""
        return _check_proficiency(value)


class Department(BaseModel):
    """Department with the responsibilities used for alignment scoring."""

    id: str
    name: str = ""
    members: List[str] = Field(default_factory=list)
    responsibilities: List[str] = Field(default_factory=list)


class Role(BaseModel):
    """Role inside a department."""

    id: str
    name: str = ""
    department_id: str
    responsibilities: List[str] = Field(default_factory=list)
    skill_tags: List[str] = Field(default_factory=list)


class ReportingLine(BaseModel):
    """Manager/employee relationship."""

    manager_id: str
    employee_id: str
    relationship_type: Literal["direct", "matrix", "project"] = "direct"


class OrganizationalStructure(BaseModel):
    """Departments, roles and reporting lines."""

    departments: List[Department] = Field(default_factory=list)
    roles: List[Role] = Field(default_factory=list)
    reporting_lines: List[ReportingLine] = Field(default_factory=list)

    def role_by_id(self, role_id: str) -> Optional[Role]:
        """Find a role by id."""
        return next((r for r in self.roles if r.id == role_id), None)

    def department_by_id(self, department_id: str) -> Optional[Department]:
        """Find a department by id."""
        return next((d for d in self.departments if d.id == department_id), None)

    def department_for_role(self, role_id: str) -> Optional[Department]:
        """Resolve role → department, or None when either is unknown."""
        role = self.role_by_id(role_id)
        if role is None:
            return None
        return self.department_by_id(role.department_id)

    def managers_of(self, employee_id: str) -> List[str]:
        """Manager ids of an employee across all relationship types."""
        return [
            line.manager_id
            for line in self.reporting_lines
            if line.employee_id == employee_id
        ]


class UserTaskStats(BaseModel):
    """Historical task statistics of one user."""

    user_id: str
    completed_tasks: int = Field(0, ge=0)
    average_completion_time: float = Field(
        24.0, gt=0.0, description="Average completion time in hours"
    )
    skill_proficiency: Dict[str, float] = Field(default_factory=dict)
    current_workload: int = Field(0, ge=0)
    preferred_task_types: List[str] = Field(default_factory=list)

    @field_validator("skill_proficiency")
    @classmethod
    def validate_proficiency(cls, value: Dict[str, float]) -> Dict[str, float]:
        """Reject scores outside [0, 1] and lower-case skill names."""
        return _check_proficiency(value)


class DepartmentTaskStats(BaseModel):
    """Aggregate task statistics of a department."""

    department_id: str
    total_tasks: int = Field(0, ge=0)
    average_completion_time: float = Field(24.0, gt=0.0)
    common_task_types: List[str] = Field(default_factory=list)


class ProjectTaskStats(BaseModel):
    """Aggregate task statistics of a project."""

    project_id: str
    total_tasks: int = Field(0, ge=0)
    team_members: List[str] = Field(default_factory=list)
    current_phase: str = ""
    deadline: Optional[datetime] = None


class HistoricalTaskData(BaseModel):
    """Per-user, per-department and per-project task history."""

    user_task_history: Dict[str, UserTaskStats] = Field(default_factory=dict)
    department_task_history: Dict[str, DepartmentTaskStats] = Field(default_factory=dict)
    project_task_history: Dict[str, ProjectTaskStats] = Field(default_factory=dict)

    def stats_for(self, user_id: str) -> Optional[UserTaskStats]:
        """Historical stats of a user, if any."""
        return self.user_task_history.get(user_id)


class AllocationContext(BaseModel):
    """Reference data the allocation engine scores against."""

    organizational_structure: OrganizationalStructure = Field(
        default_factory=OrganizationalStructure
    )
    historical_data: HistoricalTaskData = Field(default_factory=HistoricalTaskData)
