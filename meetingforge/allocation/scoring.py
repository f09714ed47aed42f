"""
Assignment Scoring.

Scores how well a candidate fits a task from four factors:

    factor        default weight   source
    ----------    --------------   ------------------------------------------
    skill              0.4         proficiency for task keywords (history, else roster)
    workload           0.3         active task count (history, else roster)
    performance        0.2         completion count and speed from history
    department         0.1         task keywords found in responsibilities

A factor without data scores ``default_factor_score`` (0.5).
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from meetingforge.core.config import AllocationConfig
from meetingforge.models.organization import AllocationContext, Participant


@dataclass(frozen=True)
class CandidateScore:
    """Per-factor breakdown of one candidate's assignment score."""

    participant: Participant
    skill: float
    workload: float
    performance: float
    department: float
    total: float


class AssignmentScorer:
    """Score candidates against a task using organizational and historical data."""

    def __init__(
        self,
        context: Optional[AllocationContext] = None,
        config: Optional[AllocationConfig] = None,
    ) -> None:
        self.context = context or AllocationContext()
        self.config = config or AllocationConfig()

    def skill_score(self, keywords: Sequence[str], participant: Participant) -> float:
        """Mean proficiency over the task keywords the candidate has.

        Proficiencies come from the task history, or from the roster record
        for candidates without history.
        """
        stats = self.context.historical_data.stats_for(participant.id)
        proficiency = stats.skill_proficiency if stats else participant.skill_proficiency

        scores = [proficiency[k] for k in keywords if k in proficiency]
        if not scores:
            return self.config.default_factor_score
        return sum(scores) / len(scores)

    def workload_score(self, participant: Participant) -> float:
        """1 for an idle candidate, 0 at or above the optimal workload."""
        stats = self.context.historical_data.stats_for(participant.id)
        workload = stats.current_workload if stats else participant.current_workload
        return 1.0 - min(workload / self.config.optimal_workload, 1.0)

    def performance_score(self, participant: Participant) -> float:
        """Mean of a completion-rate proxy and a speed proxy."""
        stats = self.context.historical_data.stats_for(participant.id)
        if stats is None:
            return self.config.default_factor_score

        completed = stats.completed_tasks
        completion_rate = completed / (completed + 1)
        speed = min(
            self.config.baseline_completion_hours
            / max(stats.average_completion_time, 1.0),
            1.0,
        )
        return (completion_rate + speed) / 2

    def department_score(self, keywords: Sequence[str], participant: Participant) -> float:
        """Share of task keywords contained in the department responsibilities."""
        department = self.context.organizational_structure.department_for_role(
            participant.role
        )
        if department is None:
            return self.config.default_factor_score

        responsibilities = [r.lower() for r in department.responsibilities]
        matches = sum(
            1 for k in keywords if any(k in resp for resp in responsibilities)
        )
        return matches / max(len(keywords), 1)

    def score(self, keywords: Sequence[str], participant: Participant) -> CandidateScore:
        cfg = self.config
        skill = self.skill_score(keywords, participant)
        workload = self.workload_score(participant)
        performance = self.performance_score(participant)
        department = self.department_score(keywords, participant)
        total = (
            cfg.skill_weight * skill
            + cfg.workload_weight * workload
            + cfg.performance_weight * performance
            + cfg.department_weight * department
        )
        return CandidateScore(
            participant=participant,
            skill=skill,
            workload=workload,
            performance=performance,
            department=department,
            total=total,
        )

    def score_all(
        self, keywords: Sequence[str], candidates: Sequence[Participant]
    ) -> List[CandidateScore]:
        """Score every candidate, keeping candidate order."""
        return [self.score(keywords, c) for c in candidates]


def select_best(scores: Sequence[CandidateScore]) -> CandidateScore:
    """Highest total wins; on a tie the earlier candidate is kept."""
    best = scores[0]
    for candidate in scores[1:]:
        if candidate.total > best.total:
            best = candidate
    return best
