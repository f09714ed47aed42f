"""
Task Allocation Engine.

Turns task drafts into allocated action items:

    TaskDraft ──→ keywords ──→ AssignmentScorer ──→ best candidate
         │                                               │
         └──────→ PriorityCalculator ──→ priority ──→ due date
                                                         ↓
                                                    ActionItem

Usage:
    engine = TaskAllocationEngine(context)
    item = engine.allocate(TaskDraft(description="Review budget"), participants)
"""

from datetime import datetime
from typing import List, Optional, Sequence

from meetingforge.allocation.extraction import ActionItemExtractor
from meetingforge.allocation.keywords import extract_keywords
from meetingforge.allocation.priority import PriorityCalculator
from meetingforge.allocation.scoring import AssignmentScorer, CandidateScore, select_best
from meetingforge.core.config import AllocationConfig
from meetingforge.core.exceptions import NoCandidatesError
from meetingforge.core.logging import get_logger
from meetingforge.models.organization import AllocationContext, Participant
from meetingforge.models.tasks import ActionItem, TaskDraft
from meetingforge.models.transcript import Transcript

logger = get_logger(__name__)


class TaskAllocationEngine:
    """Assign tasks to the best-fit participant and schedule them."""

    def __init__(
        self,
        context: Optional[AllocationContext] = None,
        config: Optional[AllocationConfig] = None,
        extractor: Optional[ActionItemExtractor] = None,
    ) -> None:
        self.context = context or AllocationContext()
        self.config = config or AllocationConfig()
        self.scorer = AssignmentScorer(self.context, self.config)
        self.priorities = PriorityCalculator(self.config)
        self.extractor = extractor or ActionItemExtractor()

    def score_candidates(
        self, task: TaskDraft, candidates: Sequence[Participant]
    ) -> List[CandidateScore]:
        """Per-factor scores of every candidate, in candidate order."""
        return self.scorer.score_all(extract_keywords(task.description), candidates)

    def allocate(
        self,
        task: TaskDraft,
        candidates: Sequence[Participant],
        now: Optional[datetime] = None,
    ) -> ActionItem:
        """
        Allocate one task.

        Args:
            task: Task to allocate
            candidates: Possible assignees; also used for stakeholder seniority
            now: Reference time for the due date and timestamps

        Returns:
            Pending ActionItem assigned to the highest scoring candidate

        Raises:
            NoCandidatesError: If candidates is empty
        """
        if not candidates:
            raise NoCandidatesError(task.description)

        now = now or datetime.now()
        scores = self.score_candidates(task, candidates)
        best = select_best(scores)
        priority = self.priorities.priority(task.description, candidates)
        due_date = self.priorities.due_date(priority, now)

        logger.info(
            "Task allocated",
            meeting_id=task.meeting_id,
            assignee=best.participant.id,
            score=f"{best.total:.3f}",
            priority=priority.value,
            candidates=len(candidates),
        )
        return ActionItem(
            meeting_id=task.meeting_id,
            description=task.description,
            assignee=best.participant.id,
            priority=priority,
            due_date=due_date,
            created_at=now,
            updated_at=now,
        )

    def allocate_tasks_from_meeting(
        self,
        transcript: Transcript,
        participants: Sequence[Participant],
        now: Optional[datetime] = None,
    ) -> List[ActionItem]:
        """Extract action items from a transcript and allocate each of them.

        Raises:
            NoCandidatesError: If action items were found but no participants given
        """
        now = now or datetime.now()
        drafts = self.extractor.extract(transcript)
        return [self.allocate(draft, participants, now) for draft in drafts]
