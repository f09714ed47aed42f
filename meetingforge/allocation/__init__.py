"""
Task allocation: action item extraction, assignee scoring and scheduling.

    from meetingforge.allocation import TaskAllocationEngine
"""

from meetingforge.allocation.engine import TaskAllocationEngine
from meetingforge.allocation.extraction import ActionItemExtractor
from meetingforge.allocation.keywords import extract_keywords
from meetingforge.allocation.priority import PriorityCalculator
from meetingforge.allocation.scoring import AssignmentScorer, CandidateScore

__all__ = [
    "ActionItemExtractor",
    "AssignmentScorer",
    "CandidateScore",
    "PriorityCalculator",
    "TaskAllocationEngine",
    "extract_keywords",
]
