"""Tests for priority and due date derivation."""

from datetime import timedelta

import pytest

from meetingforge.allocation.priority import PriorityCalculator
from meetingforge.models import Participant, Priority


def _roster(*roles):
    return [Participant(id=f"p{i}", role=role) for i, role in enumerate(roles)]


@pytest.fixture
def calculator() -> PriorityCalculator:
    """Calculator with default weights."""
    return PriorityCalculator()


class TestPriority:
    """Tests for score and priority."""

    def test_urgent_with_executive(self, calculator):
        """Test urgency plus an executive resolves to urgent."""
        description = "Urgent: finish the report before the deadline"
        roster = _roster("engineer", "executive")

        assert calculator.score(description, roster) == pytest.approx(0.85)
        assert calculator.priority(description, roster) is Priority.URGENT

    @pytest.mark.parametrize(
        "description,roles,expected",
        [
            ("Urgent fix", ("manager",), Priority.HIGH),
            ("Urgent fix", ("engineer",), Priority.HIGH),
            ("Review slides", ("director",), Priority.MEDIUM),
            ("Review slides", ("lead",), Priority.LOW),
            ("Review slides", (), Priority.LOW),
        ],
    )
    def test_priority_table(self, calculator, description, roles, expected):
        """Test priorities for combinations of urgency and seniority."""
        assert calculator.priority(description, _roster(*roles)) is expected

    def test_stakeholder_roles_case_insensitive(self, calculator):
        """Test role names are compared case-insensitively."""
        assert calculator.stakeholder_score(_roster("Director")) == 1.0
        assert calculator.stakeholder_score(_roster("Lead")) == 0.7
        assert calculator.stakeholder_score(_roster("analyst")) == 0.4

    @pytest.mark.parametrize(
        "score,expected",
        [
            (0.8, Priority.URGENT),
            (0.79, Priority.HIGH),
            (0.6, Priority.HIGH),
            (0.4, Priority.MEDIUM),
            (0.39, Priority.LOW),
        ],
    )
    def test_thresholds(self, calculator, score, expected):
        """Test threshold boundaries are inclusive."""
        assert calculator.priority_for_score(score) is expected


class TestDueDate:
    """Tests for due_date."""

    @pytest.mark.parametrize(
        "priority,days",
        [
            (Priority.URGENT, 1),
            (Priority.HIGH, 3),
            (Priority.MEDIUM, 7),
            (Priority.LOW, 14),
        ],
    )
    def test_offsets(self, calculator, now, priority, days):
        """Test fixed day offsets per priority."""
        assert calculator.due_date(priority, now) == now + timedelta(days=days)
