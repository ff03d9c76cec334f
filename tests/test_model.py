"""
Tests for the employee and project entities.
"""
import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from planning.data.model import Employee, Project


class TestEmployee:
    """Tests for employee identity and ordering."""

    def test_equality_by_number(self):
        """Employees with the same number are equal whatever their other fields."""
        assert Employee(1, "Ann", 20) == Employee(1, "Annie", 99)
        assert Employee(1, "Ann", 20) != Employee(2, "Ann", 20)

    def test_hash_by_number(self):
        """A set keeps one employee per number."""
        staff = {Employee(1, "Ann", 20), Employee(1, "Annie", 99), Employee(2, "Bo", 30)}
        assert len(staff) == 2

    def test_ordering_by_number(self):
        """Sorting follows the employee number."""
        staff = sorted([Employee(3, "Cy"), Employee(1, "Ann"), Employee(2, "Bo")])
        assert [e.number for e in staff] == [1, 2, 3]

    def test_negative_wage_rejected(self):
        """Hourly wages cannot be negative."""
        with pytest.raises(ValueError):
            Employee(1, "Ann", -1)

    def test_str(self):
        assert str(Employee(7, "Ann", 20)) == "Ann(7)"


class TestProject:
    """Tests for project identity and working days."""

    def test_equality_and_ordering_by_code(self):
        """Projects compare and sort on their code."""
        a = Project("A", "Alpha")
        b = Project("B", "Beta")
        assert a == Project("A", "Other name")
        assert sorted([b, a]) == [a, b]

    def test_working_days_exclude_weekends(self):
        """Two calendar weeks Monday to Friday hold 10 working days."""
        project = Project("P1", "Pilot", date(2024, 1, 1), date(2024, 1, 12))
        assert project.num_working_days == 10
        assert all(day.weekday() < 5 for day in project.working_days)

    def test_working_days_inclusive_and_ordered(self):
        """Start and end dates are included, days come in calendar order."""
        project = Project("P1", "Pilot", date(2024, 1, 3), date(2024, 1, 8))
        assert project.working_days == [
            date(2024, 1, 3),
            date(2024, 1, 4),
            date(2024, 1, 5),
            date(2024, 1, 8),
        ]

    def test_weekend_only_range(self):
        """A range covering only a weekend has no working days."""
        project = Project("P1", "Pilot", date(2024, 1, 6), date(2024, 1, 7))
        assert project.working_days == []
        assert project.num_working_days == 0

    def test_inverted_range(self):
        """An end date before the start date yields no working days."""
        project = Project("P1", "Pilot", date(2024, 2, 1), date(2024, 1, 1))
        assert project.num_working_days == 0

    def test_add_commitment_accumulates(self):
        """Commitments for the same employee add up."""
        ann = Employee(1, "Ann", 20)
        project = Project("P1", "Pilot", date(2024, 1, 1), date(2024, 1, 12))
        project.add_commitment(ann, 3)
        assert project.add_commitment(ann, 2) == 5
        assert project.committed_hours_per_day == {ann: 5}
