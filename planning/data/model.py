"""
Core planning entities: employees and projects.

Employees are identified by their number, projects by their code. Both
compare, hash and sort on that identity only, so two objects with the same
identity but different field values are the same entity as far as sets and
dictionaries are concerned.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from functools import total_ordering
from typing import Dict, List, Set

import pandas as pd


@total_ordering
@dataclass(eq=False)
class Employee:
    """An employee with an hourly wage who may manage projects."""
    number: int
    name: str = ""
    hourly_wage: int = 0
    # Codes of the projects this employee manages; resolved by the registry
    managed_project_codes: Set[str] = field(default_factory=set)

    def __post_init__(self):
        if self.hourly_wage < 0:
            raise ValueError(f"Hourly wage of employee {self.number} cannot be negative: {self.hourly_wage}")

    def __eq__(self, other):
        if not isinstance(other, Employee):
            return NotImplemented
        return self.number == other.number

    def __lt__(self, other):
        if not isinstance(other, Employee):
            return NotImplemented
        return self.number < other.number

    def __hash__(self):
        return hash(self.number)

    def __str__(self):
        return f"{self.name}({self.number})"


@total_ordering
@dataclass(eq=False)
class Project:
    """A project running over an inclusive date range with committed manpower."""
    code: str
    name: str = ""
    start_date: date = date(2000, 1, 1)
    end_date: date = date(2000, 1, 1)
    committed_hours_per_day: Dict[Employee, int] = field(default_factory=dict)

    def __eq__(self, other):
        if not isinstance(other, Project):
            return NotImplemented
        return self.code == other.code

    def __lt__(self, other):
        if not isinstance(other, Project):
            return NotImplemented
        return self.code < other.code

    def __hash__(self):
        return hash(self.code)

    def __str__(self):
        return f"{self.name}({self.code})"

    @property
    def working_days(self) -> List[date]:
        """All weekdays between start and end date (inclusive), in calendar order."""
        if self.end_date < self.start_date:
            return []
        return [ts.date() for ts in pd.bdate_range(self.start_date, self.end_date)]

    @property
    def num_working_days(self) -> int:
        return len(self.working_days)

    def add_commitment(self, employee: Employee, hours_per_day: int) -> int:
        """
        Add hours/day for an employee on top of any existing commitment.
        Returns the accumulated commitment.
        """
        total = self.committed_hours_per_day.get(employee, 0) + hours_per_day
        self.committed_hours_per_day[employee] = total
        return total
