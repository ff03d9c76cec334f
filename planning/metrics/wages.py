"""
Wage metrics pack.

Single source of truth for: average hourly wage, full-time employees.
"""
from typing import Optional, Set

import numpy as np

from planning.config import config, EMPTY_AVERAGE
from planning.data.semantic import commitments_frame


def average_hourly_wage(registry) -> float:
    """
    Arithmetic mean of the hourly wage of all employees.

    Returns EMPTY_AVERAGE (0.0) when the registry has no employees.
    """
    wages = np.array([e.hourly_wage for e in registry.employees], dtype=float)
    if wages.size == 0:
        return EMPTY_AVERAGE
    return float(wages.mean())


def full_time_employees(registry, threshold: Optional[int] = None) -> Set:
    """
    Employees committed at least `threshold` hours/day on at least one project.

    The threshold defaults to config.full_time_hours_per_day (8).
    """
    if threshold is None:
        threshold = config.full_time_hours_per_day

    df = commitments_frame(registry)
    numbers = set(df.loc[df["hours_per_day"] >= threshold, "employee_number"].tolist())
    return {e for e in registry.employees if e.number in numbers}
