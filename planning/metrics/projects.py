"""
Project involvement metrics pack.

Single source of truth for: longest project, most involved employees.
"""
from typing import Set

import pandas as pd

from planning.data.semantic import commitments_frame


def longest_project(registry):
    """
    Project with the highest number of working days.

    Ties go to the project with the smallest code. Returns None without projects.
    """
    projects = registry.projects
    if not projects:
        return None

    days = pd.Series(
        [p.num_working_days for p in projects],
        index=[p.code for p in projects],
    ).sort_index()
    # idxmax returns the first label holding the maximum
    return registry.get_project(days.idxmax())


def project_involvement(registry) -> pd.Series:
    """
    Number of distinct projects each employee is committed to.

    Indexed by employee number, covering every employee (0 when uncommitted).
    """
    numbers = [e.number for e in registry.employees]
    df = commitments_frame(registry)
    counts = df.groupby("employee_number")["project_code"].nunique()
    return counts.reindex(numbers, fill_value=0).astype(int)


def max_project_involvement(registry) -> int:
    """Highest number of distinct projects any employee is committed to (0 when empty)."""
    involvement = project_involvement(registry)
    if involvement.empty:
        return 0
    return int(involvement.max())


def most_involved_employees(registry) -> Set:
    """
    All employees committed to the highest number of distinct projects.

    Every employee tied at the maximum is returned. Managed projects do not count.
    """
    involvement = project_involvement(registry)
    if involvement.empty:
        return set()

    top = set(involvement[involvement == involvement.max()].index.tolist())
    return {e for e in registry.employees if e.number in top}
