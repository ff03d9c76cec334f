"""
Manpower budget metrics pack.

Single source of truth for: total manpower budget, managed budget per employee.

Budget of one commitment = working days of the project * hours/day * hourly wage.
"""
from typing import Callable, Dict, Optional

from planning.config import config
from planning.data.semantic import commitments_frame


def total_manpower_budget(registry) -> int:
    """Budget summed over every commitment of every project."""
    df = commitments_frame(registry)
    return int(df["budget"].sum())


def managed_budget(registry, employee) -> int:
    """Budget summed over the commitments on projects managed by the employee."""
    codes = {p.code for p in registry.managed_projects(employee)}
    if not codes:
        return 0
    df = commitments_frame(registry)
    return int(df.loc[df["project_code"].isin(codes), "budget"].sum())


def managed_budget_overview(registry, predicate: Callable) -> Dict:
    """
    Managed budget of every employee that satisfies the predicate.

    Employees failing the predicate are left out entirely. Ordered by number.
    """
    df = commitments_frame(registry)
    budget_by_project = df.groupby("project_code")["budget"].sum()

    overview = {}
    for employee in registry.employees:
        if not predicate(employee):
            continue
        codes = [p.code for p in registry.managed_projects(employee)]
        overview[employee] = int(budget_by_project.reindex(codes, fill_value=0).sum())
    return overview


def wage_at_most(limit: Optional[int] = None) -> Callable:
    """
    Predicate selecting employees whose hourly wage is at most `limit`.

    Defaults to config.junior_wage_threshold (junior employees).
    """
    if limit is None:
        limit = config.junior_wage_threshold
    return lambda employee: employee.hourly_wage <= limit
