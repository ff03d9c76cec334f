"""
Planning statistics report: a plain-text summary of a registry.
"""
from typing import List, Optional

from planning.config import config
from planning.metrics.budget import wage_at_most
from planning.ui.formatting import fmt_currency, fmt_month, fmt_rate


def _employee_list(employees) -> str:
    return ", ".join(str(e) for e in sorted(employees))


def planning_statistics_report(registry, junior_wage: Optional[int] = None) -> str:
    """
    Render the seven planning statistics of a registry.

    junior_wage is the highest hourly wage counted as junior for the managed
    budget overview (defaults to config.junior_wage_threshold).
    """
    if junior_wage is None:
        junior_wage = config.junior_wage_threshold

    lines: List[str] = [
        f"Project Statistics of '{registry.name}' in the year {registry.planning_year}",
    ]
    employees = registry.employees
    projects = registry.projects
    if not employees or not projects:
        lines.append("No employees or projects have been set up...")
        return "\n".join(lines) + "\n"

    lines.append(f"{len(employees)} employees have been assigned to {len(projects)} projects:")
    lines.append("")

    lines.append(f"1. The average hourly wage of all employees is {fmt_rate(registry.average_hourly_wage())}")

    longest = registry.longest_project()
    lines.append(
        f"2. The longest project is '{longest}' with {longest.num_working_days} available working days"
    )

    lines.append(
        f"3. The following employees have the broadest assignment in no less than "
        f"{registry.max_project_involvement()} different projects: "
        f"[{_employee_list(registry.most_involved_employees())}]"
    )

    lines.append(f"4. The total budget of committed project manpower is {fmt_currency(registry.total_manpower_budget())}")

    lines.append(f"5. Below is an overview of total managed budget by junior employees (hourly wage <= {junior_wage}):")
    overview = registry.managed_budget_overview(wage_at_most(junior_wage))
    for employee, managed in overview.items():
        lines.append(f"   {employee} = {fmt_currency(managed)}")

    lines.append(
        f"6. Below is an overview of employees working at least {config.full_time_hours_per_day} hours per day: "
        f"[{_employee_list(registry.full_time_employees())}]"
    )

    lines.append("7. Below is an overview of cumulative monthly project spends:")
    for month, spend in registry.cumulative_monthly_spends().items():
        lines.append(f"   {fmt_month(month)} = {fmt_currency(spend)}")

    return "\n".join(lines) + "\n"
