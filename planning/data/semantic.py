"""
Semantic layer: flatten a registry into canonical frames for aggregation.

CRITICAL: All statistics over commitments must start from commitments_frame()
so that working days, wages and hours are joined the same way everywhere.
"""
import pandas as pd

COMMITMENT_COLUMNS = [
    "project_code",
    "employee_number",
    "hours_per_day",
    "hourly_wage",
    "working_days",
    "day_cost",
    "budget",
]

WORKING_DAY_COLUMNS = ["project_code", "work_date", "month"]


def commitments_frame(registry) -> pd.DataFrame:
    """
    One row per (project, employee) commitment.

    Returns DataFrame with:
    - project_code, employee_number
    - hours_per_day (accumulated commitment)
    - hourly_wage
    - working_days: number of working days of the project
    - day_cost: hourly_wage * hours_per_day
    - budget: working_days * day_cost
    """
    rows = []
    for project in registry.projects:
        num_days = project.num_working_days
        for employee, hours in project.committed_hours_per_day.items():
            rows.append({
                "project_code": project.code,
                "employee_number": employee.number,
                "hours_per_day": hours,
                "hourly_wage": employee.hourly_wage,
                "working_days": num_days,
            })

    if not rows:
        return pd.DataFrame({col: pd.Series(dtype="int64") for col in COMMITMENT_COLUMNS}).astype(
            {"project_code": "object"}
        )

    df = pd.DataFrame(rows)
    df["day_cost"] = df["hourly_wage"] * df["hours_per_day"]
    df["budget"] = df["working_days"] * df["day_cost"]
    return df[COMMITMENT_COLUMNS]


def working_days_frame(registry) -> pd.DataFrame:
    """
    One row per (project, working day).

    Returns DataFrame with project_code, work_date and calendar month (1-12).
    """
    rows = [
        {"project_code": project.code, "work_date": day}
        for project in registry.projects
        for day in project.working_days
    ]
    if not rows:
        return pd.DataFrame(columns=WORKING_DAY_COLUMNS)

    df = pd.DataFrame(rows)
    df["month"] = pd.to_datetime(df["work_date"]).dt.month
    return df[WORKING_DAY_COLUMNS]
