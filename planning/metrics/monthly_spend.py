"""
Monthly spend metrics pack.

A project's monthly spend is its per-day manpower cost times the number of
its working days falling in that month. Months are calendar months (1-12),
regardless of year.
"""
from typing import Dict

import pandas as pd

from planning.data.semantic import commitments_frame, working_days_frame


def monthly_spend_frame(registry) -> pd.DataFrame:
    """
    Spend per project and month.

    Returns DataFrame with:
    - project_code, month
    - working_days: working days of the project in that month
    - day_cost: per-day cost of the project (sum of wage * hours/day)
    - spend: working_days * day_cost
    """
    columns = ["project_code", "month", "working_days", "day_cost", "spend"]

    day_cost = commitments_frame(registry).groupby("project_code")["day_cost"].sum()
    days = working_days_frame(registry)
    if days.empty or day_cost.empty:
        return pd.DataFrame(columns=columns)

    per_month = (
        days.groupby(["project_code", "month"])
        .size()
        .rename("working_days")
        .reset_index()
    )
    per_month["day_cost"] = per_month["project_code"].map(day_cost).fillna(0).astype(int)
    per_month["spend"] = per_month["working_days"] * per_month["day_cost"]
    return per_month[columns]


def cumulative_monthly_spends(registry) -> Dict[int, int]:
    """
    Total spend per calendar month across all projects, ordered by month.

    Months without any spend are omitted.
    """
    df = monthly_spend_frame(registry)
    if df.empty:
        return {}

    totals = df.groupby("month")["spend"].sum().sort_index()
    return {int(month): int(spend) for month, spend in totals.items() if spend != 0}
