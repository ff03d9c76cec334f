"""
Consistent number and display formatting.
"""
import calendar

import pandas as pd
from typing import Union


# =============================================================================
# NUMBER FORMATTERS
# =============================================================================

def fmt_currency(value: Union[float, int, None], decimals: int = 0) -> str:
    """Format as currency: $1,234 or $1,234.56"""
    if value is None or pd.isna(value):
        return "—"
    if decimals == 0:
        return f"${value:,.0f}"
    return f"${value:,.{decimals}f}"


def fmt_hours(value: Union[float, int, None]) -> str:
    """Format hours: 1,234.5"""
    if value is None or pd.isna(value):
        return "—"
    return f"{value:,.1f}"


def fmt_rate(value: Union[float, int, None], decimals: int = 2) -> str:
    """Format hourly rate: $25.50/hr"""
    if value is None or pd.isna(value):
        return "—"
    return f"${value:,.{decimals}f}/hr"


def fmt_count(value: Union[float, int, None]) -> str:
    """Format count: 1,234"""
    if value is None or pd.isna(value):
        return "—"
    return f"{int(value):,}"


def fmt_month(month: Union[int, None]) -> str:
    """Format calendar month number: 3 -> March"""
    if month is None or pd.isna(month) or not 1 <= int(month) <= 12:
        return "—"
    return calendar.month_name[int(month)]


# =============================================================================
# DATAFRAME FORMATTING
# =============================================================================

def format_metric_df(df: pd.DataFrame) -> pd.DataFrame:
    """
    Format a metrics dataframe for display.

    Applies appropriate formatting to known column types.
    """
    df = df.copy()

    currency_cols = ["budget", "day_cost", "spend"]
    hours_cols = ["hours_per_day"]
    rate_cols = ["hourly_wage"]
    count_cols = ["working_days"]

    for col in df.columns:
        if col in currency_cols:
            df[col] = df[col].apply(fmt_currency)
        elif col in hours_cols:
            df[col] = df[col].apply(fmt_hours)
        elif col in rate_cols:
            df[col] = df[col].apply(fmt_rate)
        elif col in count_cols:
            df[col] = df[col].apply(fmt_count)
        elif col == "month":
            df[col] = df[col].apply(fmt_month)

    return df
