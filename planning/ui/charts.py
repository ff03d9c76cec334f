"""
Standard chart wrappers using Plotly.
"""
import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, Optional

from planning.ui.formatting import fmt_month


# =============================================================================
# CHART THEME
# =============================================================================

CHART_COLORS = {
    "primary": "#1f77b4",
}

CHART_TEMPLATE = "plotly_white"

DEFAULT_LAYOUT = {
    "template": CHART_TEMPLATE,
    "font": {"family": "Arial, sans-serif", "size": 12},
    "margin": {"l": 50, "r": 30, "t": 40, "b": 50},
    "hoverlabel": {"bgcolor": "white"},
}


def apply_layout(fig: go.Figure, **kwargs) -> go.Figure:
    """Apply standard layout to figure."""
    layout = {**DEFAULT_LAYOUT, **kwargs}
    fig.update_layout(**layout)
    return fig


# =============================================================================
# BAR CHARTS
# =============================================================================

def horizontal_bar(df: pd.DataFrame, x: str, y: str,
                   title: str = "", color: Optional[str] = None,
                   text: Optional[str] = None) -> go.Figure:
    """
    Create horizontal bar chart.
    """
    fig = px.bar(
        df, x=x, y=y, orientation="h",
        title=title,
        color=color,
        text=text,
    )

    fig.update_traces(textposition="outside")
    fig.update_layout(yaxis={"categoryorder": "total ascending"})

    return apply_layout(fig)


def monthly_spend_bar(spends: Dict[int, int], title: str = "Cumulative monthly spend") -> go.Figure:
    """
    Column chart of spend per calendar month, in calendar order.
    """
    months = sorted(spends)
    fig = go.Figure(go.Bar(
        x=[fmt_month(m) for m in months],
        y=[spends[m] for m in months],
        marker_color=CHART_COLORS["primary"],
        text=[f"${spends[m]:,.0f}" for m in months],
        textposition="outside",
    ))

    fig.update_layout(title=title, xaxis_title="Month", yaxis_title="Spend")

    return apply_layout(fig)


def managed_budget_bar(overview: Dict, title: str = "Managed budget") -> go.Figure:
    """
    Horizontal bar of managed budget per employee.
    """
    df = pd.DataFrame(
        [{"employee": str(e), "managed_budget": b} for e, b in overview.items()],
        columns=["employee", "managed_budget"],
    )
    return horizontal_bar(df, x="managed_budget", y="employee", title=title, text="managed_budget")
