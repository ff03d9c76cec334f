"""
Project Planning System

Main entry point for Streamlit app.
"""
import streamlit as st
from pathlib import Path

# Page config must be first Streamlit command
st.set_page_config(
    page_title="Project Planning",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Add repo root to path
import sys
sys.path.insert(0, str(Path(__file__).parent))

from planning.config import config
from planning.data.loader import load_registry, get_data_status, RegistryLoadError
from planning.data.schema import SchemaValidationError
from planning.data.semantic import commitments_frame
from planning.metrics.budget import wage_at_most
from planning.metrics.monthly_spend import monthly_spend_frame
from planning.ui.charts import monthly_spend_bar, managed_budget_bar
from planning.ui.formatting import fmt_count, fmt_currency, fmt_rate, format_metric_df


@st.cache_data(ttl=config.cache_ttl_seconds)
def get_registry(data_dir: str):
    return load_registry(Path(data_dir))


def main():
    """Main app entry point."""

    st.title("Project Planning System")

    status = get_data_status()
    missing = [key for key, info in status.items() if not (info["parquet_exists"] or info["csv_exists"])]
    if missing:
        st.error("No planning data found!")
        st.markdown(f"""
        ### Setup Required

        Please place your data files in: `{config.processed_dir}`

        Missing tables: {", ".join(f"`{key}`" for key in missing)} (parquet or csv)
        """)
        st.info("Once data is in place, refresh this page.")
        return

    with st.spinner("Loading data..."):
        try:
            registry = get_registry(str(config.data_dir))
        except (SchemaValidationError, RegistryLoadError, FileNotFoundError, ValueError) as e:
            st.error(f"Error loading data: {e}")
            return

    st.caption(f"Planning year {registry.planning_year} · {registry.name}")

    if not registry.employees or not registry.projects:
        st.warning("No employees or projects have been set up...")
        return

    # Key metrics
    m1, m2, m3, m4 = st.columns(4)
    with m1:
        st.metric("Employees", fmt_count(len(registry.employees)))
    with m2:
        st.metric("Projects", fmt_count(len(registry.projects)))
    with m3:
        st.metric("Average Hourly Wage", fmt_rate(registry.average_hourly_wage()))
    with m4:
        st.metric("Manpower Budget", fmt_currency(registry.total_manpower_budget()))

    longest = registry.longest_project()
    st.markdown(f"**Longest project:** {longest} with {longest.num_working_days} working days")

    involved = sorted(registry.most_involved_employees())
    st.markdown(
        f"**Most involved** ({registry.max_project_involvement()} projects): "
        + ", ".join(str(e) for e in involved)
    )

    full_time = sorted(registry.full_time_employees())
    st.markdown(
        f"**Full-time** (≥ {config.full_time_hours_per_day} h/day): "
        + (", ".join(str(e) for e in full_time) or "none")
    )

    st.markdown("---")
    col1, col2 = st.columns(2)

    with col1:
        st.plotly_chart(monthly_spend_bar(registry.cumulative_monthly_spends()), use_container_width=True)

    with col2:
        junior_wage = st.number_input(
            "Junior wage threshold ($/hr)",
            min_value=0,
            value=config.junior_wage_threshold,
            step=1,
        )
        overview = registry.managed_budget_overview(wage_at_most(int(junior_wage)))
        st.plotly_chart(managed_budget_bar(overview, title="Managed budget (junior employees)"),
                        use_container_width=True)

    with st.expander("Commitments"):
        st.dataframe(format_metric_df(commitments_frame(registry)), use_container_width=True)

    with st.expander("Monthly spend by project"):
        st.dataframe(format_metric_df(monthly_spend_frame(registry)), use_container_width=True)


if __name__ == "__main__":
    main()
