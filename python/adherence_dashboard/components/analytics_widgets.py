"""
Analytics Widgets Component for the Patient Adherence Dashboard

Summary metric cards and the adherence tier chart, using Streamlit's native
metric and charting elements.
"""

import streamlit as st
import pandas as pd
from typing import List, Optional, Union
import logging

from services.models import Patient
from services.stats import DashboardStats, adherence_breakdown

logger = logging.getLogger(__name__)

def render_metric_card(title: str, value: Union[int, float, str],
                      help_text: str = None) -> None:
    """
    Render a metric card with title and value

    Args:
        title: Metric title
        value: Primary metric value
        help_text: Optional help text
    """
    try:
        with st.container():
            if help_text:
                st.metric(label=title, value=value, help=help_text)
            else:
                st.metric(label=title, value=value)

    except Exception as e:
        logger.error(f"Error rendering metric card: {e}")
        st.error("Error displaying metric")

def render_stats(stats: DashboardStats) -> None:
    """Write the four summary figures into the dashboard's metric row"""
    lines = stats.summary_lines()
    columns = st.columns(len(lines))

    for column, line in zip(columns, lines):
        title, value = line.split(": ", 1)
        with column:
            render_metric_card(title, value)

def render_chart_widget(data: pd.DataFrame, title: str, x_col: str, y_col: str,
                       height: int = 300) -> None:
    """
    Render a bar chart from a two-column frame

    Args:
        data: DataFrame containing chart data
        title: Chart title
        x_col: Column for x-axis
        y_col: Column for y-axis
        height: Chart height in pixels
    """
    try:
        if data.empty or data[y_col].sum() == 0:
            st.info(f"No data available for {title}")
            return

        st.markdown(f"**{title}**")
        st.bar_chart(data.set_index(x_col)[y_col], height=height)

    except Exception as e:
        logger.error(f"Error rendering chart widget: {e}")
        st.error(f"Error displaying {title}")

def render_adherence_breakdown(patients: List[Patient]) -> None:
    """Bar chart of patient counts per adherence tier"""
    render_chart_widget(
        adherence_breakdown(patients),
        title="Patients by Adherence Level",
        x_col="Tier",
        y_col="Patients"
    )
