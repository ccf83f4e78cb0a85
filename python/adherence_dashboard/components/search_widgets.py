"""
Search Widgets Component for the Patient Adherence Dashboard

The patient list's search box (with search and clear actions) and the
condition / adherence-level filter selectors.
"""

import streamlit as st
from typing import Dict, Any, List
import logging

from services.patient_store import ALL_CONDITIONS

logger = logging.getLogger(__name__)

CONDITIONS = ["diabetes", "hypertension", "asthma", "cardiovascular"]

CONDITION_FILTER_OPTIONS = [ALL_CONDITIONS] + [c.capitalize() for c in CONDITIONS]

ADHERENCE_FILTER_OPTIONS = [
    "All Adherence Levels",
    "High (80%+)",
    "Medium (50-79%)",
    "Low (<50%)"
]

def render_search_bar(key: str = "patient_search") -> Dict[str, Any]:
    """
    Render the search input with search and clear buttons

    Args:
        key: Unique key prefix for the widgets

    Returns:
        Dictionary with 'term', 'search' and 'clear' entries
    """
    try:
        col1, col2, col3 = st.columns([4, 1, 1])

        with col1:
            term = st.text_input(
                "Search patients",
                placeholder="Search by name, ID or condition",
                key=f"{key}_input",
                label_visibility="collapsed"
            )

        with col2:
            search = st.button("🔍 Search", key=f"{key}_search", type="primary")

        with col3:
            clear = st.button("Clear", key=f"{key}_clear", on_click=_clear_search_input, args=(f"{key}_input",))

        return {'term': term.strip().lower(), 'search': search, 'clear': clear}

    except Exception as e:
        logger.error(f"Error rendering search bar: {e}")
        st.error("Error displaying search bar")
        return {'term': '', 'search': False, 'clear': False}

def _clear_search_input(input_key: str) -> None:
    st.session_state[input_key] = ""

def render_filters(on_change=None, key: str = "patient_filters") -> Dict[str, str]:
    """
    Render condition and adherence level selectors

    Args:
        on_change: Callback invoked when either selector changes
        key: Unique key prefix for the widgets

    Returns:
        Dictionary with the selected 'condition' and 'adherence_level'
    """
    try:
        col1, col2 = st.columns(2)

        with col1:
            condition = st.selectbox(
                "Condition",
                options=CONDITION_FILTER_OPTIONS,
                key=f"{key}_condition",
                on_change=on_change
            )

        with col2:
            adherence_level = st.selectbox(
                "Adherence Level",
                options=ADHERENCE_FILTER_OPTIONS,
                key=f"{key}_adherence",
                on_change=on_change
            )

        return {'condition': condition, 'adherence_level': adherence_level}

    except Exception as e:
        logger.error(f"Error rendering search filters: {e}")
        st.error("Error displaying search filters")
        return {'condition': ALL_CONDITIONS, 'adherence_level': ADHERENCE_FILTER_OPTIONS[0]}
