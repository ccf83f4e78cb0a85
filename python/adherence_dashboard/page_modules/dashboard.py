"""
Dashboard Page for the Patient Adherence Dashboard

Landing page with:
- Summary statistics over every stored patient
- Adherence level breakdown
- Navigation to the add form and the patient list
- Health news feed
"""

import streamlit as st
import logging

from services import session_manager
from services.stats import compute_stats
from components import analytics_widgets, news_cards

logger = logging.getLogger(__name__)

def render():
    """Entry point called by main.py"""
    render_dashboard()

def render_dashboard():
    """Main entry point for the dashboard page"""
    store = session_manager.get_store()
    view = session_manager.get_view()

    st.title("🩺 Patient Adherence Dashboard")
    st.markdown("Track medication adherence and spot patients who need follow-up")

    analytics_widgets.render_stats(compute_stats(store.all()))

    col1, col2, _ = st.columns([1, 1, 2])
    with col1:
        st.button("➕ Add Patient", key="openAddPage", type="primary", on_click=view.show_add_patient)
    with col2:
        st.button("👥 View All Patients", key="openAllPatientsPage", on_click=view.show_all_patients)

    st.divider()

    analytics_widgets.render_adherence_breakdown(store.all())

    st.divider()

    st.subheader("📰 Health News")
    _render_news_section()

def _render_news_section():
    """Show the news feed, fetching it on the first dashboard visit of the session"""
    region = session_manager.get_news_region()
    placeholder = st.empty()

    if region.value is None:
        with placeholder.container():
            news_cards.render_news_feed(None)
        session_manager.load_news()

    with placeholder.container():
        news_cards.render_news_feed(region.value)
