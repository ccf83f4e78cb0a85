"""
All Patients Page for the Patient Adherence Dashboard

Lists patient cards with:
- Free-text search over name, ID and condition
- Condition and adherence level filters
"""

import streamlit as st
import logging

from services import session_manager
from services.patient_service import run_search, clear_search, run_filters
from components import search_widgets, patient_cards

logger = logging.getLogger(__name__)

FILTER_KEY = "patient_filters"

def render():
    """Entry point called by main.py"""
    render_all_patients()

def _apply_filters():
    """Selector callback: filter the store with both current selections"""
    run_filters(
        session_manager.get_store(),
        session_manager.get_view(),
        st.session_state[f"{FILTER_KEY}_condition"],
        st.session_state[f"{FILTER_KEY}_adherence"]
    )

def render_all_patients():
    """Main entry point for the patient list page"""
    store = session_manager.get_store()
    view = session_manager.get_view()

    st.button("← Back to Dashboard", key="backToDashboard2", on_click=view.show_dashboard)
    st.title("👥 All Patients")

    search = search_widgets.render_search_bar()
    if search['search']:
        run_search(store, view, search['term'])
    elif search['clear']:
        clear_search(view)

    search_widgets.render_filters(on_change=_apply_filters, key=FILTER_KEY)

    results = view.results if view.results is not None else store.all()
    st.caption(f"Showing {len(results)} of {len(store)} patients")
    patient_cards.render_patient_list(results)
