"""
Add Patient Page for the Patient Adherence Dashboard

Form for registering a new patient. The ID must be digits only and unique;
treatment suggestions are looked up for the selected condition before the
record is saved.
"""

import streamlit as st
import logging

from services import session_manager
from services.patient_service import add_patient_from_form
from components.search_widgets import CONDITIONS

logger = logging.getLogger(__name__)

def render():
    """Entry point called by main.py"""
    render_add_patient()

def render_add_patient():
    """Main entry point for the add patient page"""
    store = session_manager.get_store()
    notifier = session_manager.get_notifier()
    view = session_manager.get_view()

    st.button("← Back to Dashboard", key="backToDashboard1", on_click=view.show_dashboard)
    st.title("➕ Add Patient")

    with st.form("addPatientForm"):
        name = st.text_input("Patient Name", key="patientName")
        patient_id = st.text_input("Patient ID", key="patientID", placeholder="Numbers only")
        condition = st.selectbox(
            "Condition",
            options=CONDITIONS,
            format_func=str.capitalize,
            key="condition"
        )
        adherence = st.number_input(
            "Adherence (%)",
            value=None,
            step=1,
            placeholder="0-100",
            key="adherence"
        )
        submitted = st.form_submit_button("Add Patient", type="primary")

    if not submitted:
        return

    # The browser form marks every field as required
    if not name or not patient_id or adherence is None:
        st.warning("Please fill in all fields.")
        return

    patient = add_patient_from_form(
        store,
        notifier,
        name=name,
        patient_id=patient_id,
        condition=condition,
        adherence=adherence,
        busy=lambda: st.spinner("Adding Patient...")
    )

    if patient is not None:
        view.show_dashboard()
        st.rerun()
