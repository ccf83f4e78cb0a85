"""
Patient Adherence Dashboard - Main Application

Streamlit entry point. Tracks patients, their condition and medication
adherence, flags patients needing attention, suggests treatments from the
openFDA drug label API and shows a health news feed. Patient records are
kept in local storage between sessions.

Run with:
    streamlit run python/adherence_dashboard/main.py
"""

import streamlit as st
from datetime import datetime

from page_modules import dashboard, add_patient, all_patients
from services import session_manager
from services.view_controller import View
from components import toast
from utils import config

# Configure the Streamlit page
st.set_page_config(
    page_title="Patient Adherence Dashboard",
    page_icon="🩺",
    layout="wide",
    initial_sidebar_state="collapsed",
    menu_items={
        'Get Help': None,
        'Report a bug': None,
        'About': "Patient Adherence Dashboard - treatment data from openFDA, news from NewsData"
    }
)

PAGES = {
    View.DASHBOARD: dashboard.render,
    View.ADD_PATIENT: add_patient.render,
    View.ALL_PATIENTS: all_patients.render,
}

def render_header():
    """Render the application header"""
    col1, col2 = st.columns([4, 1])

    with col1:
        st.markdown("### 🩺 Patient Tracker")

    with col2:
        st.markdown(f"""
        <div style='text-align: right; padding-top: 10px; color: #888; font-size: 14px;'>
            🕐 {datetime.now().strftime('%Y-%m-%d %H:%M')}
        </div>
        """, unsafe_allow_html=True)

def render_main_content():
    """Route to the page selected by the view controller"""
    view = session_manager.get_view()

    try:
        PAGES[view.current]()

    except Exception as e:
        st.error(f"Error rendering page '{view.current.value}': {str(e)}")
        st.markdown("Please try refreshing the page.")

        # Show error details in expander for debugging
        with st.expander("Error Details (for debugging)"):
            st.exception(e)

def render_footer():
    """Render the application footer"""
    st.markdown("---")
    st.markdown("""
    <div style='text-align: center; color: #666; font-size: 12px;'>
        <p>Treatment suggestions are drug label hints from openFDA, not prescriptions.</p>
        <p>Patient data is stored locally and can be cleared at any time.</p>
    </div>
    """, unsafe_allow_html=True)

def main():
    """Main application entry point"""

    # Load configuration
    config.load_app_config()

    # Create the store and restore saved patients once per session
    session_manager.initialize_services()

    render_header()

    with st.container():
        render_main_content()
        render_footer()

    # Drawn last so toasts raised while rendering this run are shown
    toast.render_toast(session_manager.get_notifier())

if __name__ == "__main__":
    main()
