"""
Pages Module for the Patient Adherence Dashboard

This module contains the page components of the application. Exactly one
page is shown at a time, selected by the session's view controller.

Pages:
- dashboard: Summary statistics, navigation and health news
- add_patient: New patient form
- all_patients: Patient list with search and filters
"""

from .dashboard import render_dashboard
from .add_patient import render_add_patient
from .all_patients import render_all_patients

__all__ = [
    'render_dashboard',
    'render_add_patient',
    'render_all_patients'
]
