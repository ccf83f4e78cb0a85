"""
Patient Cards Component for the Patient Adherence Dashboard

Builds the card markup for each patient (name, ID, condition, adherence
tier, attention status and the top treatment suggestion) and renders card
lists into the page.
"""

import streamlit as st
from html import escape
from typing import List, Union
import logging

from services.models import Patient
from utils.helpers import capitalize_first, get_adherence_tier

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "No patients available."

CARD_STYLES = """
<style>
.patient-card { border: 1px solid #E5E7EB; border-radius: 10px; padding: 16px; margin-bottom: 14px; background: #FFFFFF; }
.patient-card h3 { margin: 0 0 4px 0; color: #111827; }
.patient-card .patient-id { color: #6B7280; font-size: 13px; margin: 0 0 8px 0; }
.patient-card .condition { display: inline-block; background: #E0E7FF; color: #3730A3; border-radius: 12px; padding: 2px 10px; font-size: 12px; }
.adherence-level { margin-top: 10px; font-weight: 600; }
.adherence-high { color: #059669; }
.adherence-medium { color: #D97706; }
.adherence-low { color: #DC2626; }
</style>
"""

def adherence_class(adherence: Union[int, float]) -> str:
    """CSS class for the three adherence tiers"""
    return f"adherence-{get_adherence_tier(adherence).lower()}"

def _format_adherence(adherence: Union[int, float]) -> str:
    # 85.0 prints as 85 the way the browser shows numbers
    if isinstance(adherence, float) and adherence.is_integer():
        return str(int(adherence))
    return str(adherence)

def build_treatment_html(patient: Patient) -> str:
    """Markup for the first treatment suggestion, or '' when there is none"""
    if not patient.treatments:
        return ""

    top = patient.treatments[0]
    return f"""
        <div style="margin-top: 15px; padding: 10px; background-color: #EFF6FF; border-radius: 5px; border-left: 3px solid #3B82F6;">
            <p style="font-weight: 600; color: #1E40AF; margin-bottom: 5px;">Recommended Treatment:</p>
            <p style="font-size: 13px; color: #1F2937; margin: 3px 0;"><strong>Brand:</strong> {escape(top.brand_name)}</p>
            <p style="font-size: 13px; color: #1F2937; margin: 3px 0;"><strong>Generic:</strong> {escape(top.generic_name)}</p>
        </div>
    """

def build_patient_card_html(patient: Patient) -> str:
    """
    Build the card markup for one patient

    Args:
        patient: Patient record

    Returns:
        HTML string for the card
    """
    if patient.need_attention:
        status_style = "color: #DC2626; font-weight: 600;"
        status_text = "⚠ Needs Attention"
    else:
        status_style = "color: #059669; font-weight: 600;"
        status_text = "✔ Stable"

    return f"""
        <div class="patient-card">
            <h3>{escape(patient.name)}</h3>
            <p class="patient-id">ID: {escape(patient.id)}</p>
            <span class="condition">{escape(capitalize_first(patient.condition))}</span>
            <p class="adherence-level {adherence_class(patient.adherence)}">Adherence: {_format_adherence(patient.adherence)}%</p>
            <p style="margin-top: 10px; {status_style}">
                {status_text}
            </p>
            {build_treatment_html(patient)}
        </div>
    """

def build_patient_list_html(patients: List[Patient]) -> str:
    """Markup for a list of cards, or the empty-list placeholder"""
    if not patients:
        return f"<p style='text-align: center; color: #6B7280; margin-top: 30px;'>{EMPTY_LIST_MESSAGE}</p>"

    return "".join(build_patient_card_html(p) for p in patients)

def render_patient_list(patients: List[Patient]) -> None:
    """
    Render a list of patient cards

    Args:
        patients: Records to show, possibly a search or filter result
    """
    try:
        st.markdown(CARD_STYLES, unsafe_allow_html=True)
        st.markdown(build_patient_list_html(patients), unsafe_allow_html=True)

    except Exception as e:
        logger.error(f"Error rendering patient list: {e}")
        st.error("Error displaying patient list")
