"""
Toast Component for the Patient Adherence Dashboard

Draws the notifier's active toast as a fixed-position element. The exit
animation is scheduled for the time the toast has left, so a rerun in the
middle of a toast does not restart its clock.
"""

import streamlit as st
from html import escape
from typing import Optional
import logging

from services.notifications import Notifier, Toast

logger = logging.getLogger(__name__)

TOAST_COLORS = {
    'success': '#059669',
    'error': '#DC2626',
    'warning': '#D97706',
    'info': '#2563EB',
}

def build_toast_html(toast: Toast, remaining: float, exit_seconds: float = 0.3) -> str:
    """
    Markup and animation for one toast

    Args:
        toast: Toast to draw
        remaining: Seconds until the exit transition starts
        exit_seconds: Length of the exit transition
    """
    return f"""
        <style>
        @keyframes toastSlideIn {{ from {{ transform: translateX(120%); opacity: 0; }} to {{ transform: translateX(0); opacity: 1; }} }}
        .toast {{
            position: fixed; top: 70px; right: 24px; z-index: 10000;
            display: flex; align-items: center; gap: 10px;
            padding: 12px 18px; border-radius: 8px; color: #FFFFFF;
            box-shadow: 0 4px 12px rgba(0, 0, 0, 0.15);
            animation: toastSlideIn {exit_seconds}s ease-out reverse forwards;
            animation-delay: {remaining:.2f}s;
        }}
        </style>
        <div class="toast {toast.severity}" style="background-color: {TOAST_COLORS[toast.severity]};">
            <span class="toast-icon">{toast.icon}</span>
            <span class="toast-message">{escape(toast.message)}</span>
        </div>
    """

def render_toast(notifier: Notifier) -> Optional[Toast]:
    """Render the active toast, if any, and return it"""
    try:
        toast = notifier.active()
        if toast is None:
            return None

        remaining = notifier.remaining_display()
        st.markdown(build_toast_html(toast, remaining, notifier.exit_seconds), unsafe_allow_html=True)
        return toast

    except Exception as e:
        logger.error(f"Error rendering toast: {e}")
        return None
