"""
Components Module for the Patient Adherence Dashboard

This module contains reusable UI components that can be used across different pages.
Components only read patient data; they never modify the patient store.

Components:
- patient_cards: Patient information display cards
- search_widgets: Search box and filter selectors
- analytics_widgets: Summary metrics and adherence chart
- news_cards: Health news feed
- toast: Transient notification display
"""

from .patient_cards import render_patient_list, build_patient_card_html
from .search_widgets import render_search_bar, render_filters
from .analytics_widgets import render_metric_card, render_stats, render_adherence_breakdown
from .news_cards import render_news_feed
from .toast import render_toast

__all__ = [
    'render_patient_list',
    'build_patient_card_html',
    'render_search_bar',
    'render_filters',
    'render_metric_card',
    'render_stats',
    'render_adherence_breakdown',
    'render_news_feed',
    'render_toast'
]
