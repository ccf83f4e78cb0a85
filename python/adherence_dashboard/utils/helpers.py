"""
Helper Utilities for the Patient Adherence Dashboard

Common utility functions for date formatting, text handling
and adherence classification.
"""

from datetime import datetime, date
from typing import Optional, Union
import logging

logger = logging.getLogger(__name__)

ADHERENCE_HIGH_THRESHOLD = 80
ADHERENCE_MEDIUM_THRESHOLD = 50

def format_date(date_value: Optional[Union[datetime, date]] = None) -> str:
    """
    Format a date the way a US-locale browser renders toLocaleDateString()

    Args:
        date_value: Date to format (default: today)

    Returns:
        Date string in M/D/YYYY form
    """
    if date_value is None:
        date_value = date.today()

    return f"{date_value.month}/{date_value.day}/{date_value.year}"

def capitalize_first(text: str) -> str:
    """Upper-case the first character and leave the rest untouched"""
    if not text:
        return ""
    return text[0].upper() + text[1:]

def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to specified length

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if not text:
        return ""

    text = str(text)
    if len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix

def get_adherence_tier(adherence: Union[int, float]) -> str:
    """
    Classify an adherence percentage

    Args:
        adherence: Adherence percentage

    Returns:
        'High' (>= 80), 'Medium' (50-79) or 'Low' (< 50)
    """
    if adherence >= ADHERENCE_HIGH_THRESHOLD:
        return "High"
    elif adherence >= ADHERENCE_MEDIUM_THRESHOLD:
        return "Medium"
    else:
        return "Low"

def format_percentage(value: Union[int, float]) -> str:
    """Render a number the way the dashboard prints percentages (one decimal)"""
    return f"{value:.1f}%"
