"""
Utils Module for the Patient Adherence Dashboard

This module contains utility functions and helpers used throughout the application.
Includes data formatting, validation and configuration management.

Modules:
- helpers: Common utility functions and data formatting helpers
- validators: Input validation for patient identifiers
- config: Configuration management and environment setup
"""

from .helpers import (
    format_date, capitalize_first, truncate_text,
    get_adherence_tier, format_percentage
)

from .validators import (
    validate_patient_id, validate_unique_patient_id
)

from .config import (
    get_app_config, get_api_config, get_storage_config,
    is_development, get_log_level
)

__all__ = [
    # Helpers
    'format_date', 'capitalize_first', 'truncate_text',
    'get_adherence_tier', 'format_percentage',

    # Validators
    'validate_patient_id', 'validate_unique_patient_id',

    # Config
    'get_app_config', 'get_api_config', 'get_storage_config',
    'is_development', 'get_log_level'
]
