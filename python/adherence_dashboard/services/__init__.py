"""
Services Module for the Patient Adherence Dashboard

This module contains the core business logic and data services for the application.
Services handle the patient store, local storage persistence, external API lookups,
notifications and page state.
"""

from .session_manager import SessionManager
from .patient_store import PatientStore, PatientValidationError, InvalidPatientIdError, DuplicatePatientError
from .local_storage import LocalStorage, StorageError
from .notifications import Notifier, Toast
from .view_controller import ViewController, View, DisplayRegion
from .treatment_service import fetch_treatment_info
from .news_service import fetch_health_news

# Initialize service instances
session_manager = SessionManager()

__all__ = [
    'session_manager',
    'SessionManager',
    'PatientStore',
    'PatientValidationError',
    'InvalidPatientIdError',
    'DuplicatePatientError',
    'LocalStorage',
    'StorageError',
    'Notifier',
    'Toast',
    'ViewController',
    'View',
    'DisplayRegion',
    'fetch_treatment_info',
    'fetch_health_news'
]
