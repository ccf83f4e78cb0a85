"""
Input Validation Utilities for the Patient Adherence Dashboard

The only validated input is the patient identifier, which must be made of
digit characters and must not collide with an existing record.
"""

import re
from typing import Iterable, Tuple
import logging

logger = logging.getLogger(__name__)

PATIENT_ID_PATTERN = re.compile(r'[0-9]+')

def validate_patient_id(patient_id: str) -> Tuple[bool, str]:
    """
    Validate patient ID format

    Args:
        patient_id: Patient ID to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(patient_id, str) or not PATIENT_ID_PATTERN.fullmatch(patient_id):
        return False, "Patient ID must contain only numbers!"

    return True, ""

def validate_unique_patient_id(patient_id: str, existing_ids: Iterable[str]) -> Tuple[bool, str]:
    """
    Check that a patient ID is not already in use

    Args:
        patient_id: Candidate patient ID
        existing_ids: IDs already present in the store

    Returns:
        Tuple of (is_valid, error_message)
    """
    if patient_id in set(existing_ids):
        return False, f'Patient ID "{patient_id}" already exists! Please use a different ID.'

    return True, ""
