"""
Patient Service for the Patient Adherence Dashboard

Workflows that combine the store, the treatment lookup and the notifier:
registering a patient from the add form, and running search and filter
actions for the patient list.
"""

import logging
from contextlib import nullcontext
from datetime import date
from typing import Callable, ContextManager, List, Optional, Union

from services.models import Patient, Treatment
from services.notifications import Notifier
from services.patient_store import PatientStore, PatientValidationError
from services.treatment_service import fetch_treatment_info
from services.view_controller import ViewController

logger = logging.getLogger(__name__)

TreatmentLookup = Callable[[str], Optional[List[Treatment]]]

def add_patient_from_form(store: PatientStore, notifier: Notifier,
                          name: str, patient_id: str, condition: str,
                          adherence: Union[int, float],
                          lookup: TreatmentLookup = fetch_treatment_info,
                          busy: Optional[Callable[[], ContextManager]] = None,
                          added_on: Optional[date] = None) -> Optional[Patient]:
    """
    Register a patient submitted through the add form

    The ID is checked before the treatment lookup so invalid submissions
    never reach the drug label API.

    Args:
        store: Patient store to add to
        notifier: Receives validation and success toasts
        name: Patient name
        patient_id: Identifier as typed
        condition: Selected condition key
        adherence: Adherence percentage
        lookup: Treatment lookup function
        busy: Optional context manager factory shown while the lookup runs
        added_on: Creation date (default: today)

    Returns:
        The new patient, or None when the submission was rejected
    """
    try:
        store.check_new_id(patient_id)
    except PatientValidationError as e:
        notifier.show_toast(str(e), 'error')
        return None

    with (busy() if busy else nullcontext()):
        treatments = lookup(condition)

    patient = Patient.create(
        name=name,
        patient_id=patient_id,
        condition=condition,
        adherence=adherence,
        treatments=treatments,
        added_on=added_on,
    )

    try:
        store.add(patient)
    except PatientValidationError as e:
        # the store changed while the lookup was running
        notifier.show_toast(str(e), 'error')
        return None

    if treatments:
        notifier.show_toast(f"Patient {name} added successfully with treatment information!", 'success')
    else:
        notifier.show_toast(f"Patient {name} added successfully!", 'success')

    return patient

def run_search(store: PatientStore, view: ViewController, term: str) -> List[Patient]:
    """Search the store and switch to the patient list showing the matches"""
    if not term:
        view.show_all_patients()
        return store.all()

    results = store.search(term)
    logger.info(f"Search '{term}' matched {len(results)} patient(s)")
    view.show_all_patients(results)
    return results

def clear_search(view: ViewController) -> None:
    view.show_all_patients()

def run_filters(store: PatientStore, view: ViewController,
                condition: str, adherence_level: str) -> List[Patient]:
    """Apply the condition and adherence selectors and show the result list"""
    results = store.apply_filters(condition, adherence_level)
    logger.info(f"Filters ({condition}, {adherence_level}) matched {len(results)} patient(s)")
    view.show_all_patients(results)
    return results
