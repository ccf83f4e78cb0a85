"""
Patient Store for the Patient Adherence Dashboard

Owns the ordered list of patient records. Every successful add writes the
full list back to local storage; the list is restored from storage once at
startup. Records are never updated or removed in place.
"""

import json
import logging
from typing import Callable, Iterator, List, Optional

from services.local_storage import LocalStorage
from services.models import Patient
from services.notifications import Notifier
from utils.helpers import ADHERENCE_HIGH_THRESHOLD, ADHERENCE_MEDIUM_THRESHOLD
from utils.validators import validate_patient_id, validate_unique_patient_id

logger = logging.getLogger(__name__)

ALL_CONDITIONS = "All Conditions"

class PatientValidationError(ValueError):
    """Raised when a record is rejected before it reaches the store"""

class InvalidPatientIdError(PatientValidationError):
    """Patient ID is not made of digits only"""

class DuplicatePatientError(PatientValidationError):
    """Patient ID is already present in the store"""

class PatientStore:
    """Ordered in-memory patient list mirrored to local storage"""

    def __init__(self, storage: LocalStorage, notifier: Notifier, storage_key: str = 'patients'):
        self.storage = storage
        self.notifier = notifier
        self.storage_key = storage_key
        self._patients: List[Patient] = []

    def __len__(self) -> int:
        return len(self._patients)

    def __iter__(self) -> Iterator[Patient]:
        return iter(list(self._patients))

    def all(self) -> List[Patient]:
        """Snapshot of every record in insertion order"""
        return list(self._patients)

    def check_new_id(self, patient_id: str) -> None:
        """
        Raise if patient_id cannot be used for a new record

        Raises:
            InvalidPatientIdError: ID contains anything but digits
            DuplicatePatientError: ID already exists in the store
        """
        is_valid, message = validate_patient_id(patient_id)
        if not is_valid:
            raise InvalidPatientIdError(message)

        is_valid, message = validate_unique_patient_id(patient_id, (p.id for p in self._patients))
        if not is_valid:
            raise DuplicatePatientError(message)

    def add(self, record: Patient) -> Patient:
        """
        Append a record and persist the full list

        Raises:
            PatientValidationError: the store is left unchanged
        """
        self.check_new_id(record.id)

        self._patients.append(record)
        self.save()
        logger.info(f"Added patient {record.id} ({len(self._patients)} total)")
        return record

    def find(self, patient_id: str) -> Optional[Patient]:
        return next((p for p in self._patients if p.id == patient_id), None)

    def filter(self, predicate: Callable[[Patient], bool]) -> List[Patient]:
        return [p for p in self._patients if predicate(p)]

    def search(self, term: str) -> List[Patient]:
        """Case-insensitive substring match on name, id or condition"""
        value = (term or "").lower()
        if not value:
            return self.all()

        return self.filter(lambda p: (
            value in p.name.lower()
            or value in p.id.lower()
            or value in p.condition.lower()
        ))

    def apply_filters(self, condition: str = ALL_CONDITIONS, adherence_level: str = "") -> List[Patient]:
        """
        Combined condition and adherence-tier filter

        Args:
            condition: Condition to match, or "All Conditions"
            adherence_level: Selector label; matched on "High", "Medium" or "Low"

        Returns:
            Matching records in insertion order
        """
        filtered = self.all()

        if condition and condition != ALL_CONDITIONS:
            wanted = condition.lower()
            filtered = [p for p in filtered if p.condition.lower() == wanted]

        adherence_level = adherence_level or ""
        if "High" in adherence_level:
            filtered = [p for p in filtered if p.adherence >= ADHERENCE_HIGH_THRESHOLD]
        elif "Medium" in adherence_level:
            filtered = [p for p in filtered
                        if ADHERENCE_MEDIUM_THRESHOLD <= p.adherence < ADHERENCE_HIGH_THRESHOLD]
        elif "Low" in adherence_level:
            filtered = [p for p in filtered if p.adherence < ADHERENCE_MEDIUM_THRESHOLD]

        return filtered

    def serialize(self) -> str:
        return json.dumps([p.to_dict() for p in self._patients])

    def save(self) -> None:
        self.storage.set_item(self.storage_key, self.serialize())

    def load_from_storage(self) -> int:
        """
        Replace the in-memory list with the stored one

        Returns:
            Number of records loaded (0 when nothing is stored or data is malformed)
        """
        try:
            saved = self.storage.get_item(self.storage_key)
            if not saved:
                return 0

            patients = [Patient.from_dict(item) for item in json.loads(saved)]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # StorageError is a ValueError: the file itself is unreadable
            logger.error(f"Error loading patients from storage: {e}")
            self._patients = []
            self.notifier.show_toast('Failed to load saved patient data', 'error')
            return 0

        self._patients = patients
        self.notifier.show_toast(f"Loaded {len(patients)} patient(s) from storage", 'info')
        logger.info(f"Loaded {len(patients)} patient(s) from {self.storage.path}")
        return len(patients)
