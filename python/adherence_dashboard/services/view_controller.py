"""
View Controller for the Patient Adherence Dashboard

Selects which of the three page panels is shown. Exactly one panel is
active; the dashboard is shown first.
"""

import logging
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from services.models import Patient

logger = logging.getLogger(__name__)

T = TypeVar('T')

class View(Enum):
    DASHBOARD = "dashboard"
    ADD_PATIENT = "add_patient"
    ALL_PATIENTS = "all_patients"

class ViewController:
    """Mutually exclusive page selector"""

    def __init__(self):
        self.current = View.DASHBOARD
        # None means "show the whole store"
        self.results: Optional[List[Patient]] = None

    def show_dashboard(self) -> None:
        self._transition(View.DASHBOARD)

    def show_add_patient(self) -> None:
        self._transition(View.ADD_PATIENT)

    def show_all_patients(self, results: Optional[List[Patient]] = None) -> None:
        """
        Switch to the patient list

        Args:
            results: Search or filter results to display; None lists every patient
        """
        self._transition(View.ALL_PATIENTS)
        self.results = results

    def is_active(self, view: View) -> bool:
        return self.current is view

    def _transition(self, view: View) -> None:
        if view is not self.current:
            logger.debug(f"View change: {self.current.value} -> {view.value}")
        self.current = view
        self.results = None

class DisplayRegion(Generic[T]):
    """
    A display area fed by asynchronous lookups

    Each lookup takes a token from begin(); only the value committed with the
    most recently issued token is kept, so an older request that resolves
    late cannot overwrite a newer one.
    """

    def __init__(self, name: str, initial: Any = None):
        self.name = name
        self.value: Any = initial
        self.loading = False
        self._latest_token = 0

    def begin(self) -> int:
        self._latest_token += 1
        self.loading = True
        return self._latest_token

    def is_current(self, token: int) -> bool:
        return token == self._latest_token

    def commit(self, token: int, value: T) -> bool:
        """Apply value if token belongs to the latest request"""
        if not self.is_current(token):
            logger.info(f"Discarding superseded result for '{self.name}' (token {token})")
            return False

        self.value = value
        self.loading = False
        return True
