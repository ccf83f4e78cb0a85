import pytest

from services.local_storage import LocalStorage
from services.models import Patient, Treatment
from services.notifications import Notifier
from services.patient_store import PatientStore


class FakeClock:
    """Manually advanced clock for toast timing"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def notifier(clock: FakeClock) -> Notifier:
    return Notifier(clock=clock)


@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    """
    Storage backed by a JSON file under the test's tmp directory.
    """
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def store(storage: LocalStorage, notifier: Notifier) -> PatientStore:
    return PatientStore(storage, notifier)


@pytest.fixture
def metformin() -> Treatment:
    return Treatment(
        brand_name="Glucophage",
        generic_name="METFORMIN HYDROCHLORIDE",
        manufacturer="Bristol-Myers Squibb",
        purpose="Type 2 diabetes mellitus",
    )


def make_patient(patient_id: str, adherence=75, condition="diabetes", name=None, treatments=None) -> Patient:
    return Patient.create(
        name=name or f"Patient {patient_id}",
        patient_id=patient_id,
        condition=condition,
        adherence=adherence,
        treatments=treatments,
    )
