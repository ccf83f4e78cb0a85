from contextlib import contextmanager
from datetime import date
from unittest.mock import Mock

from conftest import make_patient
from services.patient_service import add_patient_from_form


def test_invalid_id_is_rejected_before_lookup(store, notifier):
    lookup = Mock()

    patient = add_patient_from_form(store, notifier, "Ann", "12ab", "asthma", 70, lookup=lookup)

    assert patient is None
    assert len(store) == 0
    lookup.assert_not_called()
    assert (notifier.current.severity, notifier.current.message) == ("error", "Patient ID must contain only numbers!")


def test_duplicate_id_is_rejected(store, notifier):
    store.add(make_patient("55"))
    lookup = Mock()

    patient = add_patient_from_form(store, notifier, "Ann", "55", "asthma", 70, lookup=lookup)

    assert patient is None
    assert len(store) == 1
    lookup.assert_not_called()
    assert notifier.current.message == 'Patient ID "55" already exists! Please use a different ID.'


def test_add_with_treatments(store, notifier, metformin):
    lookup = Mock(return_value=[metformin])

    patient = add_patient_from_form(store, notifier, "Ann", "100", "diabetes", 45, lookup=lookup,
                                    added_on=date(2025, 3, 7))

    lookup.assert_called_once_with("diabetes")
    assert store.find("100") is patient
    assert patient.need_attention is True
    assert patient.treatments == [metformin]
    assert patient.date_added == "3/7/2025"
    assert (notifier.current.severity, notifier.current.message) == (
        "success", "Patient Ann added successfully with treatment information!"
    )


def test_add_without_treatments(store, notifier):
    patient = add_patient_from_form(store, notifier, "Bo", "101", "migraine", 88, lookup=lambda c: None)

    assert patient.treatments is None
    assert patient.need_attention is False
    assert notifier.current.message == "Patient Bo added successfully!"


def test_busy_indicator_wraps_the_lookup(store, notifier):
    events = []

    @contextmanager
    def busy():
        events.append("start")
        yield
        events.append("end")

    def lookup(condition):
        events.append("lookup")
        return None

    add_patient_from_form(store, notifier, "Cy", "102", "asthma", 60, lookup=lookup, busy=busy)

    assert events == ["start", "lookup", "end"]


def test_id_taken_during_lookup_is_rejected(store, notifier):
    def lookup(condition):
        store.add(make_patient("103"))
        return None

    patient = add_patient_from_form(store, notifier, "Di", "103", "asthma", 60, lookup=lookup)

    assert patient is None
    assert len(store) == 1
    assert notifier.current.severity == "error"
