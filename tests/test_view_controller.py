from conftest import make_patient
from services.patient_service import clear_search, run_filters, run_search
from services.view_controller import DisplayRegion, View, ViewController


def test_initial_view_is_dashboard():
    view = ViewController()
    assert view.current is View.DASHBOARD
    assert view.results is None


def test_navigation_transitions():
    view = ViewController()

    view.show_add_patient()
    assert view.is_active(View.ADD_PATIENT)
    assert not view.is_active(View.DASHBOARD)

    view.show_all_patients()
    assert view.current is View.ALL_PATIENTS

    view.show_dashboard()
    assert view.current is View.DASHBOARD


def test_leaving_the_list_drops_results():
    view = ViewController()
    view.show_all_patients([make_patient("1")])

    view.show_dashboard()
    view.show_all_patients()

    assert view.results is None


def test_search_forces_patient_list(store):
    store.add(make_patient("1", name="Alice"))
    store.add(make_patient("2", name="Bob"))
    view = ViewController()

    results = run_search(store, view, "bob")

    assert view.current is View.ALL_PATIENTS
    assert [p.id for p in view.results] == ["2"]
    assert results == view.results


def test_empty_search_and_clear_show_everything(store):
    store.add(make_patient("1"))
    view = ViewController()

    run_search(store, view, "")
    assert view.current is View.ALL_PATIENTS
    assert view.results is None

    run_search(store, view, "1")
    clear_search(view)
    assert view.results is None


def test_filters_force_patient_list(store):
    store.add(make_patient("1", adherence=90))
    store.add(make_patient("2", adherence=20))
    view = ViewController()
    view.show_add_patient()

    run_filters(store, view, "All Conditions", "Low (<50%)")

    assert view.current is View.ALL_PATIENTS
    assert [p.id for p in view.results] == ["2"]


def test_display_region_keeps_latest_request():
    region = DisplayRegion("news")
    first = region.begin()
    second = region.begin()

    assert region.commit(second, ["fresh"]) is True
    assert region.commit(first, ["stale"]) is False
    assert region.value == ["fresh"]
    assert region.loading is False


def test_display_region_loading_until_commit():
    region = DisplayRegion("news")
    token = region.begin()
    assert region.loading is True
    assert region.value is None

    region.commit(token, [])
    assert region.value == []
