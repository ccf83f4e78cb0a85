import importlib
import json
from unittest.mock import patch

from conftest import make_patient
from services.models import NewsArticle
from services.session_manager import SessionManager
from services.view_controller import View

# services.session_manager is also the name of the package-level instance
session_module = importlib.import_module("services.session_manager")


def _manager(tmp_path, monkeypatch, saved=None):
    path = tmp_path / "local_storage.json"
    if saved is not None:
        path.write_text(json.dumps({"patients": json.dumps(saved)}), encoding="utf-8")
    monkeypatch.setenv("STORAGE_PATH", str(path))
    manager = SessionManager(state={})
    manager.initialize_services()
    return manager


def test_initialize_restores_saved_patients(tmp_path, monkeypatch):
    manager = _manager(tmp_path, monkeypatch, saved=[make_patient("1").to_dict(), make_patient("2").to_dict()])

    assert [p.id for p in manager.get_store()] == ["1", "2"]
    assert manager.get_view().current is View.DASHBOARD
    assert manager.get_notifier().current.message == "Loaded 2 patient(s) from storage"


def test_initialize_runs_once_per_session(tmp_path, monkeypatch):
    manager = _manager(tmp_path, monkeypatch)
    store = manager.get_store()
    store.add(make_patient("9"))

    manager.initialize_services()

    assert manager.get_store() is store
    assert len(manager.get_store()) == 1


def test_load_news_fills_region(tmp_path, monkeypatch):
    manager = _manager(tmp_path, monkeypatch)
    articles = [NewsArticle(title="Vaccines")]

    with patch.object(session_module, "fetch_health_news", return_value=articles) as fetch:
        assert manager.load_news() == articles

    fetch.assert_called_once_with(manager.get_notifier())
    assert manager.get_news_region().value == articles
    assert manager.get_session_stats()["news_loaded"] is True
