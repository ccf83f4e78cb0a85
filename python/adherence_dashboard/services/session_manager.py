"""
Session Manager for the Patient Adherence Dashboard

Creates the per-browser-session objects (storage, notifier, patient store,
view controller and the news display region) once, keeps them in Streamlit
session state, and restores saved patients at startup.
"""

import streamlit as st
from typing import Any, Dict, List, Optional
import logging

from services.local_storage import LocalStorage
from services.models import NewsArticle
from services.news_service import fetch_health_news
from services.notifications import Notifier
from services.patient_store import PatientStore
from services.view_controller import DisplayRegion, ViewController
from utils import config

logger = logging.getLogger(__name__)

class SessionManager:
    """Owns the dashboard's per-session state"""

    STATE_KEYS = ('storage', 'notifier', 'patient_store', 'view', 'news_region')

    def __init__(self, state: Optional[Any] = None):
        # Streamlit session state unless a plain mapping is supplied
        self._state = state

    @property
    def state(self):
        return st.session_state if self._state is None else self._state

    def initialize_services(self) -> None:
        """Build session objects on the first run of a session"""
        if all(key in self.state for key in self.STATE_KEYS):
            return

        app_config = config.get_app_config()
        storage_config = config.get_storage_config()

        storage = LocalStorage(storage_config['storage_path'])
        notifier = Notifier(
            display_seconds=app_config.get('toast_display_seconds', 3.0),
            exit_seconds=app_config.get('toast_exit_seconds', 0.3)
        )
        store = PatientStore(storage, notifier, storage_key=storage_config['storage_key'])

        self.state['storage'] = storage
        self.state['notifier'] = notifier
        self.state['patient_store'] = store
        self.state['view'] = ViewController()
        self.state['news_region'] = DisplayRegion('health_news', initial=None)

        store.load_from_storage()
        logger.info(f"Session initialized with {len(store)} patient(s)")

    def get_store(self) -> PatientStore:
        return self.state['patient_store']

    def get_notifier(self) -> Notifier:
        return self.state['notifier']

    def get_view(self) -> ViewController:
        return self.state['view']

    def get_news_region(self) -> DisplayRegion:
        return self.state['news_region']

    def load_news(self) -> List[NewsArticle]:
        """Fetch the news feed into its display region, keeping only the latest result"""
        region = self.get_news_region()
        token = region.begin()
        articles = fetch_health_news(self.get_notifier())
        region.commit(token, articles)
        return region.value or []

    def get_session_stats(self) -> Dict[str, Any]:
        """Summary of session state for diagnostics"""
        return {
            'patients': len(self.get_store()),
            'view': self.get_view().current.value,
            'news_loaded': self.get_news_region().value is not None,
        }
