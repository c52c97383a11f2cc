"""Wires the controller to Streamlit's per-browser session state."""

from __future__ import annotations

import streamlit as st

from src.api.location_history import LocationHistoryStore
from src.api.proxy_client import ProxyClient
from src.client_storage import LocalStorage, get_or_create_device_id
from src.viewmodels.dashboard import DashboardController, SessionContext

SESSION_KEY = "dashboard_session"


@st.cache_resource
def _history_store() -> LocationHistoryStore:
    return LocationHistoryStore()


def get_controller() -> DashboardController:
    """Controller bound to this session, restoring the last city on first load."""
    storage = LocalStorage()
    first_load = SESSION_KEY not in st.session_state
    if first_load:
        st.session_state[SESSION_KEY] = SessionContext(device_id=get_or_create_device_id(storage))

    controller = DashboardController(
        session=st.session_state[SESSION_KEY],
        source=ProxyClient(),
        history=_history_store(),
        storage=storage,
    )
    if first_load:
        controller.restore()
    return controller
