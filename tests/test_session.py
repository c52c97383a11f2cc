from __future__ import annotations

from types import SimpleNamespace

import src.ui.session as session_mod
from src.client_storage import LocalStorage, save_selected_city
from src.models import Location, WeatherSnapshot
from src.viewmodels.dashboard import ControllerState

DENVER = Location(name="Denver", state="Colorado", country="US", lat=39.74, lon=-104.99)


class FakeProxy:
    def fetch_weather(self, lat, lon):
        return WeatherSnapshot(
            temperature=53.5,
            description="overcast clouds",
            timezone_offset_seconds=-25200,
            name="Denver",
            country="US",
        )


class NullHistory:
    def save(self, device_id, location):
        return True

    def list_by_device(self, device_id):
        return []


def _wire(monkeypatch, tmp_path):
    path = tmp_path / "client.json"
    monkeypatch.setattr(session_mod, "st", SimpleNamespace(session_state={}))
    monkeypatch.setattr(session_mod, "LocalStorage", lambda: LocalStorage(path))
    monkeypatch.setattr(session_mod, "ProxyClient", FakeProxy)
    monkeypatch.setattr(session_mod, "_history_store", NullHistory)
    return path


def test_get_controller_keeps_one_session(monkeypatch, tmp_path):
    _wire(monkeypatch, tmp_path)

    first = session_mod.get_controller()
    second = session_mod.get_controller()

    assert first.session is second.session
    assert first.session.device_id
    assert first.session.state is ControllerState.IDLE


def test_first_load_restores_selected_city(monkeypatch, tmp_path):
    path = _wire(monkeypatch, tmp_path)
    save_selected_city(LocalStorage(path), DENVER)

    ctl = session_mod.get_controller()

    assert ctl.session.selected == DENVER
    assert ctl.session.state is ControllerState.RENDERING
