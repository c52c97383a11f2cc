from __future__ import annotations

import importlib
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from src.models import Location, PresentationState, WeatherSnapshot
from src.viewmodels.dashboard import ControllerState, SessionContext

weather_mod = importlib.import_module("src.ui.card_weather")
clock_mod = importlib.import_module("src.ui.card_clock")

DENVER = Location(name="Denver", state="Colorado", country="US", lat=39.74, lon=-104.99)


def _rendered_session() -> SessionContext:
    session = SessionContext(device_id="dev")
    session.state = ControllerState.RENDERING
    session.selected = DENVER
    session.snapshot = WeatherSnapshot(
        temperature=53.5,
        description="overcast clouds",
        timezone_offset_seconds=-25200,
        name="Denver",
        country="US",
        feels_like=50.0,
        humidity=40,
    )
    session.timezone_offset_seconds = -25200
    session.presentation = PresentationState(
        time_bucket="evening",
        weather_effect="clouds",
        local_time=datetime(2025, 3, 1, 18, 0, tzinfo=timezone(timedelta(hours=-7))),
    )
    return session


def _capture_card(monkeypatch, module) -> dict:
    captured: dict = {}

    def fake_card(title, body_html, height_dvh=16, style=""):
        captured.update(title=title, body=body_html, style=style)

    monkeypatch.setattr(module, "card", fake_card)
    return captured


def test_card_weather_renders_snapshot_with_theme(monkeypatch):
    captured = _capture_card(monkeypatch, weather_mod)

    weather_mod.card_weather(SimpleNamespace(session=_rendered_session()))

    assert "Denver, Colorado, US" in captured["title"]
    assert "54°F" in captured["body"]
    assert "(12°C)" in captured["body"]
    assert "Overcast clouds" in captured["body"]
    assert "Humidity 40%" in captured["body"]
    assert "fx-clouds" in captured["body"]
    assert "#3f2b96" in captured["style"]  # evening gradient


def test_card_weather_without_selection_shows_hint(monkeypatch):
    captured = _capture_card(monkeypatch, weather_mod)

    weather_mod.card_weather(SimpleNamespace(session=SessionContext(device_id="dev")))

    assert captured["title"] == "Weather"
    assert "Search for a city" in captured["body"]


def test_card_clock_uses_city_offset(monkeypatch):
    captured = _capture_card(monkeypatch, clock_mod)
    fixed = datetime(2025, 3, 1, 18, 5, tzinfo=timezone(timedelta(hours=-7)))
    monkeypatch.setattr(clock_mod, "local_time", lambda offset: fixed)

    clock_mod.card_clock(SimpleNamespace(session=_rendered_session()))

    assert "18:05" in captured["body"]
    assert "Good evening" in captured["body"]
    assert "Denver (UTC-7)" in captured["body"]


def test_utc_label_with_minutes():
    assert clock_mod._utc_label(19800) == "UTC+5:30"
    assert clock_mod._utc_label(0) == "UTC+0"
