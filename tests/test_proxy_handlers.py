from __future__ import annotations

import pytest

import src.proxy.handlers as handlers
from src.errors import UpstreamError


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(handlers, "openweather_api_key", lambda: "secret")


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(handlers, "openweather_api_key", lambda: None)


def _no_upstream(*a, **k):
    raise AssertionError("upstream should not be called")


# ---------- geocode ----------


@pytest.mark.parametrize("q", [None, "", "   "])
def test_geocode_missing_q_is_400(monkeypatch, api_key, q):
    monkeypatch.setattr(handlers, "forward_get", _no_upstream)

    resp = handlers.handle_geocode(q)

    assert resp.status == 400
    assert resp.body == {"error": "Missing q (city name) parameter"}


def test_geocode_missing_q_wins_over_missing_key(monkeypatch, no_api_key):
    monkeypatch.setattr(handlers, "forward_get", _no_upstream)

    assert handlers.handle_geocode(None).status == 400


def test_geocode_missing_key_is_500(monkeypatch, no_api_key):
    monkeypatch.setattr(handlers, "forward_get", _no_upstream)

    resp = handlers.handle_geocode("Denver")

    assert resp.status == 500
    assert resp.body == {"error": "API key not configured"}


def test_geocode_forwards_query_with_limit(monkeypatch, api_key):
    captured = {}
    upstream = [{"name": "Denver", "country": "US", "lat": 39.7, "lon": -104.9}]

    def fake_forward(url, params):
        captured["url"] = url
        captured["params"] = params
        return 200, upstream

    monkeypatch.setattr(handlers, "forward_get", fake_forward)

    resp = handlers.handle_geocode("Denver")

    assert resp.status == 200
    assert resp.body == upstream
    assert captured["url"].endswith("/geo/1.0/direct")
    assert captured["params"] == {"q": "Denver", "limit": 5, "appid": "secret"}


def test_geocode_passes_upstream_failure_through(monkeypatch, api_key):
    body = {"cod": 401, "message": "Invalid API key"}
    monkeypatch.setattr(handlers, "forward_get", lambda url, params: (401, body))

    resp = handlers.handle_geocode("Denver")

    assert resp.status == 401
    assert resp.body is body


def test_geocode_network_failure_is_generic_500(monkeypatch, api_key):
    def boom(url, params):
        raise UpstreamError("connection refused")

    monkeypatch.setattr(handlers, "forward_get", boom)

    resp = handlers.handle_geocode("Denver")

    assert resp.status == 500
    assert resp.body == {"error": "Failed to fetch geocoding data"}


# ---------- weather ----------


@pytest.mark.parametrize("lat,lon", [(None, "-104.99"), ("39.7", None), ("", ""), (None, None)])
def test_weather_missing_coords_is_400(monkeypatch, no_api_key, lat, lon):
    monkeypatch.setattr(handlers, "forward_get", _no_upstream)

    resp = handlers.handle_weather(lat, lon)

    assert resp.status == 400
    assert resp.body == {"error": "Missing lat or lon parameter"}


def test_weather_missing_key_is_500(monkeypatch, no_api_key):
    monkeypatch.setattr(handlers, "forward_get", _no_upstream)

    resp = handlers.handle_weather("39.7", "-104.9")

    assert resp.status == 500
    assert resp.body == {"error": "API key not configured"}


def test_weather_requests_imperial_and_returns_body_unchanged(monkeypatch, api_key):
    captured = {}
    upstream = {"main": {"temp": 53.5}, "weather": [{"description": "overcast clouds"}], "timezone": -25200}

    def fake_forward(url, params):
        captured["url"] = url
        captured["params"] = params
        return 200, upstream

    monkeypatch.setattr(handlers, "forward_get", fake_forward)

    resp = handlers.handle_weather("39.7392358", "-104.990251")

    assert resp.status == 200
    assert resp.body == upstream
    assert captured["url"].endswith("/data/2.5/weather")
    assert captured["params"]["units"] == "imperial"
    assert captured["params"]["lat"] == "39.7392358"
    assert captured["params"]["appid"] == "secret"


def test_weather_network_failure_is_generic_500(monkeypatch, api_key):
    def boom(url, params):
        raise UpstreamError("timeout")

    monkeypatch.setattr(handlers, "forward_get", boom)

    resp = handlers.handle_weather("1", "2")

    assert resp.status == 500
    assert resp.body == {"error": "Failed to fetch weather data"}
