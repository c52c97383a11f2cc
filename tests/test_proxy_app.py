from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import src.proxy.handlers as handlers
from src.proxy.app import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(handlers, "openweather_api_key", lambda: "secret")
    return TestClient(create_app())


def test_geocode_route_returns_candidates_with_cors(monkeypatch, client):
    upstream = [{"name": "Springfield", "state": "Illinois", "country": "US", "lat": 39.8, "lon": -89.6}]
    monkeypatch.setattr(handlers, "forward_get", lambda url, params: (200, upstream))

    resp = client.get("/geocode", params={"q": "Springfield"})

    assert resp.status_code == 200
    assert resp.json() == upstream
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "GET" in resp.headers["access-control-allow-methods"]


def test_geocode_route_missing_q(client):
    resp = client.get("/geocode")

    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing q (city name) parameter"}
    assert resp.headers["access-control-allow-origin"] == "*"


def test_weather_route_missing_lon(client):
    resp = client.get("/weather", params={"lat": "39.7"})

    assert resp.status_code == 400
    assert "lat or lon" in resp.json()["error"]


def test_weather_route_missing_key(monkeypatch):
    monkeypatch.setattr(handlers, "openweather_api_key", lambda: None)
    client = TestClient(create_app())

    resp = client.get("/api/weather", params={"lat": "39.7", "lon": "-104.9"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "API key not configured"}


@pytest.mark.parametrize("path", ["/geocode", "/weather", "/api/geocode"])
def test_preflight_is_empty_200(client, path):
    resp = client.options(path)

    assert resp.status_code == 200
    assert resp.content == b""
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-headers"] == "Content-Type"
