"""Dashboard-side client for the /geocode and /weather proxy endpoints."""

from __future__ import annotations

import logging
from typing import Any

from src.api.http import forward_get
from src.config import PROXY_BASE_URL
from src.errors import ConfigurationError, UpstreamError, ValidationError
from src.models import Location, WeatherSnapshot

logger = logging.getLogger("weatherdash")


def _error_message(body: Any, status: int) -> str:
    if isinstance(body, dict):
        # our own envelope uses "error", the provider uses "message"
        msg = body.get("error") or body.get("message")
        if msg:
            return str(msg)
    return f"HTTP {status}"


def _raise_for_status(status: int, body: Any) -> None:
    if status == 200:
        return
    msg = _error_message(body, status)
    if status == 400:
        raise ValidationError(msg)
    if status == 500 and msg == "API key not configured":
        raise ConfigurationError(msg)
    raise UpstreamError(msg, status=status, body=body)


class ProxyClient:
    def __init__(self, base_url: str = PROXY_BASE_URL) -> None:
        self.base_url = base_url.rstrip("/")

    def geocode(self, query: str) -> list[Location]:
        """Candidates for ``query`` in the order the provider ranked them."""
        status, body = forward_get(f"{self.base_url}/geocode", {"q": query})
        _raise_for_status(status, body)
        if not isinstance(body, list):
            raise UpstreamError("geocode returned an unexpected payload", status=status, body=body)

        out: list[Location] = []
        seen: set[Location] = set()
        for item in body:
            try:
                location = Location.from_payload(item)
            except ValidationError as e:
                logger.warning("Skipping unusable geocode candidate %r: %s", item, e)
                continue
            if location in seen:
                continue
            seen.add(location)
            out.append(location)
        return out

    def fetch_weather(self, lat: float, lon: float) -> WeatherSnapshot:
        status, body = forward_get(f"{self.base_url}/weather", {"lat": lat, "lon": lon})
        _raise_for_status(status, body)
        return WeatherSnapshot.from_payload(body)
