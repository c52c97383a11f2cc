"""
Request handlers behind GET /geocode and GET /weather.

The handlers are framework-free: they take the raw query values and return a
ProxyResponse (status + JSON body). Checks run in a fixed order:
missing parameters (400) -> missing API key (500) -> upstream call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from src.api.http import forward_get
from src.config import (
    GEOCODE_LIMIT,
    OPENWEATHER_GEOCODE_URL,
    OPENWEATHER_WEATHER_URL,
    WEATHER_UNITS,
    openweather_api_key,
)
from src.errors import ConfigurationError, UpstreamError, ValidationError

logger = logging.getLogger("weatherdash")


@dataclass
class ProxyResponse:
    status: int
    body: Any


def _blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


def _require_api_key() -> str:
    api_key = openweather_api_key()
    if not api_key:
        raise ConfigurationError("API key not configured")
    return api_key


def _forward(url: str, params: dict[str, Any]) -> Any:
    status, body = forward_get(url, params)
    if not 200 <= status < 300:
        raise UpstreamError(f"upstream returned {status}", status=status, body=body)
    return body


def _error_response(e: Exception, fallback_message: str) -> ProxyResponse:
    if isinstance(e, ValidationError):
        return ProxyResponse(400, {"error": str(e)})
    if isinstance(e, ConfigurationError):
        logger.error("Proxy misconfigured: %s", e)
        return ProxyResponse(500, {"error": str(e)})
    if isinstance(e, UpstreamError) and e.body is not None:
        # pass the provider's status and body through untouched
        return ProxyResponse(e.status, e.body)
    logger.warning("%s: %s", fallback_message, e)
    return ProxyResponse(500, {"error": fallback_message})


def handle_geocode(q: str | None) -> ProxyResponse:
    """Resolve free text to up to GEOCODE_LIMIT candidates, in upstream order."""
    try:
        if _blank(q):
            raise ValidationError("Missing q (city name) parameter")
        api_key = _require_api_key()
        body = _forward(
            OPENWEATHER_GEOCODE_URL,
            {"q": str(q).strip(), "limit": GEOCODE_LIMIT, "appid": api_key},
        )
        return ProxyResponse(200, body)
    except (ValidationError, ConfigurationError, UpstreamError) as e:
        return _error_response(e, "Failed to fetch geocoding data")


def handle_weather(lat: str | None, lon: str | None) -> ProxyResponse:
    """Current conditions for (lat, lon), imperial units, body returned as-is."""
    try:
        if _blank(lat) or _blank(lon):
            raise ValidationError("Missing lat or lon parameter")
        api_key = _require_api_key()
        body = _forward(
            OPENWEATHER_WEATHER_URL,
            {"lat": lat, "lon": lon, "appid": api_key, "units": WEATHER_UNITS},
        )
        return ProxyResponse(200, body)
    except (ValidationError, ConfigurationError, UpstreamError) as e:
        return _error_response(e, "Failed to fetch weather data")
