"""Configuration settings for the weather dashboard and its proxy endpoints."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import streamlit as st

from src.paths import data_path

logger = logging.getLogger("weatherdash")

HTTP_TIMEOUT_S: float = 8.0
CACHE_TTL_SHORT: int = 60
CACHE_TTL_LONG: int = 3600

DEV: bool = os.environ.get("DEV", "0") == "1"

USER_AGENT: str = "WeatherDash/1.0"

# ------------------- UPSTREAM PROVIDER (OpenWeatherMap) -------------------

OPENWEATHER_GEOCODE_URL: str = "https://api.openweathermap.org/geo/1.0/direct"
OPENWEATHER_WEATHER_URL: str = "https://api.openweathermap.org/data/2.5/weather"

GEOCODE_LIMIT: int = 5
"""Maximum number of candidate locations requested from the geocoder."""

WEATHER_UNITS: str = "imperial"
"""Temperatures come back in Fahrenheit."""

API_KEY_NAME: str = "OPENWEATHER_API_KEY"

# ------------------- PROXY -------------------

PROXY_BASE_URL: str = os.getenv("PROXY_BASE_URL", "http://127.0.0.1:8000").rstrip("/")
"""Where the dashboard finds the /geocode and /weather endpoints."""

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# ------------------- STORAGE -------------------

HISTORY_DB_FILE: Path = Path(os.getenv("HISTORY_DB_FILE", str(data_path("location_history.db"))))
"""SQLite file holding the location_history table."""

CLIENT_STORE_FILE: Path = Path(os.getenv("CLIENT_STORE_FILE", str(data_path("client_storage.json"))))
"""Local key/value file for selectedCity and deviceId."""

# ------------------- TIME BUCKETS -------------------

MORNING_START_H: int = 5
DAY_START_H: int = 8
EVENING_START_H: int = 17
NIGHT_START_H: int = 20
"""Local hours that open each time-of-day bucket."""


def get_secret(name: str) -> str | None:
    """Read a setting from Streamlit secrets, falling back to the environment."""
    try:
        if isinstance(st.secrets, Mapping) and name in st.secrets:
            secret_val = st.secrets.get(name)
            if secret_val is not None and str(secret_val).strip():
                return str(secret_val).strip()
    except Exception as e:
        # no secrets.toml outside `streamlit run`
        logger.debug("Secrets lookup for %s failed: %s", name, e)

    val = os.getenv(name)
    if val is not None and val.strip():
        return val.strip()

    return None


def openweather_api_key() -> str | None:
    """Server-held upstream credential, read on every request."""
    return get_secret(API_KEY_NAME)
