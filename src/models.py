from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from src.errors import UpstreamError, ValidationError


def format_display_name(name: str, state: str | None, country: str) -> str:
    """Build e.g. "Denver, Colorado, US"; the state part is left out when empty."""
    parts = [name, state or "", country]
    return ", ".join(p for p in (s.strip() for s in parts) if p)


def _coord(value: Any, field: str, limit: float) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number, got {value!r}") from None
    if not math.isfinite(out) or not -limit <= out <= limit:
        raise ValidationError(f"{field} out of range: {value!r}")
    return out


@dataclass(frozen=True)
class Location:
    """A resolved place, as returned by the geocoder."""

    name: str
    country: str
    lat: float
    lon: float
    state: str | None = None

    @classmethod
    def from_payload(cls, item: dict[str, Any]) -> Location:
        if not isinstance(item, dict):
            raise ValidationError(f"location must be an object, got {type(item).__name__}")
        name = str(item.get("name") or "").strip()
        if not name:
            raise ValidationError("location is missing a name")
        state = str(item.get("state") or "").strip()
        return cls(
            name=name,
            country=str(item.get("country") or "").strip(),
            lat=_coord(item.get("lat"), "lat", 90.0),
            lon=_coord(item.get("lon"), "lon", 180.0),
            state=state or None,
        )

    @property
    def display_name(self) -> str:
        return format_display_name(self.name, self.state, self.country)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LocationHistoryRecord:
    device_id: str
    city_name: str
    state: str | None
    country: str
    lat: float
    lon: float
    display_name: str
    first_used: datetime

    @classmethod
    def for_location(cls, device_id: str, location: Location, first_used: datetime) -> LocationHistoryRecord:
        return cls(
            device_id=device_id,
            city_name=location.name,
            state=location.state,
            country=location.country,
            lat=location.lat,
            lon=location.lon,
            display_name=location.display_name,
            first_used=first_used,
        )

    def to_location(self) -> Location:
        return Location(
            name=self.city_name,
            country=self.country,
            lat=self.lat,
            lon=self.lon,
            state=self.state,
        )


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for one render cycle. Temperatures in °F."""

    temperature: float
    description: str
    timezone_offset_seconds: int
    name: str
    country: str
    condition: str | None = None
    feels_like: float | None = None
    humidity: int | None = None
    icon: str | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> WeatherSnapshot:
        """Parse the upstream current-weather body.

        Raises UpstreamError when one of main.temp, weather[0].description,
        name, sys.country or timezone is missing.
        """
        try:
            main = data["main"]
            weather = (data.get("weather") or [{}])[0]
            return cls(
                temperature=float(main["temp"]),
                description=str(weather["description"]),
                timezone_offset_seconds=int(data["timezone"]),
                name=str(data["name"]),
                country=str(data["sys"]["country"]),
                condition=weather.get("main"),
                feels_like=_maybe_float(main.get("feels_like")),
                humidity=_maybe_int(main.get("humidity")),
                icon=weather.get("icon"),
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise UpstreamError(f"Unexpected weather payload: {e!r}", body=data) from e


@dataclass(frozen=True)
class PresentationState:
    time_bucket: str  # morning / day / evening / night
    weather_effect: str  # clear / clouds / rain / snow / other
    local_time: datetime


def _maybe_float(value: Any) -> float | None:
    try:
        return None if value is None else float(value)
    except (TypeError, ValueError):
        return None


def _maybe_int(value: Any) -> int | None:
    try:
        return None if value is None else int(value)
    except (TypeError, ValueError):
        return None
