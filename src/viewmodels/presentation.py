from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from src.config import DAY_START_H, EVENING_START_H, MORNING_START_H, NIGHT_START_H
from src.models import PresentationState, WeatherSnapshot

TIME_BUCKETS: tuple[str, ...] = ("morning", "day", "evening", "night")
WEATHER_EFFECTS: tuple[str, ...] = ("clear", "clouds", "rain", "snow", "other")

# Checked in order: precipitation beats cloud cover ("light rain" on an
# overcast day is still rain).
_EFFECT_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("snow", ("snow", "sleet", "blizzard", "flurr")),
    ("rain", ("rain", "drizzle", "shower", "thunder", "storm")),
    ("clouds", ("cloud", "overcast")),
    ("clear", ("clear", "sun")),
)


def time_bucket(hour: int) -> str:
    """Map a local hour (0–23) to morning/day/evening/night.

    Each boundary hour belongs to the bucket it opens: 5 → morning,
    8 → day, 17 → evening, 20 → night.
    """
    h = int(hour) % 24
    if MORNING_START_H <= h < DAY_START_H:
        return "morning"
    if DAY_START_H <= h < EVENING_START_H:
        return "day"
    if EVENING_START_H <= h < NIGHT_START_H:
        return "evening"
    return "night"


def weather_effect(description: Any, condition: Any = None) -> str:
    """Coarse weather class from the description and condition group. Never raises."""
    text = " ".join(str(v) for v in (description, condition) if isinstance(v, str)).lower()
    if not text:
        return "other"
    for effect, keywords in _EFFECT_KEYWORDS:
        if any(k in text for k in keywords):
            return effect
    return "other"


def local_time(offset_seconds: int, now_utc: datetime | None = None) -> datetime:
    """Current wall-clock time at a place ``offset_seconds`` from UTC."""
    if now_utc is None:
        now_utc = datetime.now(timezone.utc)
    tz = timezone(timedelta(seconds=int(offset_seconds)))
    return now_utc.astimezone(tz)


def derive_presentation(snapshot: WeatherSnapshot, now_utc: datetime | None = None) -> PresentationState:
    local = local_time(snapshot.timezone_offset_seconds, now_utc)
    return PresentationState(
        time_bucket=time_bucket(local.hour),
        weather_effect=weather_effect(snapshot.description, snapshot.condition),
        local_time=local,
    )
