"""
Dashboard controller: city resolution, history sync and weather fetch.

One SessionContext per dashboard session holds everything the controller
mutates. Each query or selection bumps ``generation``; a response that comes
back after the generation has moved on belongs to a superseded request and
is dropped instead of rendered.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Protocol

from src.client_storage import (
    SELECTED_CITY_KEY,
    LocalStorage,
    load_selected_city,
    save_selected_city,
)
from src.errors import DashboardError
from src.models import Location, LocationHistoryRecord, PresentationState, WeatherSnapshot
from src.viewmodels.presentation import derive_presentation

logger = logging.getLogger("weatherdash")


class ControllerState(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    DISAMBIGUATING = "disambiguating"
    SELECTED = "selected"
    RENDERING = "rendering"


class WeatherSource(Protocol):
    def geocode(self, query: str) -> list[Location]: ...

    def fetch_weather(self, lat: float, lon: float) -> WeatherSnapshot: ...


class HistoryStore(Protocol):
    def save(self, device_id: str, location: Location) -> bool: ...

    def list_by_device(self, device_id: str) -> list[LocationHistoryRecord]: ...


@dataclass
class SessionContext:
    """State of one dashboard session.

    Created on first load with the device id, read and written only by the
    controller, and cleared only through DashboardController.reset().
    """

    device_id: str
    state: ControllerState = ControllerState.IDLE
    selected: Location | None = None
    candidates: list[Location] = field(default_factory=list)
    snapshot: WeatherSnapshot | None = None
    presentation: PresentationState | None = None
    timezone_offset_seconds: int = 0
    error: str | None = None
    generation: int = 0

    def next_generation(self) -> int:
        self.generation += 1
        return self.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.generation


def _spawn_daemon(fn: Callable[..., Any], *args: Any) -> None:
    threading.Thread(target=fn, args=args, daemon=True).start()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DashboardController:
    def __init__(
        self,
        session: SessionContext,
        source: WeatherSource,
        history: HistoryStore,
        storage: LocalStorage,
        spawn: Callable[..., None] = _spawn_daemon,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.session = session
        self.source = source
        self.history = history
        self.storage = storage
        self._spawn = spawn
        self._clock = clock

    # --- transitions -------------------------------------------------------

    def submit_query(self, query: str) -> ControllerState:
        """Idle → Resolving → (Idle | Disambiguating | Selected → ...)."""
        s = self.session
        generation = s.next_generation()
        s.state = ControllerState.RESOLVING
        s.candidates = []
        s.error = None

        query = (query or "").strip()
        if not query:
            return self._fail("Please enter a city name.")

        try:
            candidates = self.source.geocode(query)
        except DashboardError as e:
            if not s.is_current(generation):
                return self._discard("geocode", generation)
            logger.warning("Geocoding %r failed: %s", query, e)
            return self._fail(f"Could not look up {query!r}: {e}")

        if not s.is_current(generation):
            return self._discard("geocode", generation)

        if not candidates:
            return self._fail(f"No matches for {query!r}.")
        if len(candidates) == 1:
            return self.select(candidates[0])

        s.candidates = list(candidates)
        s.state = ControllerState.DISAMBIGUATING
        return s.state

    def pick(self, index: int) -> ControllerState:
        """Disambiguating → Selected, choosing one of the offered candidates."""
        s = self.session
        if s.state is not ControllerState.DISAMBIGUATING:
            raise DashboardError(f"nothing to pick from in state {s.state.value}")
        if not 0 <= index < len(s.candidates):
            raise IndexError(f"candidate {index} out of range (0..{len(s.candidates) - 1})")
        return self.select(s.candidates[index])

    def select(self, location: Location) -> ControllerState:
        """Selected → Rendering | Idle.

        The history save runs in the background; the weather fetch does not
        wait for it and a failed save never reaches the user.
        """
        s = self.session
        generation = s.next_generation()
        s.state = ControllerState.SELECTED
        s.selected = location
        s.candidates = []
        s.error = None
        # conditions of the previous city never outlive its selection
        s.snapshot = None
        s.presentation = None
        s.timezone_offset_seconds = 0

        self._spawn(self._save_history, s.device_id, location)

        try:
            snapshot = self.source.fetch_weather(location.lat, location.lon)
        except DashboardError as e:
            if not s.is_current(generation):
                return self._discard("weather", generation)
            logger.warning("Weather for %s failed: %s", location.display_name, e)
            return self._fail(f"Could not load weather for {location.display_name}: {e}")

        if not s.is_current(generation):
            return self._discard("weather", generation)

        return self._render(location, snapshot)

    def select_history(self, record: LocationHistoryRecord) -> ControllerState:
        """Re-enter at Selected with stored coordinates, skipping the geocoder."""
        return self.select(record.to_location())

    def restore(self) -> ControllerState:
        """Reload the last selected city from local storage on first load."""
        if self.session.selected is None:
            location = load_selected_city(self.storage)
            if location is not None:
                return self.select(location)
        return self.session.state

    def reset(self) -> None:
        s = self.session
        s.next_generation()
        s.state = ControllerState.IDLE
        s.selected = None
        s.candidates = []
        s.snapshot = None
        s.presentation = None
        s.timezone_offset_seconds = 0
        s.error = None
        self.storage.remove(SELECTED_CITY_KEY)

    # --- history -----------------------------------------------------------

    def load_history(self) -> list[LocationHistoryRecord]:
        try:
            return self.history.list_by_device(self.session.device_id)
        except DashboardError as e:
            logger.warning("Loading history failed: %s", e)
            return []

    def _save_history(self, device_id: str, location: Location) -> None:
        try:
            self.history.save(device_id, location)
        except DashboardError as e:
            logger.warning("Saving %s to history failed: %s", location.display_name, e)

    # --- helpers -----------------------------------------------------------

    def _render(self, location: Location, snapshot: WeatherSnapshot) -> ControllerState:
        s = self.session
        s.snapshot = snapshot
        s.timezone_offset_seconds = snapshot.timezone_offset_seconds
        s.presentation = derive_presentation(snapshot, self._clock())
        s.state = ControllerState.RENDERING
        try:
            save_selected_city(self.storage, location)
        except OSError as e:
            logger.warning("Could not remember %s locally: %s", location.display_name, e)
        logger.info(
            "Rendering %s: %.1f°F, %s (%s/%s)",
            location.display_name,
            snapshot.temperature,
            snapshot.description,
            s.presentation.time_bucket,
            s.presentation.weather_effect,
        )
        return s.state

    def _fail(self, message: str) -> ControllerState:
        self.session.error = message
        self.session.state = ControllerState.IDLE
        return self.session.state

    def _discard(self, what: str, generation: int) -> ControllerState:
        logger.info(
            "Dropping stale %s response (generation %s, current %s)",
            what,
            generation,
            self.session.generation,
        )
        return self.session.state
