# src/ui/card_weather.py
from __future__ import annotations

from src.ui.common import card, esc
from src.utils_colors import background_for, effect_class, effect_icon
from src.viewmodels.dashboard import DashboardController


def _fahrenheit_to_celsius(temp_f: float) -> float:
    return (temp_f - 32.0) * 5.0 / 9.0


def card_weather(controller: DashboardController) -> None:
    """Current conditions for the selected city, themed by time of day and weather."""
    session = controller.session
    try:
        snapshot = session.snapshot
        if session.selected is None or snapshot is None:
            card("Weather", "<span class='hint'>Search for a city to see its weather.</span>", height_dvh=15)
            return

        pres = session.presentation
        bucket = pres.time_bucket if pres else None
        effect = pres.weather_effect if pres else None

        extras: list[str] = []
        if snapshot.feels_like is not None:
            extras.append(f"Feels like {round(snapshot.feels_like)}°F")
        if snapshot.humidity is not None:
            extras.append(f"Humidity {snapshot.humidity}%")

        body = f"""
            <div class="weather-now {effect_class(effect)}">
              <div class="icon" style="font-size:2.6rem;">{effect_icon(effect)}</div>
              <div class="temp" style="font-size:2.2rem;">{round(snapshot.temperature)}°F
                <span class="sub">({round(_fahrenheit_to_celsius(snapshot.temperature))}°C)</span>
              </div>
              <div class="desc">{esc(snapshot.description.capitalize())}</div>
              <div class="sub">{esc(" · ".join(extras))}</div>
            </div>
        """
        title = f"🌤️ {esc(session.selected.display_name)}"
        card(title, body, height_dvh=15, style=f"background:{background_for(bucket)};")
    except Exception as e:
        card("Weather", f"<span class='hint'>Error: {esc(e)}</span>", height_dvh=15)
