# src/ui/card_quote.py
from __future__ import annotations

from datetime import date, datetime

from src.api import fetch_daily_quote
from src.ui.common import card, esc
from src.utils_colors import background_for, effect_icon
from src.viewmodels.dashboard import DashboardController
from src.viewmodels.presentation import local_time


def quote_day(controller: DashboardController) -> date:
    """The day the quote belongs to: the selected city's date once weather is in."""
    session = controller.session
    if session.selected is not None and session.snapshot is not None:
        return local_time(session.timezone_offset_seconds).date()
    return datetime.now().astimezone().date()


def card_quote(controller: DashboardController) -> None:
    """Quote of the day, dressed in the current city's time-of-day theme."""
    try:
        quote = fetch_daily_quote(quote_day(controller).isoformat())
        text = esc((quote.get("text") or "").strip())
        author = esc((quote.get("author") or "").strip())

        pres = controller.session.presentation
        icon = effect_icon(pres.weather_effect) if pres else ""
        bucket = pres.time_bucket if pres else None

        body = f"""
            <div style="display:flex; justify-content:center; align-items:center; text-align:center; line-height:1.35;">
              <div><em>“{text}”</em>{(" — " + author) if author else ""}</div>
            </div>
        """
        card(
            f"{icon} Quote of the day".strip(),
            body,
            height_dvh=12,
            style=f"background:{background_for(bucket)};",
        )
    except Exception as e:
        card("Quote of the day", f"<span class='hint'>No quote available: {esc(e)}</span>", height_dvh=12)
