# src/ui/card_clock.py
from __future__ import annotations

from datetime import datetime

from src.ui.common import card, esc
from src.utils_colors import TIME_BUCKET_LABELS
from src.viewmodels.dashboard import DashboardController
from src.viewmodels.presentation import local_time, time_bucket


def _utc_label(offset_seconds: int) -> str:
    sign = "+" if offset_seconds >= 0 else "-"
    hours, rem = divmod(abs(int(offset_seconds)), 3600)
    minutes = rem // 60
    return f"UTC{sign}{hours}" if not minutes else f"UTC{sign}{hours}:{minutes:02d}"


def card_clock(controller: DashboardController) -> None:
    """Local time at the selected city, or the machine clock before a selection."""
    session = controller.session
    try:
        if session.selected is not None and session.snapshot is not None:
            now = local_time(session.timezone_offset_seconds)
            where = f"{esc(session.selected.name)} ({_utc_label(session.timezone_offset_seconds)})"
        else:
            now = datetime.now().astimezone()
            where = "Local time"

        greeting = TIME_BUCKET_LABELS[time_bucket(now.hour)]
        body = f"""
            <div class="clock" style="font-size:2.4rem;">{now:%H:%M}</div>
            <div class="sub">{now:%A %d %B %Y}</div>
            <div class="hint">{greeting} · {where}</div>
        """
        card("🕒 Time", body, height_dvh=12)
    except Exception as e:
        card("🕒 Time", f"<span class='hint'>Error: {esc(e)}</span>", height_dvh=12)
