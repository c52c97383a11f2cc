# src/ui/card_history.py
from __future__ import annotations

import streamlit as st

from src.ui.common import card, esc, section_title
from src.viewmodels.dashboard import DashboardController


def card_history(controller: DashboardController) -> None:
    """Cities this device has used, newest first; clicking one reloads it."""
    try:
        section_title("📍 Recent cities", mb=4)
        records = controller.load_history()
        if not records:
            st.markdown("<span class='hint'>No saved cities yet.</span>", unsafe_allow_html=True)
            return

        for record in records:
            label = f"{record.display_name} · since {record.first_used:%Y-%m-%d}"
            if st.button(label, key=f"history-{record.lat}-{record.lon}"):
                controller.select_history(record)
                st.rerun()
    except Exception as e:
        card("Recent cities", f"<span class='hint'>Error: {esc(e)}</span>", height_dvh=8)
