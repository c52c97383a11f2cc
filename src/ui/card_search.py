# src/ui/card_search.py
from __future__ import annotations

import streamlit as st

from src.ui.common import card, esc
from src.viewmodels.dashboard import ControllerState, DashboardController


def card_search(controller: DashboardController) -> None:
    """City search box, the "which one did you mean?" list and inline errors."""
    try:
        with st.form("city_search", clear_on_submit=False):
            query = st.text_input("City", placeholder="e.g. Denver", label_visibility="collapsed")
            submitted = st.form_submit_button("Search")
        if submitted:
            controller.submit_query(query)

        session = controller.session
        if session.state is ControllerState.DISAMBIGUATING:
            st.markdown("<div class='hint'>Which one did you mean?</div>", unsafe_allow_html=True)
            for i, loc in enumerate(session.candidates):
                if st.button(loc.display_name, key=f"pick-{i}-{session.generation}"):
                    controller.pick(i)
                    st.rerun()

        if session.error:
            card("Search", f"<span class='hint'>{esc(session.error)}</span>", height_dvh=6)
    except Exception as e:
        card("Search", f"<span class='hint'>Error: {esc(e)}</span>", height_dvh=6)
