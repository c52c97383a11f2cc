# main.py
"""Main entry point for the WeatherDash Streamlit application."""

import sys
import traceback

import streamlit as st

from src.logger_config import setup_logging
from src.paths import ensure_dirs
from src.ui import card_clock, card_history, card_quote, card_search, card_weather
from src.ui.common import load_css
from src.ui.session import get_controller

ensure_dirs()

logger = setup_logging()


def main() -> None:
    """Initialize and render the WeatherDash layout."""
    try:
        st.set_page_config(
            page_title="WeatherDash",
            layout="wide",
            page_icon="🌤️",
        )
        load_css("style.css")

        controller = get_controller()

        # Row 1: search (runs first so the cards below see the new state)
        card_search(controller)

        # Row 2: weather + clock
        col1, col2 = st.columns([2, 1], gap="small")
        with col1:
            card_weather(controller)
        with col2:
            card_clock(controller)

        # Row 3: quote of the day
        card_quote(controller)

        # Row 4: location history
        with st.expander("Recent cities", expanded=False):
            card_history(controller)

    except KeyboardInterrupt:
        logger.info("WeatherDash shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
