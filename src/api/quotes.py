# src/api/quotes.py
import logging

import streamlit as st

from src.api.http import http_get_json
from src.config import CACHE_TTL_LONG, HTTP_TIMEOUT_S
from src.utils import report_error

logger = logging.getLogger("weatherdash")

LOCAL_QUOTES: list[dict[str, str]] = [
    {"text": "Wherever you go, no matter what the weather, always bring your own sunshine.", "author": "Anthony J. D'Angelo"},
    {"text": "Climate is what we expect, weather is what we get.", "author": "Mark Twain"},
    {"text": "There is no such thing as bad weather, only different kinds of good weather.", "author": "John Ruskin"},
    {"text": "Sunshine is delicious, rain is refreshing, wind braces us up, snow is exhilarating.", "author": "John Ruskin"},
]


def _from_zenquotes() -> dict[str, str] | None:
    try:
        data = http_get_json("https://zenquotes.io/api/today", timeout=HTTP_TIMEOUT_S)
        if isinstance(data, list) and data:
            q = data[0]
            return {"text": q.get("q", ""), "author": q.get("a", ""), "source": "zenquotes"}
        logger.warning("Quote: unexpected zenquotes payload: %r", data)
    except Exception as e:
        report_error("quote: zenquotes-today", e)
    return None


def _from_quotable() -> dict[str, str] | None:
    try:
        data = http_get_json(
            "https://api.quotable.io/random?tags=wisdom|life|inspirational",
            timeout=HTTP_TIMEOUT_S,
        )
        return {"text": data.get("content", ""), "author": data.get("author", ""), "source": "quotable"}
    except Exception as e:
        report_error("quote: quotable", e)
    return None


@st.cache_data(ttl=CACHE_TTL_LONG)
def fetch_daily_quote(day_iso: str) -> dict[str, str]:
    """Quote of the day: ZenQuotes, then Quotable, then a local one picked by date."""
    if quote := _from_zenquotes():
        return quote
    if quote := _from_quotable():
        return quote
    idx = sum(map(ord, day_iso)) % len(LOCAL_QUOTES)
    out = dict(LOCAL_QUOTES[idx])
    out["source"] = "local"
    logger.info("Quote: using local fallback for %s", day_iso)
    return out
