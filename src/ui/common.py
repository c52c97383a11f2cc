from __future__ import annotations

import html as _html

import streamlit as st

from src.paths import asset_path


def load_css(file_name: str) -> None:
    path = asset_path(file_name)
    if not path.exists():
        return
    with path.open("r", encoding="utf-8") as f:
        st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


def section_title(html: str, mt: int = 10, mb: int = 10) -> None:
    """Render a section title with customizable margins."""
    st.markdown(
        f"<div class='section-title' style='margin:{mt}px 0 {mb}px 0'>{html}</div>",
        unsafe_allow_html=True,
    )


def card(title: str, body_html: str, height_dvh: int = 16, style: str = "") -> None:
    """Render a card with a title and HTML body.

    Args:
        title: Card title text.
        body_html: HTML content for the card body.
        height_dvh: Minimum height in dvh units (default: 16).
        style: Extra inline CSS, e.g. a themed background.
    """
    st.markdown(
        f"""
        <section class="card" style="min-height:{height_dvh}dvh; position:relative; overflow:hidden; {style}">
          <div class="card-title">{title}</div>
          <div class="card-body">{body_html}</div>
        </section>
        """,
        unsafe_allow_html=True,
    )


def esc(text: object) -> str:
    """HTML-escape text coming from an API before it goes into markup."""
    return _html.escape("" if text is None else str(text))
