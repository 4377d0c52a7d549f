"""Top navigation bar component."""

from __future__ import annotations

import streamlit as st


def render_navbar(total_selected: int) -> None:
    """Render the gallery header with the running selection count."""
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">Art Institute of Chicago Gallery</div>
            <div class="navbar-meta">Selected {total_selected} rows</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
