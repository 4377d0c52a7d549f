"""Popover for selecting the first N rows across pages."""

from __future__ import annotations

from typing import Optional, Tuple

import streamlit as st

COUNT_INPUT_KEY = "custom_count_input"


def render_count_panel(error_message: Optional[str] = None) -> Tuple[bool, object]:
    """Render the row-count popover and return the submit action with the raw value."""
    with st.popover("Select rows", icon=":material/expand_more:"):
        with st.form("custom_count_form", clear_on_submit=False, border=False):
            st.markdown(
                '<div class="count-field-label">Select Multiple Rows</div>',
                unsafe_allow_html=True,
            )
            raw_value = st.number_input(
                "Select Multiple Rows",
                min_value=None,
                value=None,
                step=1,
                placeholder="Enter row count...",
                key=COUNT_INPUT_KEY,
                label_visibility="collapsed",
            )
            submitted = st.form_submit_button("Select", type="primary")

        if error_message:
            st.error(error_message)

    return submitted, raw_value
