"""Page navigation controls."""

from __future__ import annotations

from typing import Optional

import streamlit as st

from artwork_gallery.utils.pagination import clamp_page_number


def render_pager(current_page: int, total_pages: int, loading: bool) -> Optional[int]:
    """Render previous/next controls and return the requested page, if any."""
    prev_col, page_col, next_col = st.columns([1, 2, 1])

    requested: Optional[int] = None
    with prev_col:
        if st.button("Previous", disabled=loading or current_page <= 1, width="stretch"):
            requested = current_page - 1
    with next_col:
        if st.button("Next", disabled=loading or current_page >= total_pages, width="stretch"):
            requested = current_page + 1
    with page_col:
        typed_page = st.number_input(
            f"Page (of {total_pages})",
            min_value=1,
            max_value=max(total_pages, 1),
            value=clamp_page_number(current_page, total_pages),
            step=1,
            key=f"page_input_{current_page}",
            disabled=loading,
        )

    if requested is None and int(typed_page) != current_page:
        requested = int(typed_page)

    if requested is None:
        return None
    return clamp_page_number(requested, total_pages)
