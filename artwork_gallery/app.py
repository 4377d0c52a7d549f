"""Streamlit app entrypoint for the Art Institute of Chicago gallery."""

from __future__ import annotations

import asyncio
from typing import List, Tuple

import streamlit as st

from artwork_gallery.components.count_panel import COUNT_INPUT_KEY, render_count_panel
from artwork_gallery.components.navbar import render_navbar
from artwork_gallery.components.pager import render_pager
from artwork_gallery.components.table import editor_key, render_footer, render_table
from artwork_gallery.config import ASSETS_DIR, DEFAULT_PAGE_SIZE
from artwork_gallery.models import LoadState
from artwork_gallery.services.data_loader import ArticPageLoader
from artwork_gallery.services.session_service import GallerySession
from artwork_gallery.utils.logging_config import get_logger, setup_logging


st.set_page_config(page_title="Art Institute of Chicago Gallery", layout="wide")

logger = get_logger("app")


@st.cache_resource(show_spinner=False)
def configure_logging() -> None:
    """Install log handlers once per server process."""
    setup_logging()


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def init_session_state() -> None:
    """Initialize required session-state variables."""
    if "gallery" not in st.session_state:
        st.session_state["gallery"] = GallerySession(ArticPageLoader(), page_size=DEFAULT_PAGE_SIZE)
    st.session_state.setdefault("notifications", [])
    st.session_state.setdefault("count_error", None)


def queue_notification(level: str, message: str) -> None:
    """Queue a UI notification for display on the next render pass."""
    st.session_state["notifications"].append((level, message))


def show_notifications() -> None:
    """Render queued status messages then clear the queue."""
    notifications: List[Tuple[str, str]] = st.session_state.get("notifications", [])
    if not notifications:
        return

    for level, message in notifications:
        if level == "success":
            st.success(message)
        elif level == "warning":
            st.warning(message)
        else:
            st.info(message)

    st.session_state["notifications"] = []


def reset_table_editor(page_index: int) -> None:
    """Drop editor widget state so the table re-renders from the derived selection."""
    st.session_state.pop(editor_key(page_index), None)


def load_page(gallery: GallerySession, page_index: int) -> None:
    """Load a page synchronously from the script's point of view."""
    with st.spinner(f"Loading page {page_index}..."):
        outcome = asyncio.run(gallery.on_page_change(page_index))
    if outcome.committed:
        reset_table_editor(page_index)


def retry_load(gallery: GallerySession) -> None:
    """Retry the most recently requested page."""
    with st.spinner("Retrying..."):
        outcome = asyncio.run(gallery.retry())
    if outcome.committed:
        reset_table_editor(outcome.page_index)
        queue_notification("success", f"Page {outcome.page_index} loaded.")


def handle_count_submit(gallery: GallerySession, raw_value: object) -> None:
    """Apply a submitted row count or keep the popover error."""
    ok, error_message = gallery.on_custom_count_submit(raw_value)
    if not ok:
        st.session_state["count_error"] = error_message
        return

    st.session_state["count_error"] = None
    st.session_state.pop(COUNT_INPUT_KEY, None)
    reset_table_editor(gallery.current_page)
    queue_notification("success", f"Selected the first {gallery.selection.virtual_count} rows.")


def main() -> None:
    """Render and run the gallery."""
    configure_logging()
    load_css()
    init_session_state()

    gallery: GallerySession = st.session_state["gallery"]
    if gallery.state is LoadState.IDLE:
        load_page(gallery, 1)

    render_navbar(gallery.total_selected())

    submitted, raw_value = render_count_panel(st.session_state["count_error"])
    if submitted:
        handle_count_submit(gallery, raw_value)
        st.rerun()

    if gallery.state is LoadState.ERROR:
        st.error(gallery.error_message or "Failed to load artworks.")
        if st.button("Retry", type="primary"):
            retry_load(gallery)
            st.rerun()

    checked_ids = render_table(
        gallery.records(),
        gallery.selected_ids(),
        gallery.current_page,
        loading=gallery.state is not LoadState.LOADED,
    )
    if gallery.state is LoadState.LOADED and checked_ids != gallery.selected_ids():
        gallery.on_selection_change(checked_ids)
        reset_table_editor(gallery.current_page)
        st.rerun()

    render_footer(gallery.footer_text(), gallery.selection_summary())

    requested_page = render_pager(gallery.current_page, gallery.total_pages, gallery.is_loading)
    if requested_page is not None and requested_page != gallery.current_page:
        logger.debug("Pager requested page %d", requested_page)
        load_page(gallery, requested_page)
        st.rerun()

    show_notifications()


if __name__ == "__main__":
    main()
