"""Artwork table component using Streamlit data_editor."""

from __future__ import annotations

from typing import Sequence, Set

import pandas as pd
import streamlit as st

from artwork_gallery.config import COLUMN_LABELS, TABLE_COLUMNS
from artwork_gallery.models import Artwork
from artwork_gallery.utils.helpers import display_text, normalize_text

TABLE_EDITOR_KEY = "artwork_table_editor"


def build_table_frame(records: Sequence[Artwork], selected_ids: Set[int]) -> pd.DataFrame:
    """Build the page dataframe with the checkbox column filled from the selection."""
    rows = [
        {
            "id": record.id,
            "selected": record.id in selected_ids,
            "title": normalize_text(record.title),
            "place_of_origin": normalize_text(record.place_of_origin),
            "artist_display": normalize_text(record.artist_display),
            "inscriptions": display_text(record.inscriptions),
            "date_start": record.date_start,
            "date_end": record.date_end,
        }
        for record in records
    ]
    dataframe = pd.DataFrame(rows, columns=["id", *TABLE_COLUMNS])
    dataframe["selected"] = dataframe["selected"].astype(bool)
    dataframe["date_start"] = dataframe["date_start"].astype("Int64")
    dataframe["date_end"] = dataframe["date_end"].astype("Int64")
    return dataframe.set_index("id")


def checked_ids_from_frame(edited_df: pd.DataFrame) -> Set[int]:
    """Return the ids whose checkbox is ticked in an edited frame."""
    if edited_df.empty:
        return set()
    checked = edited_df[edited_df["selected"].fillna(False).astype(bool)]
    return {int(record_id) for record_id in checked.index.tolist()}


def editor_key(page_index: int) -> str:
    return f"{TABLE_EDITOR_KEY}_{page_index}"


def render_table(records: Sequence[Artwork], selected_ids: Set[int], page_index: int, loading: bool) -> Set[int]:
    """Render one page of artworks and return the checked ids after user edits."""
    if not records:
        st.info("No artworks on this page.")
        return set()

    display_df = build_table_frame(records, selected_ids)
    disabled_columns = [column for column in TABLE_COLUMNS if column != "selected"]

    edited_df = st.data_editor(
        display_df,
        key=editor_key(page_index),
        hide_index=True,
        width="stretch",
        num_rows="fixed",
        column_order=TABLE_COLUMNS,
        disabled=True if loading else disabled_columns,
        column_config={
            "selected": st.column_config.CheckboxColumn(label=COLUMN_LABELS["selected"], width="small"),
            "title": st.column_config.TextColumn(COLUMN_LABELS["title"]),
            "place_of_origin": st.column_config.TextColumn(COLUMN_LABELS["place_of_origin"]),
            "artist_display": st.column_config.TextColumn(COLUMN_LABELS["artist_display"]),
            "inscriptions": st.column_config.TextColumn(COLUMN_LABELS["inscriptions"]),
            "date_start": st.column_config.NumberColumn(COLUMN_LABELS["date_start"], format="%d"),
            "date_end": st.column_config.NumberColumn(COLUMN_LABELS["date_end"], format="%d"),
        },
    )

    if not isinstance(edited_df, pd.DataFrame):
        edited_df = pd.DataFrame(edited_df)
    return checked_ids_from_frame(edited_df)


def render_footer(footer_text: str, selection_summary: str) -> None:
    """Render the row-range footer with the selection count on the right."""
    left, right = st.columns([3, 1])
    with left:
        st.caption(footer_text)
    with right:
        st.markdown(f"**{selection_summary}**")
