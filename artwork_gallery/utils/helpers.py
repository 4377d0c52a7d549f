"""Helper utilities for normalizing API values for display."""

from __future__ import annotations

from typing import Optional

import pandas as pd

from artwork_gallery.config import MISSING_TEXT


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        parts = [normalize_text(item) for item in value]
        return "; ".join(part for part in parts if part)
    try:
        if pd.isna(value):
            return ""
    except TypeError:
        pass
    return str(value).strip()


def display_text(value: object) -> str:
    """Return display text for a cell, falling back to N/A when blank."""
    text = normalize_text(value)
    return text if text else MISSING_TEXT


def parse_optional_int(value: object) -> Optional[int]:
    """Parse integer-like values, returning None for blanks and garbage."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None

    raw_value = normalize_text(value)
    if not raw_value:
        return None
    try:
        return int(raw_value)
    except ValueError:
        return None
