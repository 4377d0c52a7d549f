"""Validation logic for user-submitted selection counts."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from artwork_gallery.utils.helpers import normalize_text

COUNT_PATTERN = re.compile(r"^\+?\d+$")
COUNT_REQUIRED_MESSAGE = "Enter the number of rows to select."
COUNT_FORMAT_MESSAGE = "Row count must be a whole number."
COUNT_POSITIVE_MESSAGE = "Row count must be greater than zero."


def validate_count(value: object) -> Tuple[bool, Optional[str], int]:
    """Validate a requested row count and return it as an int."""
    if isinstance(value, bool):
        return False, COUNT_FORMAT_MESSAGE, 0

    if isinstance(value, float):
        if not value.is_integer():
            return False, COUNT_FORMAT_MESSAGE, 0
        value = int(value)

    if isinstance(value, int):
        if value <= 0:
            return False, COUNT_POSITIVE_MESSAGE, 0
        return True, None, value

    raw_value = normalize_text(value)
    if not raw_value:
        return False, COUNT_REQUIRED_MESSAGE, 0

    if raw_value.startswith("-") and COUNT_PATTERN.fullmatch(raw_value[1:]):
        return False, COUNT_POSITIVE_MESSAGE, 0

    if not COUNT_PATTERN.fullmatch(raw_value):
        return False, COUNT_FORMAT_MESSAGE, 0

    count = int(raw_value)
    if count <= 0:
        return False, COUNT_POSITIVE_MESSAGE, 0

    return True, None, count
