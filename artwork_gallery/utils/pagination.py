"""Pagination helpers for server-side paging."""

from __future__ import annotations

import math
from typing import Tuple


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size."""
    if page_size <= 0:
        return 1
    return max(1, math.ceil(total_rows / page_size))


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def page_row_range(page_number: int, page_size: int, total_rows: int) -> Tuple[int, int]:
    """Return the 1-based first/last row numbers shown on a page."""
    if total_rows <= 0:
        return 0, 0
    first = (page_number - 1) * page_size + 1
    last = min(page_number * page_size, total_rows)
    return first, last


def format_footer(page_number: int, page_size: int, total_rows: int) -> str:
    """Build the 'Showing X to Y of Z entries' footer line."""
    first, last = page_row_range(page_number, page_size, total_rows)
    return f"Showing {first} to {last} of {total_rows} entries"
