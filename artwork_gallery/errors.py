"""Named error kinds reported by the gallery services."""

from __future__ import annotations


class GalleryError(Exception):
    """Base class for recoverable gallery errors."""


class FetchError(GalleryError):
    """A page could not be loaded or its payload could not be parsed."""

    def __init__(self, page_index: int, message: str) -> None:
        super().__init__(f"Failed to load page {page_index}: {message}")
        self.page_index = page_index
        self.message = message


class InvalidCountError(GalleryError):
    """A requested selection count is not a positive integer."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Row count must be a positive whole number, got {value!r}.")
        self.value = value
