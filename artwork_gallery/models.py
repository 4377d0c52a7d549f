"""Record and page models shared by the gallery services."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple

from artwork_gallery.errors import FetchError


class LoadState(Enum):
    """Lifecycle of a page visit."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class Artwork:
    """One artwork row. Only ``id`` matters for selection."""

    id: int
    title: str = ""
    place_of_origin: str = ""
    artist_display: str = ""
    inscriptions: str = ""
    date_start: Optional[int] = None
    date_end: Optional[int] = None


@dataclass(frozen=True)
class PageResult:
    """Records of one page plus the size of the whole record set."""

    records: Tuple[Artwork, ...]
    total_count: int


@dataclass(frozen=True)
class PageWindow:
    """The single page of records currently held in memory."""

    page_index: int
    page_size: int
    records: Tuple[Artwork, ...] = field(default_factory=tuple)

    def global_rank(self, offset: int) -> int:
        """Return the 1-based rank of the record at ``offset`` across all pages."""
        return (self.page_index - 1) * self.page_size + offset + 1

    def enumerate_ranked(self) -> Iterator[Tuple[int, Artwork]]:
        """Yield ``(global_rank, record)`` pairs in page order."""
        for offset, record in enumerate(self.records):
            yield self.global_rank(offset), record


@dataclass(frozen=True)
class PageLoadOutcome:
    """What happened to one ``go_to_page`` request."""

    page_index: int
    committed: bool = False
    stale: bool = False
    error: Optional[FetchError] = None
