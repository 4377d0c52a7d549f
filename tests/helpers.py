import asyncio
from typing import Dict, List, Tuple

from artwork_gallery.errors import FetchError
from artwork_gallery.models import Artwork, PageResult, PageWindow


def make_page(page_index: int, page_size: int = 12, total: int = 100) -> Tuple[Artwork, ...]:
    """Artworks whose id equals their global rank."""
    first = (page_index - 1) * page_size + 1
    last = min(page_index * page_size, total)
    return tuple(Artwork(id=rank, title=f"Artwork {rank}") for rank in range(first, last + 1))


def make_window(page_index: int, page_size: int = 12, total: int = 100) -> PageWindow:
    return PageWindow(page_index=page_index, page_size=page_size, records=make_page(page_index, page_size, total))


class FakeLoader:
    """Loader that serves synthetic pages, optionally failing some of them."""

    def __init__(self, total: int = 100, failing_pages=()):
        self.total = total
        self.failing_pages = set(failing_pages)
        self.calls: List[Tuple[int, int]] = []

    async def fetch_page(self, page_index: int, page_size: int) -> PageResult:
        self.calls.append((page_index, page_size))
        if page_index in self.failing_pages:
            raise FetchError(page_index, "boom")
        return PageResult(records=make_page(page_index, page_size, self.total), total_count=self.total)


class GatedLoader:
    """Loader whose responses are released manually, to interleave requests."""

    def __init__(self, total: int = 100):
        self.total = total
        self.gates: Dict[int, asyncio.Event] = {}
        self.failures: Dict[int, FetchError] = {}

    def gate(self, page_index: int) -> asyncio.Event:
        return self.gates.setdefault(page_index, asyncio.Event())

    async def fetch_page(self, page_index: int, page_size: int) -> PageResult:
        await self.gate(page_index).wait()
        if page_index in self.failures:
            raise self.failures[page_index]
        return PageResult(records=make_page(page_index, page_size, self.total), total_count=self.total)


class BrokenLoader:
    """Loader that fails with something other than FetchError."""

    async def fetch_page(self, page_index: int, page_size: int) -> PageResult:
        raise RuntimeError("loader bug")
