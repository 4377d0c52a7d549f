"""Current-page tracking with superseding page loads."""

from __future__ import annotations

import asyncio
from typing import Optional, Protocol

from artwork_gallery.config import DEFAULT_PAGE_SIZE
from artwork_gallery.errors import FetchError
from artwork_gallery.models import LoadState, PageLoadOutcome, PageResult, PageWindow
from artwork_gallery.utils.logging_config import get_logger

logger = get_logger("navigator")


class PageLoader(Protocol):
    async def fetch_page(self, page_index: int, page_size: int) -> PageResult:
        ...


class PageNavigator:
    """Holds exactly one page window and the total record count.

    Each request is stamped with a sequence number; a response is committed
    only if no newer request was issued while it was in flight.
    """

    def __init__(self, loader: PageLoader, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.loader = loader
        self.page_size = page_size
        self.page_index = 1
        self.window: Optional[PageWindow] = None
        self.total_count = 0
        self.state = LoadState.IDLE
        self.error: Optional[FetchError] = None
        self._latest_request = 0

    @property
    def is_loading(self) -> bool:
        return self.state is LoadState.LOADING

    async def go_to_page(self, page_index: int) -> PageLoadOutcome:
        """Load ``page_index`` and commit it unless a newer request superseded it."""
        if isinstance(page_index, bool) or not isinstance(page_index, int) or page_index < 1:
            raise ValueError(f"page index must be a positive integer, got {page_index!r}")

        self._latest_request += 1
        request_id = self._latest_request
        self.page_index = page_index
        self.state = LoadState.LOADING
        logger.info("Loading page %d (request #%d)", page_index, request_id)

        try:
            result = await self.loader.fetch_page(page_index, self.page_size)
        except asyncio.CancelledError:
            if request_id == self._latest_request:
                self.state = LoadState.LOADED if self.window is not None else LoadState.IDLE
            raise
        except FetchError as exc:
            return self._fail(request_id, page_index, exc)
        except Exception as exc:
            logger.exception("Loader raised an unexpected error for page %d", page_index)
            return self._fail(
                request_id,
                page_index,
                FetchError(page_index, f"unexpected loader error ({exc.__class__.__name__}: {exc})"),
            )

        if request_id != self._latest_request:
            logger.debug(
                "Discarded stale page %d (request #%d, latest #%d)",
                page_index,
                request_id,
                self._latest_request,
            )
            return PageLoadOutcome(page_index=page_index, stale=True)

        self.window = PageWindow(
            page_index=page_index,
            page_size=self.page_size,
            records=tuple(result.records),
        )
        self.total_count = result.total_count
        self.state = LoadState.LOADED
        self.error = None
        return PageLoadOutcome(page_index=page_index, committed=True)

    def _fail(self, request_id: int, page_index: int, error: FetchError) -> PageLoadOutcome:
        """Record a failed load; the previous window stays on display."""
        if request_id != self._latest_request:
            logger.debug("Ignoring failure of stale request #%d: %s", request_id, error)
            return PageLoadOutcome(page_index=page_index, stale=True, error=error)
        logger.warning("%s", error)
        self.state = LoadState.ERROR
        self.error = error
        return PageLoadOutcome(page_index=page_index, error=error)

    async def retry(self) -> PageLoadOutcome:
        """Reissue the most recently requested page."""
        return await self.go_to_page(self.page_index)
