"""Per-session gallery state wiring page loads to row selection."""

from __future__ import annotations

from typing import Iterable, List, Optional, Set, Tuple

from artwork_gallery.config import DEFAULT_PAGE_SIZE
from artwork_gallery.errors import InvalidCountError
from artwork_gallery.models import Artwork, LoadState, PageLoadOutcome
from artwork_gallery.services import validation_service
from artwork_gallery.services.page_navigator import PageLoader, PageNavigator
from artwork_gallery.services.selection_service import SelectionReconciler
from artwork_gallery.utils.logging_config import get_logger
from artwork_gallery.utils.pagination import compute_total_pages, format_footer

logger = get_logger("session")


class GallerySession:
    """Handles display events for one user session."""

    def __init__(self, loader: PageLoader, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.navigator = PageNavigator(loader, page_size=page_size)
        self.selection = SelectionReconciler()

    async def on_page_change(self, page_index: int) -> PageLoadOutcome:
        return await self.navigator.go_to_page(page_index)

    async def retry(self) -> PageLoadOutcome:
        return await self.navigator.retry()

    def on_selection_change(self, checked_ids: Iterable[int]) -> bool:
        """Apply the page's new checked set. Returns False when no page is loaded."""
        window = self.navigator.window
        if self.navigator.state is not LoadState.LOADED or window is None:
            logger.debug("Selection change ignored in state %s", self.navigator.state.value)
            return False
        self.selection.reconcile(window, checked_ids)
        return True

    def on_custom_count_submit(self, raw_value: object) -> Tuple[bool, Optional[str]]:
        """Validate and apply a requested row count."""
        valid, error_message, count = validation_service.validate_count(raw_value)
        if not valid:
            logger.info("Rejected row count %r: %s", raw_value, error_message)
            return False, error_message
        try:
            self.selection.set_virtual_count(count)
        except InvalidCountError as exc:
            return False, str(exc)
        return True, None

    @property
    def state(self) -> LoadState:
        return self.navigator.state

    @property
    def is_loading(self) -> bool:
        return self.navigator.is_loading

    @property
    def total_count(self) -> int:
        return self.navigator.total_count

    @property
    def page_size(self) -> int:
        return self.navigator.page_size

    @property
    def current_page(self) -> int:
        """Page of the window on display (last committed page)."""
        window = self.navigator.window
        return window.page_index if window is not None else self.navigator.page_index

    @property
    def total_pages(self) -> int:
        return compute_total_pages(self.total_count, self.page_size)

    @property
    def error_message(self) -> Optional[str]:
        error = self.navigator.error
        return str(error) if error is not None else None

    def records(self) -> List[Artwork]:
        window = self.navigator.window
        return list(window.records) if window is not None else []

    def selected_records(self) -> List[Artwork]:
        window = self.navigator.window
        if window is None:
            return []
        return self.selection.derive_selection(window)

    def selected_ids(self) -> Set[int]:
        return {record.id for record in self.selected_records()}

    def total_selected(self) -> int:
        return self.selection.total_selected()

    def footer_text(self) -> str:
        return format_footer(self.current_page, self.page_size, self.total_count)

    def selection_summary(self) -> str:
        return f"{self.total_selected()} row(s) selected"
