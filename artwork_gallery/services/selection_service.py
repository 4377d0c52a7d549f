"""Virtual row selection reconciled with per-row overrides across pages.

A selection is held as two pieces of state:

* ``virtual_count``: "the first N records in global order are selected".
* ``overrides``: record id -> bool for rows the user flipped away from what
  ``virtual_count`` implies.

Only rows on a page the user has actually seen can gain an override, so the
total selected count can be computed from the override map alone without
fetching any other page.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

from artwork_gallery.errors import InvalidCountError
from artwork_gallery.models import Artwork, PageWindow
from artwork_gallery.utils.logging_config import get_logger

logger = get_logger("selection")


def implied_selected(global_rank: int, virtual_count: int) -> bool:
    """Return whether a rank falls inside the virtual selection."""
    return global_rank <= virtual_count


class SelectionReconciler:
    """Owns the virtual count and override map for one UI session."""

    def __init__(self) -> None:
        self._virtual_count = 0
        self._overrides: Dict[int, bool] = {}
        self._total_selected = 0

    @property
    def virtual_count(self) -> int:
        return self._virtual_count

    @property
    def overrides(self) -> Mapping[int, bool]:
        """Read-only copy of the override map."""
        return dict(self._overrides)

    def set_virtual_count(self, count: int) -> None:
        """Select the first ``count`` records and drop all manual overrides."""
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidCountError(count)

        dropped = len(self._overrides)
        self._virtual_count = count
        self._overrides = {}
        self._refresh_total()
        logger.info("Virtual selection set to %d rows (%d overrides cleared)", count, dropped)

    def is_selected(self, record_id: int, global_rank: int) -> bool:
        """Effective selection state of one record."""
        override = self._overrides.get(record_id)
        if override is not None:
            return override
        return implied_selected(global_rank, self._virtual_count)

    def derive_selection(self, window: PageWindow) -> List[Artwork]:
        """Return the selected records of ``window`` in page order."""
        return [
            record
            for rank, record in window.enumerate_ranked()
            if self.is_selected(record.id, rank)
        ]

    def reconcile(self, window: PageWindow, checked_ids: Iterable[int]) -> None:
        """Fold the full checked set reported for ``window`` into the override map.

        Every row on the page is revisited: rows whose checked state matches
        the virtual selection lose their override, the rest get one. Rows on
        other pages are left alone.
        """
        checked = set(checked_ids)
        overrides = dict(self._overrides)

        for rank, record in window.enumerate_ranked():
            is_checked = record.id in checked
            if is_checked == implied_selected(rank, self._virtual_count):
                overrides.pop(record.id, None)
            else:
                overrides[record.id] = is_checked

        if overrides != self._overrides:
            logger.debug(
                "Page %d overrides: %d -> %d entries",
                window.page_index,
                len(self._overrides),
                len(overrides),
            )
        self._overrides = overrides
        self._refresh_total()

    def total_selected(self) -> int:
        """Total selected rows across the whole record set."""
        return self._total_selected

    def _refresh_total(self) -> None:
        added = sum(1 for value in self._overrides.values() if value)
        removed = len(self._overrides) - added
        self._total_selected = max(0, self._virtual_count + added - removed)
