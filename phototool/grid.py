"""Paged thumbnail grid state: page cache, bulk selection and badge text."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Optional, Sequence, TypeVar

APP_ID = "com.example.phototool"
"""Stable application id used for preferences and storage; never change it across releases."""

GRID_PAGE_SIZE = 48
GRID_COLUMNS = 4

# User-facing only: must stay free of driver or SQL fragments.
MSG_PAGE_LOAD_FAIL = (
    "Can't load this page — library read failed. Try changing the filter or restarting the app."
)
MSG_DECODE_FAIL = "Can't preview — file missing or unsupported format."

_log = logging.getLogger(__name__)

RowT = TypeVar("RowT")


class PageLoadError(RuntimeError):
    """A page query failed; carries no driver or SQL text."""

    def __init__(self, page: int) -> None:
        super().__init__("review grid: page load failed")
        self.page = page


def rating_badge_text(rating: Optional[int]) -> str:
    """Badge for a thumbnail's star rating; an em dash when unrated."""
    if rating is None:
        return "—"
    return f"{rating}★"


def reject_badge_label(rejected: int) -> str:
    """Badge for a rejected (hidden) asset; empty when not rejected."""
    return "" if rejected == 0 else "Hidden"


def grid_list_row_count(total: int) -> int:
    """Number of grid rows needed to show ``total`` assets; zero when there are none."""
    if total <= 0:
        return 0
    return (total + GRID_COLUMNS - 1) // GRID_COLUMNS


class PagedAssetGrid(Generic[RowT]):
    """Lazily paged view over a filtered asset list, with a bulk selection set.

    ``fetch_page(limit, offset)`` returns the rows of one page. A page whose
    query fails is remembered so scrolling over it does not hammer the
    database; the failure is logged once and ``PageLoadError`` is raised.
    """

    def __init__(
        self,
        fetch_page: Callable[[int, int], Sequence[RowT]],
        total: int = 0,
        on_selection_change: Optional[Callable[[], None]] = None,
        page_size: int = GRID_PAGE_SIZE,
    ) -> None:
        self._fetch_page = fetch_page
        self._on_selection_change = on_selection_change
        self._page_size = page_size
        self._lock = threading.Lock()
        self._total = total
        self._pages: dict[int, list[RowT]] = {}
        self._failed_pages: set[int] = set()
        self._selected: set[int] = set()
        self._generation = 0

    @property
    def total(self) -> int:
        with self._lock:
            return self._total

    @property
    def generation(self) -> int:
        """Bumped on every reset or invalidation so stale async work can be ignored."""
        with self._lock:
            return self._generation

    def _notify_selection(self) -> None:
        if self._on_selection_change is not None:
            self._on_selection_change()

    def reset(self, total: int) -> None:
        """Start over with a new total: drop pages, failures and the selection."""
        with self._lock:
            self._generation += 1
            self._total = total
            self._pages = {}
            self._failed_pages = set()
            self._selected = set()
        self._notify_selection()

    def invalidate_pages(self) -> None:
        """Drop cached pages and remembered failures, keeping total and selection."""
        with self._lock:
            self._generation += 1
            self._pages = {}
            self._failed_pages = set()

    def _ensure_page_locked(self, page: int) -> list[RowT]:
        cached = self._pages.get(page)
        if cached is not None:
            return cached
        if page in self._failed_pages:
            raise PageLoadError(page)
        try:
            rows = list(self._fetch_page(self._page_size, page * self._page_size))
        except Exception as err:
            self._failed_pages.add(page)
            _log.error("review grid: page query failed (page=%d): %s", page, err)
            raise PageLoadError(page) from err
        self._pages[page] = rows
        return rows

    def row_at(self, index: int) -> Optional[RowT]:
        """Row at ``index`` in the filtered ordering, or None past the end."""
        with self._lock:
            if index < 0 or index >= self._total:
                return None
            rows = self._ensure_page_locked(index // self._page_size)
            slot = index % self._page_size
            return rows[slot] if slot < len(rows) else None

    def row_count(self) -> int:
        """Grid rows needed for the current total."""
        with self._lock:
            return grid_list_row_count(self._total)

    def toggle_selected(self, asset_id: int) -> None:
        """Add or remove an asset from the bulk selection."""
        with self._lock:
            if asset_id in self._selected:
                self._selected.discard(asset_id)
            else:
                self._selected.add(asset_id)
        self._notify_selection()

    def clear_selected(self) -> None:
        """Empty the bulk selection."""
        with self._lock:
            self._selected = set()
        self._notify_selection()

    def is_selected(self, asset_id: int) -> bool:
        with self._lock:
            return asset_id in self._selected

    def selected_asset_ids(self) -> list[int]:
        """Current bulk selection, in no particular order."""
        with self._lock:
            return list(self._selected)