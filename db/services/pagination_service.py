"""
Service for handling pagination logic.

Provides pure, testable pagination functions independent of HTTP/Flask context
and of the database. Offsets are zero-based record indexes; pages are 1-indexed.
"""

from typing import Sequence

from db.models.search_page import AppRecord, PageMetadata, PageWindow


class PaginationService:
    """Service for offset/page calculations."""

    def __init__(self, page_size: int = 10):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size

    def total_pages(self, total_count: int) -> int:
        """Number of pages needed for ``total_count`` records (0 when there are none)."""
        # Ceiling division
        return 0 if total_count <= 0 else (total_count + self.page_size - 1) // self.page_size

    def clamp_offset(self, offset: int, total_count: int) -> int:
        """
        Clamp an offset to a valid page boundary.

        Args:
            offset: Requested offset (may be negative, unaligned or past the end)
            total_count: Number of records matching the search

        Returns:
            A multiple of page_size in [0, (total_pages - 1) * page_size],
            or 0 when there are no records
        """
        offset = max(offset, 0)
        offset -= offset % self.page_size

        last_page_offset = max(self.total_pages(total_count) - 1, 0) * self.page_size
        return min(offset, last_page_offset)

    def build_window(self, records: Sequence[AppRecord], total_count: int, offset: int) -> PageWindow:
        """Wrap one page of records and the overall match count."""
        return PageWindow(
            records=tuple(records),
            total_count=total_count,
            offset=offset,
            page_size=self.page_size,
        )

    def compute_metadata(self, window: PageWindow) -> PageMetadata:
        """
        Derive page numbers and navigation flags for a window.

        Args:
            window: The page window (its page_size is used, not this service's)

        Returns:
            PageMetadata with current/total pages, prev/next flags and the
            offsets the navigation links should carry
        """
        page_size = window.page_size
        current_page = window.offset // page_size + 1
        total_pages = 0 if window.total_count == 0 else (window.total_count + page_size - 1) // page_size

        has_prev = current_page > 1
        has_next = current_page < total_pages

        return PageMetadata(
            current_page=current_page,
            total_pages=total_pages,
            has_prev=has_prev,
            has_next=has_next,
            prev_offset=window.offset - page_size if has_prev else None,
            next_offset=window.offset + page_size if has_next else None,
        )
