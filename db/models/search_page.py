"""
Value types for one page of app search results.

Every type here is immutable and built fresh per request: a SearchQuery
comes in, a SearchPage (window plus derived metadata) goes out to the
templates and is discarded after rendering.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class AppRecord:
    """One row from the apps table, detached from the database session."""

    id: int
    name: str
    category: Optional[str] = None
    rating: Optional[float] = None
    reviews: Optional[int] = None
    size: Optional[str] = None
    installs: Optional[str] = None
    type: Optional[str] = None
    price: Optional[str] = None
    content_rating: Optional[str] = None
    genres: Optional[str] = None
    last_updated: Optional[str] = None
    current_ver: Optional[str] = None
    android_ver: Optional[str] = None

    @classmethod
    def from_model(cls, app) -> "AppRecord":
        """Copy the displayed columns off an ``App`` ORM instance."""
        return cls(**app.to_dict())


@dataclass(frozen=True)
class SearchQuery:
    """Search term and requested offset for a single request."""

    term: str = ""
    offset: int = 0

    def __post_init__(self):
        if self.offset < 0:
            raise ValueError(f"offset must be non-negative, got {self.offset}")

    @classmethod
    def from_raw(cls, term=None, offset=None) -> "SearchQuery":
        """Build a query from untrusted request values.

        A missing term becomes the empty string (matches every app). A missing,
        non-numeric or negative offset becomes 0.
        """
        term = (term or "").strip()
        try:
            offset = int(offset) if offset is not None else 0
        except (TypeError, ValueError):
            offset = 0
        return cls(term=term, offset=max(offset, 0))


@dataclass(frozen=True)
class PageWindow:
    """The bounded slice of matching records for one page."""

    records: Tuple[AppRecord, ...]
    total_count: int
    offset: int
    page_size: int

    def __post_init__(self):
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if len(self.records) > self.page_size:
            raise ValueError(
                f"window holds {len(self.records)} records, page size is {self.page_size}"
            )

    @property
    def has_content(self) -> bool:
        return len(self.records) > 0


@dataclass(frozen=True)
class PageMetadata:
    """Page numbers and navigation flags derived from a PageWindow."""

    current_page: int
    total_pages: int
    has_prev: bool
    has_next: bool
    prev_offset: Optional[int] = None
    next_offset: Optional[int] = None


@dataclass(frozen=True)
class SearchPage:
    """What the result template renders: the query, its window and metadata."""

    query: SearchQuery
    window: PageWindow
    metadata: PageMetadata

    @property
    def records(self) -> Tuple[AppRecord, ...]:
        return self.window.records

    @property
    def total_count(self) -> int:
        return self.window.total_count
