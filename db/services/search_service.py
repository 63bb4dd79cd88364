"""
SearchService: paginated substring search over app names.

Runs the count and window queries for a SearchQuery inside one unit of
work and hands back an immutable SearchPage. Driver and SQLAlchemy
failures are translated into StoreError subclasses here, so callers only
deal with the store taxonomy.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from sqlalchemy import exc as sa_exc

from db.errors import StoreError, StoreUnavailableError, QueryExecutionError
from db.models.search_page import AppRecord, PageWindow, SearchPage, SearchQuery
from db.repositories.unit_of_work import get_unit_of_work
from db.services.pagination_service import PaginationService

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for search behavior."""
    page_size: int = 10

    def __post_init__(self):
        """Validate configuration."""
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")


# Errors meaning "no usable connection", as opposed to a failing statement
UNAVAILABLE_ERRORS = (
    sa_exc.TimeoutError,        # pool exhausted
    sa_exc.DisconnectionError,
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
)


class SearchService:
    """Paginated app search backed by the apps store."""

    def __init__(self, config: SearchConfig = None,
                 uow_factory: Callable = get_unit_of_work,
                 pagination_service: PaginationService = None):
        self.config = config or SearchConfig()
        self.uow_factory = uow_factory
        self.pagination = pagination_service or PaginationService(self.config.page_size)

    def paginate(self, term: str, offset: int = 0) -> PageWindow:
        """
        Fetch one window of apps whose name contains ``term``.

        The total count is always computed, even when the window comes back
        empty, and the offset is clamped to a page boundary inside the
        result range before the window query runs.

        Args:
            term: Substring to look for in app names (case-insensitive)
            offset: Requested zero-based record offset

        Returns:
            PageWindow holding at most page_size records

        Raises:
            StoreUnavailableError: no connection could be obtained
            QueryExecutionError: the count or window query failed
        """
        try:
            with self.uow_factory() as uow:
                total_count = uow.apps.count_by_name(term)
                offset = self.pagination.clamp_offset(offset, total_count)
                apps = uow.apps.search_by_name(term, limit=self.pagination.page_size, offset=offset)
                # Copy out of the session before it is released
                records = [AppRecord.from_model(app) for app in apps]
        except StoreError:
            raise
        except UNAVAILABLE_ERRORS as e:
            logger.error(f"Apps store unavailable while searching '{term}' at offset {offset}: {e}")
            raise StoreUnavailableError(term=term, offset=offset, original_error=e) from e
        except sa_exc.SQLAlchemyError as e:
            logger.error(f"Search query failed for '{term}' at offset {offset}: {e}")
            raise QueryExecutionError(term=term, offset=offset, original_error=e) from e

        logger.debug(f"Window for '{term}': {len(records)} of {total_count} records at offset {offset}")
        return self.pagination.build_window(records, total_count, offset)

    def search(self, query: SearchQuery) -> SearchPage:
        """Run a search and derive the page metadata the templates need."""
        window = self.paginate(query.term, query.offset)
        metadata = self.pagination.compute_metadata(window)

        logger.info(
            f"Search '{query.term}' offset {window.offset}: {window.total_count} results, "
            f"page {metadata.current_page} of {metadata.total_pages}"
        )

        return SearchPage(
            query=SearchQuery(term=query.term, offset=window.offset),
            window=window,
            metadata=metadata,
        )
