"""
Exceptions raised by the apps store and the search flow built on it.

Store errors carry the search context they failed in so the request
boundary can log something useful before rendering a generic failure.
"""


class StoreError(Exception):
    """Base exception for failures talking to the apps store.

    Attributes:
        message: Human-readable description
        term: Search term being served when the error occurred (or None)
        offset: Requested offset being served (or None)
        original_error: The underlying driver/SQLAlchemy exception
    """

    status_code = 500

    def __init__(self, message: str = None, term: str = None,
                 offset: int = None, original_error: Exception = None):
        self.term = term
        self.offset = offset
        self.original_error = original_error

        if message is None:
            message = "Apps store request failed"
            if original_error:
                message += f": {original_error}"

        self.message = message
        super().__init__(message)


class StoreUnavailableError(StoreError):
    """
    Raised when no connection could be obtained.

    Covers an exhausted connection pool and an unreachable or
    disconnected database server.
    """

    status_code = 503


class QueryExecutionError(StoreError):
    """Raised when a search or count query fails against the store."""
    pass


class StartupCheckError(StoreError):
    """Raised when the liveness check run before serving traffic fails."""

    def __init__(self, message: str = None, original_error: Exception = None):
        if message is None:
            message = "Cannot ping database"
            if original_error:
                message += f": {original_error}"
        super().__init__(message, original_error=original_error)


class ConfigurationError(Exception):
    """Raised when required configuration (e.g. database credentials) is missing."""
    pass
