"""
Database connection and session management for the apps store.
"""

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
import logging

import config
from db.errors import StartupCheckError

logger = logging.getLogger(__name__)

engine = None

# Session factory, bound to the engine by init_engine()
SessionFactory = sessionmaker()


def _engine_options(url, connection_limit, pool_timeout, connect_timeout) -> dict:
    if url.get_backend_name() == "sqlite":
        # In-memory SQLite keeps its data on a single connection
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }

    return {
        # Bounded pool: never more than connection_limit connections open
        "pool_size": connection_limit,
        "max_overflow": 0,
        "pool_timeout": pool_timeout,
        "pool_pre_ping": True,
        # Set application name for connection tracking
        "connect_args": {
            "application_name": config.PGAPPNAME,
            "connect_timeout": connect_timeout,
        },
    }


def init_engine(database_url=None, connection_limit=None, pool_timeout=None,
                connect_timeout=None, echo=False):
    """Create the engine and bind the session factory to it.

    Args:
        database_url: Optional database URL override. If not provided, built from config.
        connection_limit: Maximum pooled connections (default DB_CONNECTION_LIMIT)
        pool_timeout: Seconds to wait for a free connection (default DB_POOL_TIMEOUT)
        connect_timeout: Driver connect timeout in seconds (default DB_CONNECT_TIMEOUT)
    """
    global engine

    url = make_url(config.build_database_url(database_url))
    options = _engine_options(
        url,
        connection_limit or config.DB_CONNECTION_LIMIT,
        pool_timeout or config.DB_POOL_TIMEOUT,
        connect_timeout or config.DB_CONNECT_TIMEOUT,
    )

    if engine is not None:
        engine.dispose()

    engine = create_engine(url, echo=echo, **options)
    SessionFactory.configure(bind=engine)
    logger.info(f"Database engine initialised for {url.render_as_string(hide_password=True)}")
    return engine


def get_engine():
    """Return the configured engine, initialising it from config on first use."""
    if engine is None:
        init_engine()
    return engine


def get_session() -> Session:
    """Get a new database session."""
    get_engine()
    return SessionFactory()


def ping_database():
    """Acquire a connection, check it is alive and release it.

    Raises:
        StartupCheckError: if the connection cannot be acquired or the check fails.
    """
    logger.info("Pinging database")
    try:
        with get_engine().connect() as connection:
            result = connection.execute(text("SELECT 1"))
            if result.scalar() != 1:
                raise StartupCheckError("Database liveness check returned an unexpected value")
    except SQLAlchemyError as e:
        raise StartupCheckError(original_error=e) from e


def create_tables():
    """Create all tables defined in the ORM models."""
    try:
        from db.models.models import Base
        Base.metadata.create_all(get_engine())
        logger.info("All tables created successfully")
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
