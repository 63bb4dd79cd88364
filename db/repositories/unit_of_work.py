"""
Unit of Work: one session, and the pooled connection behind it, per request or batch.
"""

from contextlib import contextmanager
from typing import Optional
import logging

from sqlalchemy.orm import Session
from db.database import get_session
from db.repositories.app_repository import AppRepository

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Lazily opens a session and hands out repositories bound to it.

    Nothing touches the pool until the first repository is used, and
    release() is the only place the session is closed.
    """

    def __init__(self):
        self._session: Optional[Session] = None
        self._apps: Optional[AppRepository] = None

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = get_session()
        return self._session

    @property
    def apps(self) -> AppRepository:
        if self._apps is None:
            self._apps = AppRepository(self.session)
        return self._apps

    def commit(self):
        """Commit pending writes, if a session was ever opened."""
        if self._session is not None:
            self._session.commit()

    def release(self):
        """Close the session and return its connection to the pool.

        Closing discards any transaction still open, so work that was not
        committed is rolled back.
        """
        if self._session is None:
            return
        self._session.close()
        self._session = None
        self._apps = None
        logger.debug("Database session released")


@contextmanager
def get_unit_of_work():
    """Yield a UnitOfWork, committing if the block succeeds and releasing it on every exit path."""
    uow = UnitOfWork()
    try:
        yield uow
        uow.commit()
    except Exception as e:
        logger.error(f"Unit of work aborted: {e}")
        raise
    finally:
        uow.release()
