"""
Repository for app search queries.
"""

from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session

from db.models.models import App
from db.repositories.base_repository import BaseRepository

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class AppRepository(BaseRepository[App]):
    """Repository for app operations."""

    def __init__(self, session: Session):
        super().__init__(session, App)

    def _name_contains(self, term: str):
        # Bound parameter; the term is never spliced into SQL text
        return App.name.ilike(f"%{escape_like(term)}%", escape=LIKE_ESCAPE)

    def search_by_name(self, term: str, limit: int = 10, offset: int = 0) -> List[App]:
        """Apps whose name contains ``term`` (case-insensitive), in id order."""
        return self.session.query(App)\
            .filter(self._name_contains(term))\
            .order_by(App.id)\
            .limit(limit)\
            .offset(offset)\
            .all()

    def count_by_name(self, term: str) -> int:
        """Count every app whose name contains ``term``, ignoring any window."""
        return self.session.query(func.count(App.id))\
            .filter(self._name_contains(term))\
            .scalar() or 0
