"""
Base repository shared by the model repositories.
"""

from abc import ABC
from typing import Generic, TypeVar
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """Binds a model class to the session of the current unit of work."""

    def __init__(self, session: Session, model_class: type):
        self.session = session
        self.model_class = model_class

    def count(self) -> int:
        """Count total entities."""
        return self.session.query(self.model_class).count()
