"""
SQLAlchemy models for the Play Store apps table.
"""

from sqlalchemy import Column, Integer, BigInteger, String, Float, Index
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class App(Base):
    __tablename__ = 'apps'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    category = Column(String(64))
    rating = Column(Float)
    reviews = Column(BigInteger)
    size = Column(String(32))
    installs = Column(String(32))
    type = Column(String(16))
    price = Column(String(16))
    content_rating = Column(String(32))
    genres = Column(String(128))
    last_updated = Column(String(32))
    current_ver = Column(String(64))
    android_ver = Column(String(64))

    def to_dict(self) -> dict:
        """Plain dict of the displayed columns."""
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'rating': self.rating,
            'reviews': self.reviews,
            'size': self.size,
            'installs': self.installs,
            'type': self.type,
            'price': self.price,
            'content_rating': self.content_rating,
            'genres': self.genres,
            'last_updated': self.last_updated,
            'current_ver': self.current_ver,
            'android_ver': self.android_ver,
        }

    def __repr__(self):
        return f"<App(id={self.id}, name='{self.name[:50] if self.name else None}')>"


Index('idx_apps_name', App.name)
