"""
Test configuration and fixtures
"""
import os
import sys

import pytest

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from db.database import create_tables


@pytest.fixture
def app():
    """Create application backed by a fresh in-memory SQLite store"""
    app = create_app({
        "TESTING": True,
        "WTF_CSRF_ENABLED": False,
        "SECRET_KEY": "test-secret-key",
        "DATABASE_URL": "sqlite://",
    })
    create_tables()

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()

