import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

from db.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

# === CONFIG ===
SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-change-this-in-production")
PORT = int(os.getenv("PORT", "3000"))

# Search
PAGE_SIZE = 10
MAX_TERM_LENGTH = 255

# Database Configuration
# No default user or password: a missing credential must never fall back to an open account.
DATABASE_URL = os.getenv("DATABASE_URL")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", "5432"))
DB_NAME = os.getenv("DB_NAME", "playstore")
DB_USER = os.getenv("DB_USER")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_CONNECTION_LIMIT = int(os.getenv("DB_CONNECTION_LIMIT", "4"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "10"))  # seconds waiting for a pooled connection
DB_CONNECT_TIMEOUT = int(os.getenv("DB_CONNECT_TIMEOUT", "5"))
PGAPPNAME = os.getenv("PGAPPNAME", "playstore-search")


def build_database_url(database_url=None, user=None, password=None):
    """Return the SQLAlchemy URL for the apps store.

    An explicit ``database_url`` (argument or ``DATABASE_URL``) wins. Otherwise
    the URL is assembled from the ``DB_*`` settings, which requires both a user
    and a password.

    Raises:
        ConfigurationError: if no URL is given and credentials are missing.
    """
    database_url = database_url or DATABASE_URL
    if database_url:
        return database_url

    user = user or DB_USER
    password = password or DB_PASSWORD
    if not user or not password:
        raise ConfigurationError(
            "DB_USER and DB_PASSWORD must be set (or provide DATABASE_URL)"
        )

    return URL.create(
        "postgresql+psycopg",
        username=user,
        password=password,
        host=DB_HOST,
        port=DB_PORT,
        database=DB_NAME,
    )
