import logging
import sys

from flask import Flask
from flask_cors import CORS

import config
from db.database import init_engine, ping_database
from db.errors import ConfigurationError, StartupCheckError
from db.services.search_service import SearchConfig, SearchService
from routes import init_routes

logger = logging.getLogger(__name__)


def create_app(config_overrides=None):
    """Application factory pattern for better testing and configuration.

    Args:
        config_overrides: Optional dict merged into app.config. DATABASE_URL,
            DB_CONNECTION_LIMIT and PAGE_SIZE are read from it when present.
    """
    app = Flask(__name__)
    app.config.update({
        "SECRET_KEY": config.SECRET_KEY,
        "DATABASE_URL": config.DATABASE_URL,
        "DB_CONNECTION_LIMIT": config.DB_CONNECTION_LIMIT,
        "PAGE_SIZE": config.PAGE_SIZE,
    })
    app.config.update(config_overrides or {})

    # Enable CORS for all routes
    CORS(app)

    init_engine(
        database_url=app.config["DATABASE_URL"],
        connection_limit=app.config["DB_CONNECTION_LIMIT"],
    )

    init_routes(app, search_service=SearchService(SearchConfig(page_size=app.config["PAGE_SIZE"])))

    return app


def start_app(app, port):
    """Ping the database, then serve. Refuses to serve if the ping fails."""
    try:
        ping_database()
    except StartupCheckError as e:
        logger.error(f"{e}; not serving")
        return False

    logger.info(f"Application starting on port {port}")
    app.run(host="0.0.0.0", port=port)
    return True


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    port = int(argv[0]) if argv else config.PORT
    try:
        app = create_app()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    if not start_app(app, port):
        sys.exit(1)


# === Main ===
if __name__ == "__main__":
    main()
