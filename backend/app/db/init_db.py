"""
Database initialization script.
"""
import logging

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.session import init_db

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    logger.info("Initializing database at %s", settings.DATABASE_URL)
    init_db()
    logger.info("Database initialized successfully")
