"""
Database initialization.

Waits for the database to accept connections, then creates all tables
and indexes that do not exist yet.
"""

import logging
import time

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, text

from babysleep.core.config import settings
from babysleep.core.errors import StorageUnavailableError
from babysleep.db.session import engine

logger = logging.getLogger(__name__)


def wait_for_db(db_engine: Engine = engine, retries: int = settings.DB_CONNECT_RETRIES,
                interval: float = settings.DB_CONNECT_RETRY_INTERVAL, ) -> None:
    """Block until ``SELECT 1`` succeeds.

    Raises:
        StorageUnavailableError: after *retries* failed attempts.
    """
    for attempt in range(1, retries + 1):
        try:
            with db_engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info("Database connected")
            return
        except SQLAlchemyError as e:
            logger.info(f"Waiting for database... ({attempt}/{retries}): {e}", extra={ "attempt": attempt })
            if attempt < retries:
                time.sleep(interval)
    raise StorageUnavailableError("Could not connect to database")


def init_db(db_engine: Engine = engine) -> None:
    """
    Initialize database schema.

    Creates the sleep_sessions and app_settings tables together with the
    single-active-session index.
    """

    # Import all models so SQLModel.metadata has them
    import babysleep.db.base  # noqa: F401

    logger.info("Running database migration...")
    SQLModel.metadata.create_all(db_engine)
    logger.info("Database migration complete")


if __name__ == "__main__":
    wait_for_db()
    init_db()
