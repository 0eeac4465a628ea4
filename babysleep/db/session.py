"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlalchemy.engine import make_url
from sqlmodel import Session, create_engine

from babysleep.core.config import settings

DATABASE_URL: str = settings.SQLALCHEMY_DATABASE_URL


def _engine_options(url: str) -> dict:
    """Backend-specific engine arguments."""
    backend = make_url(url).get_backend_name()
    if backend == "sqlite":
        return { "connect_args": { "check_same_thread": False } }
    options = {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": 5,  # Connection pool size
        "max_overflow": 10,  # Max connections beyond pool_size
    }
    if backend == "postgresql":
        # date() / EXTRACT(hour) grouping must happen in UTC
        options["connect_args"] = { "options": "-c timezone=utc" }
    return options


# Create database engine
engine = create_engine(DATABASE_URL, echo=settings.DEBUG,  # Log SQL queries in debug mode
                       **_engine_options(DATABASE_URL))


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
