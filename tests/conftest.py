"""Shared test fixtures: in-memory SQLite database and FastAPI client."""

import datetime
import os

# Must be set before babysleep.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("API_TOKEN", None)
os.environ.pop("HA_URL", None)
os.environ.pop("HA_TOKEN", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import babysleep.db.base  # noqa: F401
from babysleep.core.config import settings
from babysleep.core.errors import NotificationError
from babysleep.db.session import get_db
from babysleep.main import app
from babysleep.models.sleep_session import SleepSession
from babysleep.services.notifier import HomeAssistantNotifier, get_notifier

class RecordingNotifier(HomeAssistantNotifier):
    """Notifier that records events instead of posting them."""

    def __init__(self, fail: bool = False):
        super().__init__("http://homeassistant.local:8123", "ha-token")
        self.fail = fail
        self.events = []

    def _post_event(self, state, timestamp, session_id):
        if self.fail:
            raise NotificationError("Connection refused")
        self.events.append({ "state": state, "timestamp": timestamp, "session_id": session_id })


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(engine, notifier, monkeypatch):
    """FastAPI test client with database and notifier overridden, auth off."""
    monkeypatch.setattr(settings, "API_TOKEN", None)

    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: notifier

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def add_session(db):
    """Insert a session row directly, bypassing the service."""

    def _add(start: datetime.datetime, end: datetime.datetime | None = None) -> SleepSession:
        duration = None
        if end is not None:
            duration = round((end - start).total_seconds() / 60)
        entry = SleepSession(start_time=start, end_time=end, duration_minutes=duration)
        db.add(entry)
        db.commit()
        db.refresh(entry)
        return entry

    return _add
