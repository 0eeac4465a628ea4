"""
Sleep session service.

Owns the single-active-session state machine:

    start     (none active)   -> new open session        notify "sleeping"
    end       (one active)    -> session closed          notify "awake"
    continue  (none active)   -> closed session reopened notify "sleeping"
    backfill / update / delete  -> no active-session check, no notification

``duration_minutes`` is recomputed here on every write that touches the
bounds.  Notifications are sent after the change is committed and
cannot fail the call.
"""

import datetime
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from babysleep.core.errors import ConflictError, InvalidInputError, NotFoundError
from babysleep.core.timeutils import as_utc, compute_duration_minutes, utcnow
from babysleep.db.repositories.sleep_session import SleepSessionRepository
from babysleep.models.sleep_session import SleepSession
from babysleep.schemas.sleep_session import SleepSessionBounds, SleepSessionResponse
from babysleep.services.notifier import STATE_AWAKE, STATE_SLEEPING, HomeAssistantNotifier

logger = logging.getLogger(__name__)

ACTIVE_EXISTS = "A sleep session is already active"
NO_ACTIVE = "No active sleep session found"
SESSION_NOT_FOUND = "Session not found"
END_BEFORE_START = "end_time must be after start_time"


def validate_bounds(start: datetime.datetime, end: datetime.datetime) -> None:
    """Reject intervals whose end is not strictly after their start."""
    if as_utc(end) <= as_utc(start):
        raise InvalidInputError(END_BEFORE_START)


class SleepSessionService:
    """Service for sleep session lifecycle."""

    def __init__(self, session: Session, notifier: Optional[HomeAssistantNotifier] = None):
        self.repository = SleepSessionRepository(session)
        self.notifier = notifier

    # ------------------------------------------------------------------
    # Live tracking
    # ------------------------------------------------------------------

    def get_current(self) -> Optional[SleepSessionResponse]:
        entry = self.repository.get_active()
        return self._to_response(entry) if entry else None

    def start(self, start_time: Optional[datetime.datetime] = None) -> SleepSessionResponse:
        if self.repository.get_active():
            raise ConflictError(ACTIVE_EXISTS)

        entry = SleepSession(start_time=as_utc(start_time) if start_time else utcnow())
        try:
            entry = self.repository.create(entry)
        except IntegrityError:
            # Lost a race against a concurrent start; the index held.
            self.repository.rollback()
            raise ConflictError(ACTIVE_EXISTS)

        logger.info(f"Sleep session {entry.id} started", extra={ "session_id": entry.id })
        response = self._to_response(entry)
        self._notify(STATE_SLEEPING, response.start_time, response.id)
        return response

    def end(self, end_time: Optional[datetime.datetime] = None) -> SleepSessionResponse:
        entry = self.repository.get_active()
        if not entry:
            raise NotFoundError(NO_ACTIVE)

        end = as_utc(end_time) if end_time else utcnow()
        validate_bounds(entry.start_time, end)

        entry.end_time = end
        self._touch(entry)
        entry = self.repository.update(entry)

        logger.info(f"Sleep session {entry.id} ended after {entry.duration_minutes} min",
                    extra={ "session_id": entry.id })
        response = self._to_response(entry)
        self._notify(STATE_AWAKE, response.end_time, response.id)
        return response

    def continue_session(self, entry_id: int) -> SleepSessionResponse:
        """Reopen a closed session, e.g. after an accidental "awake" tap."""
        if self.repository.get_active():
            raise ConflictError(ACTIVE_EXISTS)

        entry = self._get_entry(entry_id)
        entry.end_time = None
        self._touch(entry)
        try:
            entry = self.repository.update(entry)
        except IntegrityError:
            self.repository.rollback()
            raise ConflictError(ACTIVE_EXISTS)

        logger.info(f"Sleep session {entry.id} continued", extra={ "session_id": entry.id })
        response = self._to_response(entry)
        self._notify(STATE_SLEEPING, response.start_time, response.id)
        return response

    # ------------------------------------------------------------------
    # History editing
    # ------------------------------------------------------------------

    def list_sessions(self, start_date: Optional[datetime.datetime] = None,
                      end_date: Optional[datetime.datetime] = None,
                      limit: Optional[int] = None, ) -> list[SleepSessionResponse]:
        entries = self.repository.list_sessions(start_date, end_date, limit)
        return [self._to_response(e) for e in entries]

    def create_backfill(self, data: SleepSessionBounds) -> SleepSessionResponse:
        validate_bounds(data.start_time, data.end_time)
        entry = SleepSession(start_time=as_utc(data.start_time), end_time=as_utc(data.end_time))
        self._touch(entry)
        entry = self.repository.create(entry)
        return self._to_response(entry)

    def update_bounds(self, entry_id: int, data: SleepSessionBounds) -> SleepSessionResponse:
        validate_bounds(data.start_time, data.end_time)
        entry = self._get_entry(entry_id)
        entry.start_time = as_utc(data.start_time)
        entry.end_time = as_utc(data.end_time)
        self._touch(entry)
        entry = self.repository.update(entry)
        return self._to_response(entry)

    def delete(self, entry_id: int) -> SleepSessionResponse:
        entry = self._get_entry(entry_id)
        response = self._to_response(entry)
        self.repository.delete(entry_id)
        return response

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry(self, entry_id: int) -> SleepSession:
        entry = self.repository.get_by_id(entry_id)
        if not entry:
            raise NotFoundError(SESSION_NOT_FOUND)
        return entry

    @staticmethod
    def _touch(entry: SleepSession) -> None:
        """Recompute derived fields after a bounds change."""
        entry.duration_minutes = compute_duration_minutes(entry.start_time, entry.end_time)
        entry.updated_at = utcnow()

    def _notify(self, state: str, timestamp: datetime.datetime, entry_id: int) -> None:
        if self.notifier is not None:
            self.notifier.notify(state, timestamp, entry_id)

    @staticmethod
    def _to_response(entry: SleepSession) -> SleepSessionResponse:
        return SleepSessionResponse(id=entry.id, start_time=as_utc(entry.start_time), end_time=as_utc(entry.end_time),
                                    duration_minutes=entry.duration_minutes, created_at=as_utc(entry.created_at),
                                    updated_at=as_utc(entry.updated_at), )
