"""
Sleep session repository.

Handles database operations for :class:`SleepSession`.
Includes the aggregation queries used by the stats views.

Date and hour grouping is done on ``start_time`` in UTC.  On
PostgreSQL the engine pins the connection timezone to UTC (see
:mod:`babysleep.db.session`) so ``date()`` and ``EXTRACT(hour ...)``
agree with SQLite, which stores UTC values as-is.
"""

import datetime
from typing import Optional

from sqlalchemy import Date, and_, case, extract, func, or_
from sqlmodel import Session, select

from babysleep.core.timeutils import as_utc
from babysleep.models.sleep_session import SleepSession

_start_date = func.date(SleepSession.start_time, type_=Date)
_start_hour = extract("hour", SleepSession.start_time)
_completed = SleepSession.end_time.is_not(None)


class SleepSessionRepository:
    """Repository for SleepSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: SleepSession) -> SleepSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[SleepSession]:
        return self.session.get(SleepSession, entry_id)

    def get_active(self) -> Optional[SleepSession]:
        """Return the open session, latest by start time if several exist."""
        statement = (select(SleepSession).where(SleepSession.end_time.is_(None)).order_by(
            SleepSession.start_time.desc(), SleepSession.id.desc()).limit(1))
        return self.session.exec(statement).first()

    def count_active(self) -> int:
        statement = select(func.count()).select_from(SleepSession).where(SleepSession.end_time.is_(None))
        return self.session.exec(statement).first() or 0

    def list_sessions(self, start: Optional[datetime.datetime] = None, end: Optional[datetime.datetime] = None,
                      limit: Optional[int] = None, ) -> list[SleepSession]:
        """Sessions whose start falls within ``[start, end]``, newest first."""
        statement = select(SleepSession)
        if start is not None:
            statement = statement.where(SleepSession.start_time >= as_utc(start))
        if end is not None:
            statement = statement.where(SleepSession.start_time <= as_utc(end))
        statement = statement.order_by(SleepSession.start_time.desc(), SleepSession.id.desc())
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Aggregation queries for stats
    # ------------------------------------------------------------------

    def latest_wake_up(self, window_start: datetime.datetime, window_end: datetime.datetime, night_start_hour: int,
                       day_start_hour: int, until: Optional[datetime.datetime] = None, ) -> Optional[datetime.datetime]:
        """Latest end of a night-bucket session in ``[window_start, window_end)``.

        Naps ending inside the window are not wake-ups.  With *until*,
        ends after it are ignored.
        """
        clauses = [_completed, _is_night(night_start_hour, day_start_hour),
                   SleepSession.end_time >= as_utc(window_start), SleepSession.end_time < as_utc(window_end), ]
        if until is not None:
            clauses.append(SleepSession.end_time <= as_utc(until))
        statement = select(SleepSession.end_time).where(*clauses).order_by(SleepSession.end_time.desc()).limit(1)
        return as_utc(self.session.exec(statement).first())

    def sum_completed_after(self, after: datetime.datetime,
                            until: Optional[datetime.datetime] = None, ) -> tuple[int, float]:
        """Count and total duration of completed sessions starting in ``(after, until]``."""
        clauses = [_completed, SleepSession.start_time > as_utc(after)]
        if until is not None:
            clauses.append(SleepSession.start_time <= as_utc(until))
        statement = select(func.count(SleepSession.id),
                           func.coalesce(func.sum(SleepSession.duration_minutes), 0), ).where(*clauses)
        row = self.session.exec(statement).first()
        if row is None:
            return 0, 0.0
        return int(row[0]), float(row[1])

    def day_night_totals_by_date(self, since: datetime.datetime, until: datetime.datetime, night_start_hour: int,
                                 day_start_hour: int, ) -> list[dict]:
        """Per-date night/day duration sums and nap counts for starts in ``[since, until]``.

        A session's whole duration goes to the bucket of its start hour.
        """
        is_night = _is_night(night_start_hour, day_start_hour)
        is_day = and_(_start_hour >= day_start_hour, _start_hour < night_start_hour)
        statement = (select(_start_date.label("day"), func.coalesce(func.sum(SleepSession.duration_minutes), 0),
                            func.coalesce(func.sum(case((is_night, SleepSession.duration_minutes), else_=0)), 0),
                            func.coalesce(func.sum(case((is_day, SleepSession.duration_minutes), else_=0)), 0),
                            func.coalesce(func.sum(case((is_day, 1), else_=0)), 0), ).where(
            _completed, SleepSession.start_time >= as_utc(since), SleepSession.start_time <= as_utc(until), ).group_by(
            _start_date).order_by(_start_date))
        return [{ "date": _as_date(row[0]), "total_minutes": float(row[1]), "night_minutes": float(row[2]),
                  "day_minutes": float(row[3]), "naps": int(row[4]), } for row in self.session.exec(statement).all()]

    def overall_totals(self, start: Optional[datetime.datetime] = None,
                       end: Optional[datetime.datetime] = None, ) -> dict:
        """Count, sum, average and maximum duration of completed sessions."""
        statement = select(func.count(SleepSession.id), func.coalesce(func.sum(SleepSession.duration_minutes), 0),
                           func.avg(SleepSession.duration_minutes), func.max(SleepSession.duration_minutes), ).where(
            *self._completed_in_range(start, end))
        row = self.session.exec(statement).first()
        if row is None or not row[0]:
            return { "total_sessions": 0, "total_minutes": 0.0, "avg_minutes": 0.0, "max_minutes": 0.0, }
        return { "total_sessions": int(row[0]), "total_minutes": float(row[1]), "avg_minutes": float(row[2] or 0),
                 "max_minutes": float(row[3] or 0), }

    def totals_by_date(self, since: datetime.datetime, until: datetime.datetime,
                       start: Optional[datetime.datetime] = None,
                       end: Optional[datetime.datetime] = None, ) -> list[dict]:
        """Session count and total duration per start date, for starts in ``[since, until]``."""
        statement = (select(_start_date.label("day"), func.count(SleepSession.id),
                            func.coalesce(func.sum(SleepSession.duration_minutes), 0), ).where(
            *self._completed_in_range(start, end), SleepSession.start_time >= as_utc(since),
            SleepSession.start_time <= as_utc(until), ).group_by(
            _start_date).order_by(_start_date))
        return [{ "date": _as_date(row[0]), "sessions": int(row[1]), "total_minutes": float(row[2]), } for row in
                self.session.exec(statement).all()]

    def totals_by_hour(self, start: Optional[datetime.datetime] = None,
                       end: Optional[datetime.datetime] = None, ) -> list[dict]:
        """Session count and average duration per start hour (hours with data only)."""
        statement = (select(_start_hour.label("hour"), func.count(SleepSession.id),
                            func.avg(SleepSession.duration_minutes), ).where(
            *self._completed_in_range(start, end)).group_by(_start_hour).order_by(_start_hour))
        return [{ "hour": int(row[0]), "sessions": int(row[1]), "avg_minutes": float(row[2] or 0), } for row in
                self.session.exec(statement).all()]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: SleepSession) -> SleepSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False

    def rollback(self) -> None:
        self.session.rollback()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _completed_in_range(start: Optional[datetime.datetime], end: Optional[datetime.datetime]) -> list:
        clauses = [_completed]
        if start is not None:
            clauses.append(SleepSession.start_time >= as_utc(start))
        if end is not None:
            clauses.append(SleepSession.start_time <= as_utc(end))
        return clauses


def _is_night(night_start_hour: int, day_start_hour: int):
    """Start hour falls in the night bucket."""
    return or_(_start_hour >= night_start_hour, _start_hour < day_start_hour)


def _as_date(value) -> datetime.date:
    """Drivers return ``date()`` results as date objects or ISO strings."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(str(value))
