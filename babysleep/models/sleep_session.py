"""
Sleep session database model.

Defines the sleep_sessions table.  A row with no ``end_time`` is the
*active* session; at most one may exist, which is enforced by the
partial unique index declared below.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Index
from sqlmodel import Field, SQLModel

from babysleep.core.timeutils import utcnow


class SleepSession(SQLModel, table=True):
    """A single sleep interval.

    ``duration_minutes`` is derived from the bounds by
    :class:`SleepSessionService` on every write and is ``None`` while the
    session is active.
    """

    __tablename__ = "sleep_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)

    start_time: datetime.datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False, index=True))
    end_time: Optional[datetime.datetime] = Field(default=None,
                                                  sa_column=Column(DateTime(timezone=True), nullable=True,
                                                                   index=True))

    # Derived, never set directly by API callers
    duration_minutes: Optional[int] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=utcnow,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))

    @property
    def is_active(self) -> bool:
        return self.end_time is None


# At most one row may have end_time IS NULL.  NULLs are distinct in plain
# unique indexes, so the index is built over the boolean expression.
_active_expr = SleepSession.__table__.c.end_time.is_(None)

Index("uq_sleep_sessions_single_active", _active_expr, unique=True, postgresql_where=_active_expr,
      sqlite_where=_active_expr, )
