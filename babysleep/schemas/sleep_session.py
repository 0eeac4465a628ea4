"""
Sleep session API schemas.

Timestamps are accepted as ISO 8601 strings.  Values with an offset are
converted to UTC; naive values are taken to be UTC already.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from babysleep.core.timeutils import as_utc


class _UTCModel(BaseModel):
    """Normalises every datetime field to aware UTC."""

    @field_validator("*", mode="after")
    @classmethod
    def _normalise_datetimes(cls, value):
        if isinstance(value, datetime.datetime):
            return as_utc(value)
        return value


class SleepStartRequest(_UTCModel):
    """Body of ``POST /sleep/start``."""

    start_time: Optional[datetime.datetime] = Field(None, description="Defaults to now")


class SleepEndRequest(_UTCModel):
    """Body of ``POST /sleep/end``."""

    end_time: Optional[datetime.datetime] = Field(None, description="Defaults to now")


class SleepSessionBounds(_UTCModel):
    """Both bounds of a session, for backfill and edit."""

    start_time: datetime.datetime
    end_time: datetime.datetime


class SleepSessionResponse(_UTCModel):
    """Schema for a sleep session in API responses."""

    id: int
    start_time: datetime.datetime
    end_time: Optional[datetime.datetime]
    duration_minutes: Optional[int]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class SleepSessionDeleteResponse(BaseModel):
    message: str
    session: SleepSessionResponse
