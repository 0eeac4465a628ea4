"""
Application setting database model.

Key/value store for user preferences persisted by the frontend.
"""

import datetime

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, SQLModel

from babysleep.core.timeutils import utcnow


class AppSetting(SQLModel, table=True):
    """A single persisted preference."""

    __tablename__ = "app_settings"

    key: str = Field(primary_key=True, max_length=100)
    value: str = Field(sa_column=Column(Text, nullable=False))

    updated_at: datetime.datetime = Field(default_factory=utcnow,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
