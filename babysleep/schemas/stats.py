"""
Sleep statistics schemas.

All minute values are rounded to whole minutes at this boundary; the
weekly nap average keeps one decimal.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TodayStatsResponse(BaseModel):
    """Stats since this morning's wake-up.

    ``woke_up`` is ``None`` when no session ended inside the morning
    window; all counters are then zero.
    """

    woke_up: Optional[datetime.datetime] = Field(..., description="End of the night sleep that started the day")
    day_sleep_minutes: int = Field(..., description="Minutes slept in naps since waking up")
    awake_minutes: int = Field(..., description="Minutes awake since waking up (never negative)")
    naps: int = Field(..., description="Completed naps started after waking up")


class WeeklyDay(BaseModel):
    date: datetime.date
    total_minutes: int
    night_minutes: int
    day_minutes: int
    naps: int


class WeeklyAverages(BaseModel):
    total_minutes: int
    night_minutes: int
    day_minutes: int
    naps: float = Field(..., description="Average naps per day, one decimal")


class WeeklyStatsResponse(BaseModel):
    """Night/day split over the trailing week."""

    averages: WeeklyAverages
    daily: list[WeeklyDay]


class OverallStats(BaseModel):
    total_sessions: int
    total_minutes: int
    avg_minutes: int
    max_minutes: int


class DailyTotal(BaseModel):
    date: datetime.date
    sessions: int
    total_minutes: int


class HourlyBucket(BaseModel):
    hour: int = Field(..., ge=0, le=23, description="UTC start hour")
    sessions: int
    avg_minutes: int


class OverviewStatsResponse(BaseModel):
    """Historical aggregates over completed sessions."""

    overall: OverallStats
    daily: list[DailyTotal]
    hourly: list[HourlyBucket]
