"""Pydantic schemas for request/response validation."""

from babysleep.schemas.sleep_session import (
    SleepStartRequest,
    SleepEndRequest,
    SleepSessionBounds,
    SleepSessionResponse,
    SleepSessionDeleteResponse,
)
from babysleep.schemas.stats import (
    TodayStatsResponse,
    WeeklyDay,
    WeeklyAverages,
    WeeklyStatsResponse,
    OverallStats,
    DailyTotal,
    HourlyBucket,
    OverviewStatsResponse,
)
from babysleep.schemas.app_setting import AppSettingUpdate, AppSettingResponse, AppConfigResponse

__all__ = [
    "SleepStartRequest",
    "SleepEndRequest",
    "SleepSessionBounds",
    "SleepSessionResponse",
    "SleepSessionDeleteResponse",
    "TodayStatsResponse",
    "WeeklyDay",
    "WeeklyAverages",
    "WeeklyStatsResponse",
    "OverallStats",
    "DailyTotal",
    "HourlyBucket",
    "OverviewStatsResponse",
    "AppSettingUpdate",
    "AppSettingResponse",
    "AppConfigResponse",
]
