"""
Stats configuration.

All hour boundaries and window lengths used by the stats views live
here so that tests can inject their own values.  Hours are UTC.
"""

from pydantic import BaseModel, Field, model_validator

from babysleep.core.config import settings


class StatsConfig(BaseModel):
    """Configuration for the stats views."""

    # Night bucket: start hour >= night_start_hour or < day_start_hour
    night_start_hour: int = Field(default_factory=lambda: settings.NIGHT_START_HOUR, ge=0, le=23)
    day_start_hour: int = Field(7, ge=0, le=23)

    # Morning wake-up must fall in [start, end)
    wake_window_start_hour: int = Field(4, ge=0, le=23)
    wake_window_end_hour: int = Field(12, ge=1, le=24)

    weekly_window_days: int = Field(7, ge=1)
    daily_history_days: int = Field(30, ge=1)

    @model_validator(mode="after")
    def _check_windows(self) -> "StatsConfig":
        if self.wake_window_end_hour <= self.wake_window_start_hour:
            raise ValueError("wake_window_end_hour must be after wake_window_start_hour")
        return self


def default_config() -> StatsConfig:
    """Config built from the current application settings."""
    return StatsConfig()
