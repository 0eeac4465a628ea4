"""SQLModel database models."""

from babysleep.models.sleep_session import SleepSession
from babysleep.models.app_setting import AppSetting

__all__ = [
    "SleepSession",
    "AppSetting",
]
