"""Database repositories."""

from babysleep.db.repositories.sleep_session import SleepSessionRepository
from babysleep.db.repositories.app_setting import AppSettingRepository

__all__ = [
    "SleepSessionRepository",
    "AppSettingRepository",
]
