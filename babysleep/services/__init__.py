"""Business logic services."""

from babysleep.services.sleep_session_service import SleepSessionService
from babysleep.services.app_setting_service import AppSettingService
from babysleep.services.notifier import HomeAssistantNotifier

__all__ = [
    "SleepSessionService",
    "AppSettingService",
    "HomeAssistantNotifier",
]
