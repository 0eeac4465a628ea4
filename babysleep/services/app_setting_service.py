"""
App setting service.

Business logic for the persisted key/value preferences.
"""

from sqlmodel import Session

from babysleep.core.errors import NotFoundError
from babysleep.core.timeutils import utcnow
from babysleep.db.repositories.app_setting import AppSettingRepository
from babysleep.models.app_setting import AppSetting
from babysleep.schemas.app_setting import AppSettingResponse


class AppSettingService:
    """Service for app setting business logic."""

    def __init__(self, session: Session):
        self.repository = AppSettingRepository(session)

    def get_all(self) -> dict[str, str]:
        return { s.key: s.value for s in self.repository.get_all() }

    def get(self, key: str) -> AppSettingResponse:
        setting = self.repository.get(key)
        if not setting:
            raise NotFoundError(f"Setting '{key}' not found")
        return AppSettingResponse(key=setting.key, value=setting.value)

    def put(self, key: str, value: str) -> AppSettingResponse:
        """Create or overwrite a setting."""
        setting = self.repository.get(key)
        if setting:
            setting.value = value
            setting.updated_at = utcnow()
        else:
            setting = AppSetting(key=key, value=value)
        setting = self.repository.save(setting)
        return AppSettingResponse(key=setting.key, value=setting.value)

    def delete(self, key: str) -> None:
        if not self.repository.delete(key):
            raise NotFoundError(f"Setting '{key}' not found")
