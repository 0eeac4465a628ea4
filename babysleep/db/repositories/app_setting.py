"""App setting repository."""

from typing import Optional

from sqlmodel import Session, select

from babysleep.models.app_setting import AppSetting


class AppSettingRepository:
    """Repository for AppSetting database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, key: str) -> Optional[AppSetting]:
        return self.session.get(AppSetting, key)

    def get_all(self) -> list[AppSetting]:
        statement = select(AppSetting).order_by(AppSetting.key)
        return list(self.session.exec(statement).all())

    def save(self, setting: AppSetting) -> AppSetting:
        self.session.add(setting)
        self.session.commit()
        self.session.refresh(setting)
        return setting

    def delete(self, key: str) -> bool:
        setting = self.get(key)
        if setting:
            self.session.delete(setting)
            self.session.commit()
            return True
        return False
