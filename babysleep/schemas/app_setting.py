"""App setting API schemas."""

from pydantic import BaseModel


class AppSettingUpdate(BaseModel):
    """Body of ``PUT /settings/{key}``."""

    value: str


class AppSettingResponse(BaseModel):
    key: str
    value: str


class AppConfigResponse(BaseModel):
    """Cosmetic display configuration from the environment."""

    language: str
    baby_name: str
