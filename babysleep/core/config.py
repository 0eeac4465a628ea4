"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Baby Sleep Tracker"
    VERSION: str = "1.0.0"

    DEBUG: bool = False

    # Database
    # A full SQLAlchemy URL takes precedence over the individual parts.
    DATABASE_URL: Optional[str] = None
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "postgres"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "baby_sleep"

    # Startup connectivity check
    DB_CONNECT_RETRIES: int = Field(30, ge=1)
    DB_CONNECT_RETRY_INTERVAL: float = Field(2.0, ge=0.0)

    # Server
    PORT: int = 3001
    CORS_ORIGINS: List[str] = ["*"]

    # Sessions starting at or after this UTC hour (or before 07:00) are "night"
    NIGHT_START_HOUR: int = Field(19, ge=0, le=23)

    # Security
    API_TOKEN: Optional[str] = None

    # Home Assistant
    HA_URL: Optional[str] = None
    HA_TOKEN: Optional[str] = None
    HA_TIMEOUT_SECONDS: float = 5.0

    # Display
    LANGUAGE: str = "en"
    BABY_NAME: str = ""

    # Observability
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")

    @property
    def auth_enabled(self) -> bool:
        return bool(self.API_TOKEN)

    @property
    def notifications_enabled(self) -> bool:
        return bool(self.HA_URL and self.HA_TOKEN)


# Global settings instance
settings = Settings()
