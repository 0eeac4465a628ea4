"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from babysleep.models.sleep_session import SleepSession  # noqa: F401
from babysleep.models.app_setting import AppSetting  # noqa: F401
