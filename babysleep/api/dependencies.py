"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and service wiring.
"""

from typing import Optional

from fastapi import Depends, Header
from sqlmodel import Session

from babysleep.core.config import settings
from babysleep.core.errors import UnauthorizedError
from babysleep.core.security import verify_authorization_header
from babysleep.db.session import get_db
from babysleep.services.notifier import HomeAssistantNotifier, get_notifier
from babysleep.services.sleep_session_service import SleepSessionService


def require_api_token(authorization: Optional[str] = Header(None)) -> None:
    """Reject the request unless it carries the configured bearer token.

    A no-op when ``API_TOKEN`` is not set.
    """
    if not verify_authorization_header(authorization, settings.API_TOKEN):
        raise UnauthorizedError()


def get_sleep_session_service(db: Session = Depends(get_db),
                              notifier: HomeAssistantNotifier = Depends(get_notifier), ) -> SleepSessionService:
    return SleepSessionService(db, notifier)
