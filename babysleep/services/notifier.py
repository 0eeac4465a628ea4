"""
Home Assistant notifier.

Fires a ``baby_sleep_state_changed`` event on the Home Assistant REST API
whenever the baby falls asleep or wakes up.  Delivery is best-effort:
failures are logged and never reach the API caller.
"""

import datetime
import logging
from typing import Optional

import requests

from babysleep.core.config import settings
from babysleep.core.errors import NotificationError
from babysleep.core.timeutils import as_utc

logger = logging.getLogger(__name__)

EVENT_TYPE = "baby_sleep_state_changed"

STATE_SLEEPING = "sleeping"
STATE_AWAKE = "awake"


class HomeAssistantNotifier:
    """Posts sleep state changes to Home Assistant.

    A notifier without both *base_url* and *token* is disabled and
    :meth:`notify` does nothing.
    """

    def __init__(self, base_url: Optional[str], token: Optional[str], timeout: float = 5.0):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.token = token
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.base_url and self.token)

    @property
    def event_url(self) -> str:
        return f"{self.base_url}/api/events/{EVENT_TYPE}"

    def notify(self, state: str, timestamp: datetime.datetime, session_id: int) -> bool:
        """Send one state-change event.

        Returns ``True`` if the event was delivered.
        """
        if not self.enabled:
            return False
        try:
            self._post_event(state, timestamp, session_id)
        except NotificationError as e:
            logger.warning(f"Failed to notify Home Assistant: {e.message}",
                           extra={ "state": state, "session_id": session_id })
            return False
        except Exception as e:
            # Delivery must never fail a committed state change
            logger.warning(f"Unexpected error notifying Home Assistant: {e}", exc_info=True,
                           extra={ "state": state, "session_id": session_id })
            return False
        logger.info(f"Home Assistant notified: {state}", extra={ "state": state, "session_id": session_id })
        return True

    def _post_event(self, state: str, timestamp: datetime.datetime, session_id: int) -> None:
        payload = {
            "state": state,
            "timestamp": as_utc(timestamp).isoformat(),
            "session_id": session_id,
        }
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }
        try:
            response = requests.post(self.event_url, json=payload, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise NotificationError(str(e)) from e


def get_notifier() -> HomeAssistantNotifier:
    """Dependency providing the notifier configured from settings."""
    return HomeAssistantNotifier(settings.HA_URL, settings.HA_TOKEN, settings.HA_TIMEOUT_SECONDS)
