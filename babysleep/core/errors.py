"""
Error hierarchy.

Every error raised by the service and repository layers derives from
:class:`BabySleepError` and carries the HTTP status it maps to.  The
global handlers in :mod:`babysleep.api.error_handlers` turn them into
``{"error": message}`` responses.

:class:`NotificationError` is the exception: it never reaches a caller
and is only logged by the notifier.
"""

from fastapi import status


class BabySleepError(Exception):
    """Base exception for all Baby Sleep Tracker errors."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class InvalidInputError(BabySleepError):
    """Request fields are missing, malformed or contradictory."""

    http_status = status.HTTP_400_BAD_REQUEST


class ConflictError(BabySleepError):
    """The single-active-session invariant would be violated."""

    http_status = status.HTTP_409_CONFLICT


class NotFoundError(BabySleepError):
    """Referenced session or setting does not exist."""

    http_status = status.HTTP_404_NOT_FOUND


class UnauthorizedError(BabySleepError):
    """Missing or invalid bearer token."""

    http_status = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class StorageUnavailableError(BabySleepError):
    """The database cannot be reached."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message)


class NotificationError(BabySleepError):
    """Outbound state-change notification failed."""
