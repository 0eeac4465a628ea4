"""
Bearer token verification.

A single shared secret (``API_TOKEN``) protects the whole API.  The
comparison runs over the complete ``Authorization`` header value with
:func:`secrets.compare_digest` so that response timing does not reveal
how much of a guessed token matched.
"""

import secrets
from typing import Optional


def expected_authorization(token: str) -> str:
    return f"Bearer {token}"


def verify_authorization_header(header: Optional[str], token: Optional[str]) -> bool:
    """Check an ``Authorization`` header against the configured token.

    Returns ``True`` when no token is configured (auth disabled).
    """
    if not token:
        return True
    if not header:
        return False
    return secrets.compare_digest(header.encode("utf-8"), expected_authorization(token).encode("utf-8"))
