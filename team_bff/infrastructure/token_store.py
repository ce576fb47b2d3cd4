"""Token Store: the bearer access token held for upstream calls.

Invariants:
    - One store per application instance, shared by every request
    - Set on login, refresh, and from the inbound Authorization header
    - Cleared on logout or when an automatic refresh fails
    - Reads and writes are not coordinated (last writer wins)
"""

import logging

logger = logging.getLogger(__name__)


class TokenStore:
    """Holds the current upstream access token."""

    def __init__(self, access_token: str | None = None):
        self._access_token = access_token or None

    @property
    def access_token(self) -> str | None:
        return self._access_token

    def set(self, token: str) -> None:
        self._access_token = token

    def clear(self) -> None:
        if self._access_token is not None:
            logger.debug("Access token cleared")
        self._access_token = None

    def authorization_header(self) -> dict[str, str]:
        """Return the Authorization header for the held token, if any."""
        if not self._access_token:
            return {}
        return {"Authorization": f"Bearer {self._access_token}"}
