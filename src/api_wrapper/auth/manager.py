"""Lazy bearer credential refresh."""

import logging
from collections.abc import Iterable
from threading import Lock

from api_wrapper.auth.provider import Provider
from api_wrapper.auth.tokens import GRANT_CLIENT_CREDENTIALS, GRANT_REFRESH_TOKEN, AccessToken

logger = logging.getLogger(__name__)


class TokenManager:
    """Holds the current credential and refreshes it on demand.

    A refresh happens whenever no access token is held or the held one has
    expired. With a refresh token configured the ``refresh_token`` grant is
    used, otherwise ``client_credentials``; both send the configured scopes.

    Refresh is serialised with a lock so callers sharing one manager trigger
    a single exchange. Exchange failures propagate unchanged.
    """

    def __init__(self, provider: Provider, refresh_token: str | None = None):
        self._provider = provider
        self._lock = Lock()
        self._access_token: AccessToken | None = None
        self._refresh_token: str | None = None
        self._scopes: list[str] = []

        if refresh_token is not None:
            self.set_refresh_token(refresh_token)

    @property
    def refresh_token(self) -> str | None:
        return self._refresh_token

    @property
    def access_token(self) -> AccessToken | None:
        """Currently held credential, without triggering a refresh."""
        return self._access_token

    @property
    def scopes(self) -> list[str]:
        return list(self._scopes)

    def set_refresh_token(self, refresh_token: str) -> None:
        """Replace the refresh token and drop the held access token."""
        with self._lock:
            self._refresh_token = refresh_token
            self._access_token = None

    def set_access_token(self, access_token: AccessToken) -> None:
        with self._lock:
            self._access_token = access_token

    def set_scopes(self, scopes: Iterable[str]) -> None:
        # dict keeps first-seen order while dropping duplicates
        self._scopes = list(dict.fromkeys(scopes))

    def needs_refresh(self) -> bool:
        return self._is_stale(self._access_token)

    def ensure_valid_token(self) -> AccessToken:
        """Return a usable credential, exchanging for a new one if needed."""
        token = self._access_token
        if not self._is_stale(token):
            return token

        with self._lock:
            # Another caller may have refreshed while we waited
            if self._is_stale(self._access_token):
                self._access_token = self._exchange()
            return self._access_token

    @staticmethod
    def _is_stale(token: AccessToken | None) -> bool:
        return token is None or token.has_expired()

    def _exchange(self) -> AccessToken:
        scope = " ".join(self._scopes)

        if self._refresh_token:
            logger.debug("Access token missing or expired, exchanging refresh token")
            return self._provider.get_access_token(
                GRANT_REFRESH_TOKEN,
                {"refresh_token": self._refresh_token, "scope": scope},
            )

        logger.debug("Access token missing or expired, requesting client credentials token")
        return self._provider.get_access_token(GRANT_CLIENT_CREDENTIALS, {"scope": scope})
