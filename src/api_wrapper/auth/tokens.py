"""Bearer credential model."""

import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

GRANT_REFRESH_TOKEN = "refresh_token"
GRANT_CLIENT_CREDENTIALS = "client_credentials"


@dataclass(frozen=True, repr=False)
class AccessToken:
    """An OAuth2 bearer credential and its metadata.

    Attributes:
        access_token: The bearer secret sent in the Authorization header.
        expires_at: Unix timestamp after which the token is stale, or None
            when the token endpoint reported no lifetime.
        refresh_token: Refresh credential issued alongside, if any.
        scopes: Scopes granted to this token.
    """

    access_token: str
    expires_at: float | None = None
    refresh_token: str | None = None
    scopes: frozenset[str] = field(default_factory=frozenset)

    def has_expired(self, now: float | None = None) -> bool:
        """Whether the expiry has passed.

        Compares against the exact expiry with no skew margin. Tokens without
        an expiry never expire.
        """
        if self.expires_at is None:
            return False
        current = time.time() if now is None else now
        return self.expires_at < current

    @classmethod
    def from_token_response(
        cls,
        payload: dict[str, Any],
        requested_scopes: Iterable[str] = (),
        now: float | None = None,
    ) -> "AccessToken":
        """Build a token from an RFC 6749 token endpoint response.

        ``expires_in`` (seconds from now) wins over ``expires`` (absolute
        timestamp). When the endpoint does not echo ``scope`` the requested
        scopes are assumed to have been granted.

        Raises:
            KeyError: If ``access_token`` is missing.
            ValueError: If the lifetime fields are not numeric.
        """
        issued_at = time.time() if now is None else now

        expires_at = None
        if payload.get("expires_in") is not None:
            expires_at = issued_at + float(payload["expires_in"])
        elif payload.get("expires") is not None:
            expires_at = float(payload["expires"])

        scope = payload.get("scope")
        scopes = frozenset(scope.split()) if isinstance(scope, str) else frozenset(requested_scopes)

        return cls(
            access_token=payload["access_token"],
            expires_at=expires_at,
            refresh_token=payload.get("refresh_token"),
            scopes=scopes,
        )

    def __repr__(self) -> str:
        return f"AccessToken(access_token='***', expires_at={self.expires_at!r}, scopes={sorted(self.scopes)!r})"
