"""Authentication components for the API client.

This module provides:
- The OAuth2 provider performing token exchanges
- The bearer credential model
- Lazy credential refresh for the request pipeline

Example:
    ```python
    from api_wrapper.auth import Provider, TokenManager

    provider = Provider(base_url="https://api.example.com/v1", client_id="id", client_secret="secret")
    manager = TokenManager(provider, refresh_token="long-lived-refresh-token")
    token = manager.ensure_valid_token()
    ```
"""

from api_wrapper.auth.exceptions import (
    CredentialError,
    CredentialNotFoundError,
    TokenExchangeError,
)
from api_wrapper.auth.manager import TokenManager
from api_wrapper.auth.provider import Provider
from api_wrapper.auth.tokens import GRANT_CLIENT_CREDENTIALS, GRANT_REFRESH_TOKEN, AccessToken

__all__ = [
    "GRANT_CLIENT_CREDENTIALS",
    "GRANT_REFRESH_TOKEN",
    "AccessToken",
    "CredentialError",
    "CredentialNotFoundError",
    "Provider",
    "TokenExchangeError",
    "TokenManager",
]
