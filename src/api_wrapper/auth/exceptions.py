"""Custom exceptions for credential resolution and token exchange.

Example:
    ```python
    from api_wrapper.auth.exceptions import TokenExchangeError

    try:
        token = provider.get_access_token("client_credentials", {"scope": "read"})
    except TokenExchangeError as e:
        print(f"Exchange rejected with HTTP {e.status_code}")
    ```
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class CredentialError(Exception):
    """Base exception for configuration and token exchange failures.

    Raised before any API request is sent, so catching it separates
    "could not authenticate" from the ApiError family.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required client setting is missing from config and environment.

    Attributes:
        env_var_name: The prefixed environment variable that was checked.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class TokenExchangeError(CredentialError):
    """Raised when the token endpoint rejects an exchange.

    Attributes:
        grant_type: Grant that was attempted.
        status_code: HTTP status of the token endpoint's answer.
        response: The raw token endpoint response.
    """

    def __init__(
        self,
        message: str,
        grant_type: str | None = None,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.grant_type = grant_type
        self.status_code = status_code
        self.response = response
