"""OAuth2 provider: token exchange and authenticated request construction.

The provider is the pipeline's only link to the authorization server. It
performs the two form-encoded token exchanges the client needs
(``refresh_token`` and ``client_credentials``) and builds requests carrying the
resulting bearer credential. It does not implement interactive flows.

Example:
    ```python
    import httpx

    from api_wrapper.auth import Provider

    provider = Provider(
        base_url="https://api.example.com/v1",
        client_id="my-client",
        client_secret="s3cret",
    )
    token = provider.get_access_token("client_credentials", {"scope": "invoices"})
    request = provider.get_authenticated_request("GET", "https://api.example.com/v1/invoices", token)
    ```
"""

import logging
from typing import TYPE_CHECKING, Any

import httpx

from api_wrapper.auth.exceptions import TokenExchangeError
from api_wrapper.auth.tokens import AccessToken

if TYPE_CHECKING:
    from api_wrapper.config import ClientConfig

logger = logging.getLogger(__name__)


class Provider:
    """OAuth2 provider backed by an ``httpx.Client``.

    Args:
        base_url: API root used by endpoint URLs.
        client_id: OAuth2 client identifier.
        client_secret: OAuth2 client secret.
        token_url: Token endpoint. Defaults to ``<base_url>/oauth/token``.
        http_client: Client used for the token exchange and for API calls.
            A new one, following redirects, is created when omitted and
            closed by :meth:`close`.
        timeout: Timeout for a client created here.
    """

    TOKEN_PATH = "/oauth/token"

    def __init__(
        self,
        *,
        base_url: str,
        client_id: str,
        client_secret: str,
        token_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url
        self.client_id = client_id
        self.client_secret = client_secret
        self.token_url = token_url or f"{base_url.rstrip('/')}{self.TOKEN_PATH}"
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.Client(timeout=timeout, follow_redirects=True)

    @classmethod
    def from_config(cls, config: "ClientConfig", http_client: httpx.Client | None = None) -> "Provider":
        """Build a provider from a resolved :class:`ClientConfig`."""
        return cls(
            base_url=config.base_url,
            client_id=config.client_id,
            client_secret=config.client_secret,
            token_url=config.token_url,
            http_client=http_client,
            timeout=config.timeout,
        )

    def get_base_url(self) -> str:
        return self.base_url

    def get_http_client(self) -> httpx.Client:
        return self._http_client

    def get_access_token(self, grant: str, params: dict[str, Any]) -> AccessToken:
        """Exchange credentials at the token endpoint.

        Args:
            grant: ``"refresh_token"`` or ``"client_credentials"``.
            params: Grant-specific form fields (``refresh_token``, ``scope``).

        Returns:
            The issued AccessToken.

        Raises:
            TokenExchangeError: If the endpoint answers with an error status
                or an unusable body.
            httpx.TransportError: On network failure, unmodified.
        """
        form = {
            "grant_type": grant,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            **{key: value for key, value in params.items() if value is not None},
        }

        logger.debug(f"Requesting access token from {self.token_url} (grant: {grant})")
        response = self._http_client.post(self.token_url, data=form, headers={"Accept": "application/json"})

        if response.is_error:
            raise TokenExchangeError(
                self._describe_failure(response),
                grant_type=grant,
                status_code=response.status_code,
                response=response,
            )

        requested = params.get("scope") or ""
        try:
            return AccessToken.from_token_response(response.json(), requested_scopes=requested.split())
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise TokenExchangeError(
                f"Invalid token response format: {e}",
                grant_type=grant,
                status_code=response.status_code,
                response=response,
            ) from e

    def get_authenticated_request(
        self,
        method: str,
        url: str,
        token: AccessToken,
        **options: Any,
    ) -> httpx.Request:
        """Build a request carrying the bearer credential.

        Args:
            method: HTTP method.
            url: Absolute URL.
            token: Credential to authenticate with.
            **options: Passed to ``httpx.Client.build_request`` (``headers``,
                ``content``, ``data``, ``files``...).
        """
        headers = dict(options.pop("headers", None) or {})
        headers["Authorization"] = f"Bearer {token.access_token}"
        return self._http_client.build_request(method, url, headers=headers, **options)

    def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_http_client:
            self._http_client.close()

    @staticmethod
    def _describe_failure(response: httpx.Response) -> str:
        message = f"Token exchange failed with HTTP {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            return message
        if isinstance(body, dict):
            detail = body.get("error_description") or body.get("error")
            if detail:
                message += f": {detail}"
        return message
