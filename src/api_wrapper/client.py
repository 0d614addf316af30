"""Base client shared by every endpoint wrapper."""

import re
from collections.abc import Iterable
from typing import Any

from api_wrapper.auth.manager import TokenManager
from api_wrapper.auth.provider import Provider
from api_wrapper.auth.tokens import AccessToken
from api_wrapper.config import ClientConfig
from api_wrapper.errors.exceptions import InvalidBaseUrlError
from api_wrapper.parameters import GetParameters, ListParameters, PdfParameters, PreviewParameters
from api_wrapper.response import Response
from api_wrapper.transport.dispatch import Dispatcher
from api_wrapper.transport.request import HttpMethod, RequestBuilder
from api_wrapper.urls import prepare_get_url, prepare_list_url, prepare_pdf_url, prepare_preview_url

BASE_URL_PATTERN = re.compile(
    r"^(http|https)://[a-z0-9_]+([\-\.]{1}[a-z_0-9]+)*\.[_a-z]{2,5}((:[0-9]{1,5})?/.*)?$",
    re.IGNORECASE,
)


class ApiClient:
    """Request pipeline underlying every endpoint wrapper.

    Each call runs: credential check (refreshing lazily through the
    provider), request building, dispatch, and translation of error
    statuses into typed exceptions. Endpoint subclasses compose URLs with the
    ``_prepare_*_url`` helpers and call :meth:`_call_api`.

    Credential state is per instance. One call at a time is assumed; token
    refresh is serialised so concurrent callers share a single exchange.

    Example:
        ```python
        class InvoicesEndpoint(ApiClient):
            def list(self, parameters: ListParameters | None = None) -> Response:
                return self._call_api(HttpMethod.GET, self._prepare_list_url("/invoices", parameters))

            def create(self, invoice: dict) -> Response:
                return self._call_api(HttpMethod.POST, self._prepare_list_url("/invoices"), invoice)


        invoices = InvoicesEndpoint(provider, refresh_token="...")
        invoices.set_language("nl")
        page = invoices.list(ListParameters(filter="status:open", limit=25))
        ```

    Args:
        provider: Token exchange and HTTP client source.
        refresh_token: Optional refresh credential. Without one, tokens are
            obtained through the client-credentials grant.

    Raises:
        InvalidBaseUrlError: If the provider's base URL is malformed.
    """

    def __init__(self, provider: Provider, refresh_token: str | None = None):
        self._provider = provider
        self.base_url = provider.get_base_url()
        self._check_base_url()

        self._tokens = TokenManager(provider, refresh_token=refresh_token)
        self._builder = RequestBuilder(provider)
        self._dispatcher = Dispatcher(provider.get_http_client())

    @classmethod
    def from_config(cls, config: ClientConfig, **provider_options: Any) -> "ApiClient":
        """Build a client (and its provider) from a :class:`ClientConfig`."""
        client = cls(Provider.from_config(config, **provider_options), refresh_token=config.refresh_token)
        if config.scopes:
            client.set_scopes(config.scopes)
        if config.language is not None:
            client.set_language(config.language)
        return client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self._provider.close()

    def _check_base_url(self) -> None:
        if not BASE_URL_PATTERN.match(self.base_url):
            raise InvalidBaseUrlError(self.base_url)

    def set_refresh_token(self, refresh_token: str) -> None:
        """Use a new refresh token; the current access token is discarded."""
        self._tokens.set_refresh_token(refresh_token)

    def set_access_token(self, access_token: AccessToken) -> None:
        self._tokens.set_access_token(access_token)

    def set_scopes(self, scopes: Iterable[str]) -> None:
        """Scopes requested on the next token exchange."""
        self._tokens.set_scopes(scopes)

    def set_language(self, language: str) -> None:
        """Send ``Accept-Language`` for endpoints returning translatable content."""
        self._builder.language = language

    def get_access_token(self) -> AccessToken:
        """Return the current credential, refreshing it first if needed."""
        return self._tokens.ensure_valid_token()

    def get_provider(self) -> Provider:
        return self._provider

    def _call_api(self, method: HttpMethod | str, url: str, payload: Any = None) -> Response:
        """Send an authenticated request and return the successful response.

        Args:
            method: One of :class:`HttpMethod`.
            url: Absolute URL, usually from a ``_prepare_*_url`` helper.
            payload: JSON-serialisable data, a :class:`FilePayload`, or None.

        Raises:
            ApiError subclass: On a 4xx/5xx response.
            CredentialError: If the token exchange is rejected.
            httpx.TransportError: On network failure or timeout.
        """
        token = self._tokens.ensure_valid_token()
        request = self._builder.build(method, url, token, payload)
        return self._dispatcher.send(request)

    def _prepare_list_url(self, endpoint_url: str, parameters: ListParameters | None = None) -> str:
        return prepare_list_url(self.base_url, endpoint_url, parameters)

    def _prepare_get_url(self, endpoint_url: str, parameters: GetParameters | None = None) -> str:
        return prepare_get_url(self.base_url, endpoint_url, parameters)

    def _prepare_pdf_url(self, endpoint_url: str, parameters: PdfParameters | None = None) -> str:
        return prepare_pdf_url(self.base_url, endpoint_url, parameters)

    def _prepare_preview_url(self, endpoint_url: str, parameters: PreviewParameters | None = None) -> str:
        return prepare_preview_url(self.base_url, endpoint_url, parameters)
