"""API Wrapper - OAuth2 REST API client core.

This library provides the request pipeline shared by every endpoint wrapper:
- Lazy OAuth2 token refresh (refresh-token or client-credentials grant)
- Request building with JSON or multipart file bodies
- Translation of error responses into typed exceptions
- Query-string composition for list, get, pdf and preview actions

Example:
    ```python
    from api_wrapper import ApiClient, ClientConfig, HttpMethod, ListParameters


    class ContactsEndpoint(ApiClient):
        def list(self, parameters: ListParameters | None = None):
            return self._call_api(HttpMethod.GET, self._prepare_list_url("/contacts", parameters))


    contacts = ContactsEndpoint.from_config(ClientConfig.from_env())
    response = contacts.list(ListParameters(filter="name:ACME", limit=10))
    print(response.data)
    ```
"""

from api_wrapper.auth import AccessToken, Provider
from api_wrapper.client import ApiClient
from api_wrapper.config import ClientConfig
from api_wrapper.parameters import GetParameters, ListParameters, PdfParameters, PreviewParameters
from api_wrapper.response import Response
from api_wrapper.transport import FilePayload, HttpMethod

__version__ = "0.1.0"

__all__ = [
    "AccessToken",
    "ApiClient",
    "ClientConfig",
    "FilePayload",
    "GetParameters",
    "HttpMethod",
    "ListParameters",
    "PdfParameters",
    "PreviewParameters",
    "Provider",
    "Response",
    "__version__",
]
