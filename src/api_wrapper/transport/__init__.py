"""Transport components: request construction and dispatch.

Modules:
    request: Authenticated request building with JSON and multipart bodies
    dispatch: Sending requests and translating error statuses

Example:
    ```python
    from api_wrapper.transport import Dispatcher, RequestBuilder

    builder = RequestBuilder(provider, language="en")
    request = builder.build("POST", "https://api.example.com/v1/invoices", token, {"amount": 1.0})
    response = Dispatcher(provider.get_http_client()).send(request)
    ```
"""

from api_wrapper.transport.dispatch import Dispatcher
from api_wrapper.transport.request import FilePayload, HttpMethod, RequestBuilder, encode_json

__all__ = [
    "Dispatcher",
    "FilePayload",
    "HttpMethod",
    "RequestBuilder",
    "encode_json",
]
