"""Synchronous request dispatch."""

import logging

import httpx

from api_wrapper.errors.handler import translate_error
from api_wrapper.response import Response

logger = logging.getLogger(__name__)


class Dispatcher:
    """Sends requests and turns error statuses into typed errors.

    Redirects are resolved by the HTTP client before the status is checked.
    4xx and 5xx responses are handed to the error translator together with
    the request that produced them. Transport failures (``httpx.TransportError``
    and subclasses such as timeouts) are not caught: there is no response
    body to translate.
    """

    def __init__(self, http_client: httpx.Client):
        self._http_client = http_client

    def send(self, request: httpx.Request) -> Response:
        response = self._http_client.send(request)
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if response.is_error:
            translate_error(request, response)

        return Response.from_response(response)
