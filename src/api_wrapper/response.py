"""Successful API response wrapper."""

import json
from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True)
class Response:
    """Immutable view of a successful API response.

    The API wraps payloads in a ``{"data": ..., "meta": ...}`` envelope;
    :attr:`data` and :attr:`meta` unwrap it when present.
    """

    status_code: int
    headers: httpx.Headers
    content: bytes
    raw: httpx.Response

    @classmethod
    def from_response(cls, response: httpx.Response) -> "Response":
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            content=response.content,
            raw=response,
        )

    @property
    def text(self) -> str:
        return self.raw.text

    def json(self) -> Any:
        """Decode the body as JSON, None for an empty body."""
        if not self.content:
            return None
        return json.loads(self.content)

    def _envelope(self) -> dict[str, Any]:
        try:
            body = self.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    @property
    def data(self) -> Any:
        return self._envelope().get("data")

    @property
    def meta(self) -> dict[str, Any]:
        meta = self._envelope().get("meta")
        return meta if isinstance(meta, dict) else {}
