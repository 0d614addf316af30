"""Error body model for API error responses."""

from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass
class ErrorBody:
    """Decoded JSON error body.

    The API answers errors with a document shaped like::

        {"code": 4001, "message": "...", "meta": {"limit": 10, "feature": "users"}}

    The shape of ``meta`` varies by status. Missing or malformed parts decode
    to ``None`` / an empty mapping instead of failing.
    """

    code: Any = None
    message: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorBody":
        """Decode an error body from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorBody, empty when the body is not a JSON object
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError, httpx.ResponseNotRead):
            # JSON decode errors, empty bodies, or unread streams
            return cls()

        if not isinstance(data, dict):
            return cls()

        meta = data.get("meta")
        message = data.get("message")

        return cls(
            code=data.get("code"),
            message=message if isinstance(message, str) else None,
            meta=meta if isinstance(meta, dict) else {},
        )

    def get_meta(self, key: str) -> Any:
        """Return a ``meta`` field, or None when absent."""
        return self.meta.get(key)

    def has_meta(self, key: str) -> bool:
        """Whether ``meta`` holds a non-null value for ``key``."""
        return self.meta.get(key) is not None

    def numeric_code(self) -> int | None:
        """Return ``code`` as an integer, or None if it isn't one."""
        if isinstance(self.code, bool):
            return None
        if isinstance(self.code, int):
            return self.code
        if isinstance(self.code, str) and self.code.strip().isdigit():
            return int(self.code)
        return None

    def to_exception_message(self, status_code: int) -> str:
        """Convert the error body to an exception message."""
        lines = [f"HTTP {status_code}"]

        if self.message:
            lines[0] += f": {self.message}"

        if self.code is not None:
            lines.append(f"Code: {self.code}")

        if self.meta:
            lines.append("Meta:")
            for key, value in self.meta.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines)
