"""Request construction: authentication headers and body encoding.

Bodies are encoded one of three ways:

| Payload | Encoding |
|---------|----------|
| ``FilePayload`` (or a non-empty ``{"file": {...}}``) | ``multipart/form-data``: ``file`` part, then ``data`` part when auxiliary data is set |
| Any other non-None value | JSON, ``Content-Type: application/json`` |
| ``None`` | Empty body, no content type |

A file that does not exist at send time (including an empty path) is
uploaded as an empty ``file`` part without filename or content type; no
filesystem error is raised.
"""

import json
import logging
import mimetypes
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

import httpx

from api_wrapper.auth.provider import Provider
from api_wrapper.auth.tokens import AccessToken

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
DEFAULT_FILE_CONTENT_TYPE = "application/octet-stream"


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass(frozen=True)
class FilePayload:
    """A file upload with optional JSON-encoded side data.

    Attributes:
        file_path: Local path read at send time.
        original_name: Filename reported to the server.
        data: Sent as a JSON ``data`` part when not None.
    """

    file_path: str
    original_name: str
    data: Any = None

    @classmethod
    def from_payload(cls, payload: Any) -> "FilePayload | None":
        """Recognise the ``{"file": {"filePath": ..., "originalName": ...}}`` form.

        Returns None when ``payload`` carries no file reference. A non-empty
        reference without a usable ``filePath`` still counts; it uploads as
        an empty part.
        """
        if isinstance(payload, cls):
            return payload
        if not isinstance(payload, dict) or not payload.get("file"):
            return None

        file_ref = payload["file"]
        if not isinstance(file_ref, dict):
            return None
        return cls(
            file_path=file_ref.get("filePath") or "",
            original_name=file_ref.get("originalName") or "",
            data=payload.get("data"),
        )


def encode_json(data: Any) -> bytes:
    """Serialise to JSON; floats keep their fraction (``1.0`` stays ``1.0``)."""
    return json.dumps(data, ensure_ascii=False).encode("utf-8")


def guess_content_type(path: Path) -> str:
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type or DEFAULT_FILE_CONTENT_TYPE


class RequestBuilder:
    """Turns (method, url, payload) into an authenticated ``httpx.Request``."""

    def __init__(self, provider: Provider, language: str | None = None):
        self._provider = provider
        self.language = language

    def build(
        self,
        method: HttpMethod | str,
        url: str,
        token: AccessToken,
        payload: Any = None,
    ) -> httpx.Request:
        headers: dict[str, str] = {}
        if self.language is not None:
            headers["Accept-Language"] = self.language

        file_payload = FilePayload.from_payload(payload)
        if file_payload is not None:
            options = self._file_options(file_payload)
        else:
            options = self._json_options(payload, headers)

        return self._provider.get_authenticated_request(
            str(method),
            url,
            token,
            headers=headers,
            **options,
        )

    def _json_options(self, payload: Any, headers: dict[str, str]) -> dict[str, Any]:
        if payload is None:
            return {}
        headers["Content-Type"] = JSON_CONTENT_TYPE
        return {"content": encode_json(payload)}

    def _file_options(self, payload: FilePayload) -> dict[str, Any]:
        path = Path(payload.file_path) if payload.file_path else None

        if path is not None and path.is_file():
            file_part = (payload.original_name, path.read_bytes(), guess_content_type(path))
        else:
            logger.debug(f"Upload file {payload.file_path!r} not found, sending an empty file part")
            file_part = ("", b"", "")

        # Both parts go through ``files`` so ``file`` is written before ``data``
        parts: list[tuple[str, tuple[str | None, bytes, str | None]]] = [("file", file_part)]
        if payload.data is not None:
            parts.append(("data", (None, encode_json(payload.data), None)))
        return {"files": parts}
