"""Query parameter bags for list, get, pdf and preview actions."""

from dataclasses import dataclass, fields
from typing import Any


class Parameters:
    """Presence checks shared by all parameter bags.

    A field counts as present once it holds a value other than None.
    ``0`` and ``""`` are present.
    """

    def has(self, name: str) -> bool:
        return getattr(self, name) is not None

    def present(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if self.has(f.name)}


@dataclass
class ListParameters(Parameters):
    """Parameters for list actions.

    Attributes:
        q: Free-text search.
        filter: Filter expression, percent-encoded on the wire.
        with_: Related resources to embed (sent as ``with``).
        limit: Page size.
        offset: Number of records to skip.
        sort: Sort expression.
    """

    q: str | None = None
    filter: str | None = None
    with_: str | None = None
    limit: int | None = None
    offset: int | None = None
    sort: str | None = None


@dataclass
class GetParameters(Parameters):
    with_: str | None = None


@dataclass
class PdfParameters(Parameters):
    options: str | None = None


@dataclass
class PreviewParameters(Parameters):
    size: str | None = None
    page: int | None = None
