"""Endpoint URL composition.

Every action family shares one encoder driven by an ordered field list.
Fields are emitted in that order and only when present in the bag. Only
``filter`` is form-encoded: spaces become ``+`` and everything except
letters, digits and ``-_.`` is escaped, ``~`` included. Every other value
goes out as-is, so callers must not pass values needing escaping there.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from urllib.parse import quote_plus

from api_wrapper.parameters import (
    GetParameters,
    ListParameters,
    Parameters,
    PdfParameters,
    PreviewParameters,
)


@dataclass(frozen=True)
class QueryField:
    """One query-string field: wire name, bag attribute, encoding."""

    name: str
    attribute: str
    encoded: bool = False


LIST_FIELDS = (
    QueryField("q", "q"),
    QueryField("filter", "filter", encoded=True),
    QueryField("with", "with_"),
    QueryField("limit", "limit"),
    QueryField("offset", "offset"),
    QueryField("sort", "sort"),
)
GET_FIELDS = (QueryField("with", "with_"),)
PDF_FIELDS = (QueryField("options", "options"),)
PREVIEW_FIELDS = (
    QueryField("size", "size"),
    QueryField("page", "page"),
)


def form_encode(value: str) -> str:
    """Form-encode a query value, escaping ``~`` as ``%7E`` too."""
    return quote_plus(value, safe="").replace("~", "%7E")


def build_query(parameters: Parameters | None, query_fields: Sequence[QueryField]) -> str:
    """Render the present fields as ``name=value`` pairs joined by ``&``."""
    if parameters is None:
        return ""

    pairs = []
    for field in query_fields:
        if not parameters.has(field.attribute):
            continue
        value = str(getattr(parameters, field.attribute))
        pairs.append(f"{field.name}={form_encode(value) if field.encoded else value}")
    return "&".join(pairs)


def compose_url(
    base_url: str,
    endpoint_url: str,
    parameters: Parameters | None,
    query_fields: Sequence[QueryField],
) -> str:
    query = build_query(parameters, query_fields)
    if query:
        endpoint_url = f"{endpoint_url}?{query}"
    return f"{base_url}{endpoint_url}"


def prepare_list_url(base_url: str, endpoint_url: str, parameters: ListParameters | None = None) -> str:
    return compose_url(base_url, endpoint_url, parameters, LIST_FIELDS)


def prepare_get_url(base_url: str, endpoint_url: str, parameters: GetParameters | None = None) -> str:
    return compose_url(base_url, endpoint_url, parameters, GET_FIELDS)


def prepare_pdf_url(base_url: str, endpoint_url: str, parameters: PdfParameters | None = None) -> str:
    return compose_url(base_url, endpoint_url, parameters, PDF_FIELDS)


def prepare_preview_url(base_url: str, endpoint_url: str, parameters: PreviewParameters | None = None) -> str:
    return compose_url(base_url, endpoint_url, parameters, PREVIEW_FIELDS)
