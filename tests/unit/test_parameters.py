"""Tests for query parameter bags."""

from api_wrapper.parameters import GetParameters, ListParameters, PdfParameters, PreviewParameters


def test_fields_absent_by_default():
    parameters = ListParameters()

    for name in ("q", "filter", "with_", "limit", "offset", "sort"):
        assert not parameters.has(name)
    assert parameters.present() == {}


def test_presence_is_per_field():
    parameters = ListParameters(filter="x", limit=0)

    assert parameters.has("filter")
    assert parameters.has("limit")
    assert not parameters.has("offset")
    assert parameters.present() == {"filter": "x", "limit": 0}


def test_empty_string_is_present():
    assert GetParameters(with_="").has("with_")


def test_other_bags():
    assert PdfParameters(options="a").present() == {"options": "a"}
    assert PreviewParameters(size="s").present() == {"size": "s"}
