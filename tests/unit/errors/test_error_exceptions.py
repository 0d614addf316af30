"""Tests for structured API exceptions."""

import httpx
import pytest

from api_wrapper.errors.exceptions import (
    ApiError,
    AuthError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    EntityTooLargeError,
    FeatureHardLimitError,
    FeatureLimitError,
    FeatureSoftLimitError,
    FeatureTotalLimitError,
    InvalidBaseUrlError,
    MethodNotAllowedError,
    NoFeatureError,
    NoPermissionsError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationFailedError,
)
from api_wrapper.errors.models import ErrorBody


@pytest.mark.unit
def test_api_error_instantiation():
    """Test ApiError can be instantiated with all attributes."""
    request = httpx.Request("GET", "https://api.example.com/v1/items")
    response = httpx.Response(status_code=500, request=request)
    body = ErrorBody(code=500)

    error = ApiError(
        message="Test error",
        status_code=500,
        request=request,
        response=response,
        body=body,
    )

    assert str(error) == "Test error"
    assert error.status_code == 500
    assert error.request is request
    assert error.response is response
    assert error.body is body


@pytest.mark.unit
def test_exception_inheritance():
    """Test exception inheritance chain."""
    assert issubclass(ClientError, ApiError)
    assert issubclass(ServerError, ApiError)
    assert not issubclass(ServerError, ClientError)

    for exc_class in (
        BadRequestError,
        AuthError,
        FeatureLimitError,
        NoFeatureError,
        NoPermissionsError,
        NotFoundError,
        MethodNotAllowedError,
        EntityTooLargeError,
        ValidationFailedError,
        RateLimitError,
    ):
        assert issubclass(exc_class, ClientError)

    # 402 sub-kinds are catchable as the generic feature limit
    assert issubclass(FeatureHardLimitError, FeatureLimitError)
    assert issubclass(FeatureSoftLimitError, FeatureLimitError)
    assert issubclass(FeatureTotalLimitError, FeatureLimitError)


@pytest.mark.unit
def test_metadata_defaults_to_none():
    """Test that kind-specific metadata is optional."""
    assert AuthError("x").error_type is None
    assert AuthError("x").hint is None
    assert FeatureLimitError("x").limit is None
    assert NoFeatureError("x").plans is None
    assert NotFoundError("x").entity_type is None
    assert ValidationFailedError("x").errors is None
    assert RateLimitError("x").retry_after is None


@pytest.mark.unit
def test_metadata_with_common_attributes():
    """Test metadata and common attributes can be combined."""
    error = NoFeatureError("No feature", feature="api", plans=["pro", "enterprise"], status_code=403)

    assert error.feature == "api"
    assert error.plans == ["pro", "enterprise"]
    assert error.status_code == 403


@pytest.mark.unit
def test_invalid_base_url_error():
    error = InvalidBaseUrlError("ftp://example")

    assert isinstance(error, ConfigurationError)
    assert error.base_url == "ftp://example"
    assert "ftp://example" in str(error)
