"""Typed error taxonomy for API responses."""

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
from api_wrapper.errors.handler import raise_for_status, translate_error
from api_wrapper.errors.models import ErrorBody

__all__ = [
    "ApiError",
    "AuthError",
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "EntityTooLargeError",
    "ErrorBody",
    "FeatureHardLimitError",
    "FeatureLimitError",
    "FeatureSoftLimitError",
    "FeatureTotalLimitError",
    "InvalidBaseUrlError",
    "MethodNotAllowedError",
    "NoFeatureError",
    "NoPermissionsError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ValidationFailedError",
    "raise_for_status",
    "translate_error",
]
