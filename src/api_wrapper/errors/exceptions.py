"""Structured exceptions for API errors."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

    from api_wrapper.errors.models import ErrorBody


class ConfigurationError(Exception):
    """Raised when the client is constructed with unusable settings."""

    pass


class InvalidBaseUrlError(ConfigurationError):
    """Raised when the provider's base URL fails validation."""

    def __init__(self, base_url: str):
        super().__init__(f"Invalid base URL: {base_url!r}")
        self.base_url = base_url


class ApiError(Exception):
    """Base exception for API errors.

    Carries the request that was sent and the response that came back so
    callers can inspect the full exchange.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        request: "httpx.Request | None" = None,
        response: "httpx.Response | None" = None,
        body: "ErrorBody | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.request = request
        self.response = response
        self.body = body


class ClientError(ApiError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class AuthError(ClientError):
    """401 Unauthorized."""

    def __init__(self, message: str, error_type: str | None = None, hint: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.error_type = error_type
        self.hint = hint


class FeatureLimitError(ClientError):
    """402 Payment Required: a plan limit was reached."""

    def __init__(self, message: str, limit: Any = None, feature: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.limit = limit
        self.feature = feature


class FeatureHardLimitError(FeatureLimitError):
    """402 with code 4001."""

    pass


class FeatureSoftLimitError(FeatureLimitError):
    """402 with code 4002."""

    pass


class FeatureTotalLimitError(FeatureLimitError):
    """402 with code 4003."""

    pass


class NoFeatureError(ClientError):
    """403 Forbidden: the feature is not part of the current plan."""

    def __init__(
        self,
        message: str,
        feature: str | None = None,
        plans: list[str] | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.feature = feature
        self.plans = plans


class NoPermissionsError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    def __init__(self, message: str, entity_type: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.entity_type = entity_type


class MethodNotAllowedError(ClientError):
    """405 Method Not Allowed."""

    pass


class EntityTooLargeError(ClientError):
    """413 Payload Too Large."""

    pass


class ValidationFailedError(ClientError):
    """422 Unprocessable Entity (validation errors)."""

    def __init__(self, message: str, errors: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(ApiError):
    """500 and every status without a dedicated exception."""

    pass
