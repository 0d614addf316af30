"""Translation of failed HTTP exchanges into typed API errors."""

import logging
from typing import Any, NoReturn

import httpx

from api_wrapper.errors.exceptions import (
    ApiError,
    AuthError,
    BadRequestError,
    EntityTooLargeError,
    FeatureHardLimitError,
    FeatureLimitError,
    FeatureSoftLimitError,
    FeatureTotalLimitError,
    MethodNotAllowedError,
    NoFeatureError,
    NoPermissionsError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationFailedError,
)
from api_wrapper.errors.models import ErrorBody

logger = logging.getLogger(__name__)

# Statuses whose error carries no metadata beyond the exchange itself
_PLAIN_ERRORS: dict[int, type[ApiError]] = {
    400: BadRequestError,
    405: MethodNotAllowedError,
    413: EntityTooLargeError,
    500: ServerError,
}

# 402 sub-kinds, keyed by the body's top-level ``code``
_FEATURE_LIMIT_ERRORS: dict[int, type[FeatureLimitError]] = {
    4001: FeatureHardLimitError,
    4002: FeatureSoftLimitError,
    4003: FeatureTotalLimitError,
}


def _select_error(status_code: int, body: ErrorBody) -> tuple[type[ApiError], dict[str, Any]]:
    """Pick the exception class and its metadata for a failed response."""
    if status_code in _PLAIN_ERRORS:
        return _PLAIN_ERRORS[status_code], {}

    if status_code == 401:
        return AuthError, {
            "error_type": body.get_meta("error_type"),
            "hint": body.get_meta("hint"),
        }

    if status_code == 402:
        exc_class = _FEATURE_LIMIT_ERRORS.get(body.numeric_code(), FeatureLimitError)
        return exc_class, {
            "limit": body.get_meta("limit"),
            "feature": body.get_meta("feature"),
        }

    if status_code == 403:
        if body.has_meta("feature"):
            return NoFeatureError, {
                "feature": body.get_meta("feature"),
                "plans": body.get_meta("plans"),
            }
        return NoPermissionsError, {}

    if status_code == 404:
        return NotFoundError, {"entity_type": body.get_meta("entity_type")}

    if status_code == 422:
        return ValidationFailedError, {"errors": body.get_meta("errors")}

    if status_code == 429:
        return RateLimitError, {}

    return ServerError, {}


def _parse_retry_after(response: httpx.Response) -> int | None:
    if "retry-after" not in response.headers:
        return None
    try:
        return int(response.headers["retry-after"])
    except (ValueError, TypeError):
        # HTTP-date form or garbage, leave it to the caller
        return None


def translate_error(request: httpx.Request | None, response: httpx.Response) -> NoReturn:
    """Raise the typed error matching a failed exchange.

    The status code selects the exception class; for 402 and 403 the decoded
    body refines it further. Kind-specific metadata is pulled from the body's
    ``meta`` object. Any status without a dedicated class becomes
    :class:`ServerError`.

    Args:
        request: The request that was sent
        response: The error response received for it

    Raises:
        ApiError subclass, always
    """
    body = ErrorBody.from_response(response)
    status_code = response.status_code

    exc_class, metadata = _select_error(status_code, body)
    if exc_class is RateLimitError:
        metadata["retry_after"] = _parse_retry_after(response)

    logger.debug(f"Translating HTTP {status_code} response into {exc_class.__name__}")

    raise exc_class(
        body.to_exception_message(status_code),
        status_code=status_code,
        request=request,
        response=response,
        body=body,
        **metadata,
    )


def raise_for_status(response: httpx.Response) -> None:
    """Raise the typed error for a 4xx/5xx response, do nothing otherwise.

    Args:
        response: HTTP response object, bound to the request that produced it

    Raises:
        ApiError subclass based on status code and body
    """
    if not response.is_error:
        return

    try:
        request = response.request
    except RuntimeError:
        # Response built without a request (tests, cached responses)
        request = None

    translate_error(request, response)
