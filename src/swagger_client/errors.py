"""Error hierarchy for the swagger-client package."""

from __future__ import annotations

from typing import Any


class SwaggerClientError(Exception):
    """Base class for all client errors."""


class TransportError(SwaggerClientError):
    """Raised on network/transport failures."""


class ClientTimeoutError(TransportError):
    """Raised when request times out."""


class ApiError(SwaggerClientError):
    """Raised when the API returns a non-2xx HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        code: int,
        response_headers: dict[str, str] | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.response_headers = dict(response_headers or {})
        self.response_body = response_body


class AuthError(ApiError):
    """Raised for authentication/authorization failures."""


class ValidationError(ApiError):
    """Raised for invalid request payloads."""


class NotFoundError(ApiError):
    """Raised when requested resource does not exist."""


class ConflictError(ApiError):
    """Raised when request conflicts with current state."""


class GoneError(ApiError):
    """Raised when resource is gone/purged."""


class LockedError(ApiError):
    """Raised when the resource is locked."""


class ServerError(ApiError):
    """Raised for server-side failures."""


class DeserializationError(SwaggerClientError, ValueError):
    """Raised when a successful response cannot be turned into the declared type."""


class DescriptorError(DeserializationError):
    """Raised for malformed return type descriptors."""


class UnsupportedContentTypeError(DeserializationError):
    def __init__(self, content_type: str) -> None:
        super().__init__(f"Content-Type is not supported: {content_type}")
        self.content_type = content_type


class ResponseParseError(DeserializationError):
    """Raised when the response body is not valid JSON."""


class InvalidDateTimeError(DeserializationError):
    """Raised when a DateTime value is not an ISO-8601 timestamp."""


class UnknownModelTypeError(DeserializationError):
    def __init__(self, model_name: str) -> None:
        super().__init__(f"unknown model type {model_name!r}")
        self.model_name = model_name


class ModelValidationError(DeserializationError):
    """Raised when a registered model rejects the data it is hydrated from."""

    def __init__(self, *, model_name: str, errors: Any, raw_sample: Any | None = None) -> None:
        super().__init__(f"hydration failed for model {model_name}")
        self.model_name = model_name
        self.errors = errors
        self.raw_sample = raw_sample


def classify_api_error(
    code: int,
    message: str | None = None,
    *,
    response_headers: dict[str, str] | None = None,
    response_body: str | None = None,
) -> ApiError:
    text = message or f"HTTP {code}"
    kwargs: dict[str, Any] = {
        "code": code,
        "response_headers": response_headers,
        "response_body": response_body,
    }

    if code in (401, 403):
        return AuthError(text, **kwargs)
    if code == 400:
        return ValidationError(text, **kwargs)
    if code == 404:
        return NotFoundError(text, **kwargs)
    if code == 409:
        return ConflictError(text, **kwargs)
    if code == 410:
        return GoneError(text, **kwargs)
    if code == 423:
        return LockedError(text, **kwargs)
    if code >= 500:
        return ServerError(text, **kwargs)

    return ApiError(text, **kwargs)
