from __future__ import annotations

import pytest

from swagger_client.errors import (
    ApiError,
    AuthError,
    ConflictError,
    DeserializationError,
    GoneError,
    LockedError,
    NotFoundError,
    ServerError,
    SwaggerClientError,
    UnknownModelTypeError,
    ValidationError,
    classify_api_error,
)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (400, ValidationError),
        (401, AuthError),
        (403, AuthError),
        (404, NotFoundError),
        (409, ConflictError),
        (410, GoneError),
        (423, LockedError),
        (500, ServerError),
        (503, ServerError),
        (302, ApiError),
        (418, ApiError),
    ],
)
def test_classify_api_error(code: int, expected: type[ApiError]) -> None:
    error = classify_api_error(code, "status", response_headers={"a": "b"}, response_body="body")

    assert type(error) is expected
    assert error.code == code
    assert error.response_headers == {"a": "b"}
    assert error.response_body == "body"


def test_missing_status_message_falls_back_to_code() -> None:
    assert str(classify_api_error(418, "")) == "HTTP 418"


def test_local_errors_are_value_errors() -> None:
    error = UnknownModelTypeError("Pet")

    assert isinstance(error, DeserializationError)
    assert isinstance(error, SwaggerClientError)
    assert isinstance(error, ValueError)
