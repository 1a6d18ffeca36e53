from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from api_clients import (
    ApiError,
    ApiErrorResponse,
    DeserializationError,
    GenericApiError,
    TransportError,
    YandexErrorCode,
    YandexWebmasterError,
)


def test_known_error_code_is_parsed():
    body = json.dumps({"error_code": "QUOTA_EXCEEDED", "error_message": "Daily quota exceeded"})
    error = ApiErrorResponse.model_validate_json(body)
    assert error.error_code is YandexErrorCode.QUOTA_EXCEEDED
    assert error.is_known


def test_unknown_error_code_stays_a_string():
    error = ApiErrorResponse.model_validate({"error_code": "BRAND_NEW", "error_message": "?"})
    assert error.error_code == "BRAND_NEW"
    assert not isinstance(error.error_code, YandexErrorCode)
    assert not error.is_known


def test_optional_fields_and_extras():
    error = ApiErrorResponse.model_validate(
        {
            "error_code": "CONTENT_TYPE_UNSUPPORTED",
            "error_message": "Unsupported",
            "acceptable_types": ["application/json"],
            "valid_until": "2024-01-01T00:00:00,000+0300",
            "request_id": "ignored",
        }
    )
    assert error.acceptable_types == ["application/json"]
    assert error.valid_until == "2024-01-01T00:00:00,000+0300"


def test_missing_message_is_rejected():
    with pytest.raises(ValidationError):
        ApiErrorResponse.model_validate({"error_code": "HOST_NOT_FOUND"})


def test_messages():
    api = ApiError(404, ApiErrorResponse(error_code="HOST_NOT_FOUND", error_message="nope"))
    assert str(api) == "API error (HOST_NOT_FOUND): nope"
    generic = GenericApiError(503, "down", reason="Service Unavailable")
    assert str(generic) == "API error: Status: 503 Service Unavailable, Error: down"
    assert str(TransportError("timed out")) == "HTTP request failed: timed out"
    assert str(DeserializationError("bad")) == "Failed to parse response: bad"


def test_hierarchy():
    for exc in (
        ApiError(400, ApiErrorResponse(error_code="INVALID_URL", error_message="x")),
        GenericApiError(500, ""),
        TransportError("x"),
        DeserializationError("x"),
    ):
        assert isinstance(exc, YandexWebmasterError)
