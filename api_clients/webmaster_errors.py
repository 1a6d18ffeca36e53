"""Error taxonomy for the Yandex Webmaster API client.

Failures fall into three families surfaced as distinct exception types:

* transport failures (:class:`TransportError`),
* non-success HTTP statuses (:class:`ApiError` when the body carries the
  service's structured error, :class:`GenericApiError` otherwise),
* payload deserialization failures (:class:`DeserializationError`).

Every exception derives from :class:`YandexWebmasterError` so callers can catch
the whole family at once.
"""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import Field

from yandexWebmaster.schemas.common import ApiModel, WireEnum


class YandexErrorCode(WireEnum):
    """Documented ``error_code`` values, grouped by the HTTP status that carries them."""

    # 400
    EMPTY_DATES = "EMPTY_DATES"
    EMPTY_PATHS = "EMPTY_PATHS"
    ENTITY_VALIDATION_ERROR = "ENTITY_VALIDATION_ERROR"
    FIELD_VALIDATION_ERROR = "FIELD_VALIDATION_ERROR"
    INVALID_URL = "INVALID_URL"
    NO_CHANGES = "NO_CHANGES"
    SOME_DATES_ARE_UNAVAILABLE = "SOME_DATES_ARE_UNAVAILABLE"
    URLS_ARE_CORRUPTED = "URLS_ARE_CORRUPTED"
    WRONG_REGION = "WRONG_REGION"
    # 403
    ACCESS_FORBIDDEN = "ACCESS_FORBIDDEN"
    INVALID_OAUTH_TOKEN = "INVALID_OAUTH_TOKEN"
    INVALID_USER_ID = "INVALID_USER_ID"
    HOSTS_LIMIT_EXCEEDED = "HOSTS_LIMIT_EXCEEDED"
    FEEDS_LIMIT_EXCEEDED = "FEEDS_LIMIT_EXCEEDED"
    BATCH_LIMIT_EXCEEDED = "BATCH_LIMIT_EXCEEDED"
    FEEDS_CATEGORY_BAN = "FEEDS_CATEGORY_BAN"
    LIMITS_EXCEEDED = "LIMITS_EXCEEDED"
    # 404
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    HOST_NOT_INDEXED = "HOST_NOT_INDEXED"
    HOST_NOT_LOADED = "HOST_NOT_LOADED"
    HOST_NOT_VERIFIED = "HOST_NOT_VERIFIED"
    HOST_NOT_FOUND = "HOST_NOT_FOUND"
    SITEMAP_NOT_FOUND = "SITEMAP_NOT_FOUND"
    SITEMAP_NOT_ADDED = "SITEMAP_NOT_ADDED"
    TASK_NOT_FOUND = "TASK_NOT_FOUND"
    QUERY_ID_NOT_FOUND = "QUERY_ID_NOT_FOUND"
    BAD_HTTP_CODE = "BAD_HTTP_CODE"
    BAD_MIME_TYPE = "BAD_MIME_TYPE"
    REQUEST_NOT_FOUND = "REQUEST_NOT_FOUND"
    TIMED_OUT = "TIMED_OUT"
    FEED_ALREADY_ADDED = "FEED_ALREADY_ADDED"
    ONLY_HTTPS = "ONLY_HTTPS"
    MANY_URLS_FOR_REMOVE = "MANY_URLS_FOR_REMOVE"
    INCORRECT_URL = "INCORRECT_URL"
    NOT_EXIST = "NOT_EXIST"
    # 405
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    # 406
    CONTENT_TYPE_UNSUPPORTED = "CONTENT_TYPE_UNSUPPORTED"
    # 409
    URL_ALREADY_ADDED = "URL_ALREADY_ADDED"
    HOST_ALREADY_ADDED = "HOST_ALREADY_ADDED"
    VERIFICATION_ALREADY_IN_PROGRESS = "VERIFICATION_ALREADY_IN_PROGRESS"
    TEXT_ALREADY_ADDED = "TEXT_ALREADY_ADDED"
    SITEMAP_ALREADY_ADDED = "SITEMAP_ALREADY_ADDED"
    # 410
    UPLOAD_ADDRESS_EXPIRED = "UPLOAD_ADDRESS_EXPIRED"
    # 413
    REQUEST_ENTITY_TOO_LARGE = "REQUEST_ENTITY_TOO_LARGE"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    # 415
    CONTENT_ENCODING_UNSUPPORTED = "CONTENT_ENCODING_UNSUPPORTED"
    # 422
    TEXT_LENGTH_CONSTRAINTS_VIOLATION = "TEXT_LENGTH_CONSTRAINTS_VIOLATION"
    NO_VERIFICATION_RECORD = "NO_VERIFICATION_RECORD"
    # 429
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    TOO_MANY_REQUESTS_ERROR = "TOO_MANY_REQUESTS_ERROR"


class ApiErrorResponse(ApiModel):
    """Structured error body returned with non-2xx statuses.

    ``error_code`` is a :class:`YandexErrorCode` when the code is documented and
    the raw string otherwise.
    """

    error_code: Union[YandexErrorCode, str] = Field(..., union_mode="left_to_right")
    error_message: str
    acceptable_types: Optional[List[str]] = Field(default=None, description="Sent with 406")
    valid_until: Optional[str] = Field(default=None, description="Sent with 410")

    @property
    def is_known(self) -> bool:
        return isinstance(self.error_code, YandexErrorCode)


class YandexWebmasterError(Exception):
    """Base class for every error raised by the Webmaster client."""


class TransportError(YandexWebmasterError):
    """The HTTP request could not be completed (DNS, TLS, timeout, ...)."""

    def __init__(self, message: str) -> None:
        super().__init__(f"HTTP request failed: {message}")


class DeserializationError(YandexWebmasterError):
    """A response body could not be decoded into the expected structure."""

    def __init__(self, message: str, *, body: str | None = None) -> None:
        super().__init__(f"Failed to parse response: {message}")
        self.body = body


class RequestEncodingError(YandexWebmasterError):
    """Request parameters or body could not be encoded."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to encode request: {message}")


class MiddlewareError(YandexWebmasterError):
    """The authentication layer could not prepare a request."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Middleware error: {message}")


class AuthenticationError(YandexWebmasterError):
    """No OAuth token was supplied or configured."""

    def __init__(self, message: str = "missing or invalid OAuth token") -> None:
        super().__init__(f"Authentication failed: {message}")


class ApiError(YandexWebmasterError):
    """The API answered with a structured error body."""

    def __init__(self, status: int, response: ApiErrorResponse) -> None:
        super().__init__(f"API error ({response.error_code}): {response.error_message}")
        self.status = status
        self.response = response

    @property
    def error_code(self) -> Union[YandexErrorCode, str]:
        return self.response.error_code

    @property
    def error_message(self) -> str:
        return self.response.error_message


class GenericApiError(YandexWebmasterError):
    """The API answered with a non-2xx status and an unstructured body."""

    def __init__(self, status: int, body: str, *, reason: str = "") -> None:
        status_line = f"{status} {reason}".strip()
        super().__init__(f"API error: Status: {status_line}, Error: {body}")
        self.status = status
        self.body = body


__all__ = [
    "ApiError",
    "ApiErrorResponse",
    "AuthenticationError",
    "DeserializationError",
    "GenericApiError",
    "MiddlewareError",
    "RequestEncodingError",
    "TransportError",
    "YandexErrorCode",
    "YandexWebmasterError",
]
