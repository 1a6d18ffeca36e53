"""Public exports for the Yandex Webmaster API client."""

from .webmaster_auth import OAuthTokenAuth
from .webmaster_client import YandexWebmasterClient
from .webmaster_errors import (
    ApiError,
    ApiErrorResponse,
    AuthenticationError,
    DeserializationError,
    GenericApiError,
    MiddlewareError,
    RequestEncodingError,
    TransportError,
    YandexErrorCode,
    YandexWebmasterError,
)

__all__ = [
    "ApiError",
    "ApiErrorResponse",
    "AuthenticationError",
    "DeserializationError",
    "GenericApiError",
    "MiddlewareError",
    "OAuthTokenAuth",
    "RequestEncodingError",
    "TransportError",
    "YandexErrorCode",
    "YandexWebmasterClient",
    "YandexWebmasterError",
]
