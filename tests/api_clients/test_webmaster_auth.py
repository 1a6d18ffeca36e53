from __future__ import annotations

import pytest
import requests

from api_clients import MiddlewareError, OAuthTokenAuth


def _prepare(auth: OAuthTokenAuth) -> requests.PreparedRequest:
    return requests.Request("GET", "https://api.webmaster.yandex.net/v4/user", auth=auth).prepare()


def test_header_value_uses_oauth_scheme():
    assert OAuthTokenAuth("abc123").header_value() == "OAuth abc123"


def test_header_attached_to_prepared_request():
    prepared = _prepare(OAuthTokenAuth("abc123"))
    assert prepared.headers["Authorization"] == "OAuth abc123"


def test_custom_scheme():
    assert OAuthTokenAuth("abc123", scheme="Bearer").header_value() == "Bearer abc123"


@pytest.mark.parametrize("token", ["", "   ", "abc\r\nX-Injected: 1", "токен"])
def test_unusable_tokens_raise_middleware_error(token):
    with pytest.raises(MiddlewareError) as excinfo:
        OAuthTokenAuth(token).header_value()
    assert str(excinfo.value).startswith("Middleware error: Failed to create authorization header")


def test_equality_and_repr():
    assert OAuthTokenAuth("a") == OAuthTokenAuth("a")
    assert OAuthTokenAuth("a") != OAuthTokenAuth("b")
    assert "a-secret-token" not in repr(OAuthTokenAuth("a-secret-token"))
