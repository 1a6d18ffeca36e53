"""OAuth authentication layer for the Webmaster API session."""
from __future__ import annotations

import requests
from requests.auth import AuthBase

from api_clients.webmaster_errors import MiddlewareError

AUTH_HEADER = "Authorization"


class OAuthTokenAuth(AuthBase):
    """Attach ``Authorization: <scheme> <token>`` to every outgoing request.

    Installed as ``session.auth`` so that it runs for each request the session
    prepares. The token is static; there is no refresh.
    """

    def __init__(self, token: str, *, scheme: str = "OAuth") -> None:
        self._token = token
        self.scheme = scheme

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scheme={self.scheme!r}, token=<redacted>)"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, OAuthTokenAuth)
            and other._token == self._token
            and other.scheme == self.scheme
        )

    def __ne__(self, other: object) -> bool:
        return not self == other

    def header_value(self) -> str:
        token = (self._token or "").strip()
        if not token:
            raise MiddlewareError("Failed to create authorization header: empty token")
        value = f"{self.scheme} {token}"
        if "\r" in value or "\n" in value:
            raise MiddlewareError(
                "Failed to create authorization header: token contains a line break"
            )
        try:
            value.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise MiddlewareError(
                f"Failed to create authorization header: {exc.reason}"
            ) from exc
        return value

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        request.headers[AUTH_HEADER] = self.header_value()
        return request


__all__ = ["AUTH_HEADER", "OAuthTokenAuth"]
