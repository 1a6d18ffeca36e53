from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any

import keyring
import pytest
from keyring.backend import KeyringBackend
from keyring.errors import PasswordDeleteError

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from api_clients import YandexWebmasterClient  # noqa: E402

try:
    from pytest_socket import disable_socket, enable_socket, socket_allow_hosts
except Exception:  # pragma: no cover - pytest_socket optional in some environments
    disable_socket = enable_socket = None  # type: ignore[assignment]
    socket_allow_hosts = None  # type: ignore[assignment]

FIXTURES = Path(__file__).parent / "fixtures" / "webmaster"
BASE_URL = "https://api.webmaster.yandex.net/v4"
USER_ID = 12345
HOST_ID = "https:example.com:443"
HOST_URL = f"{BASE_URL}/user/{USER_ID}/hosts/{HOST_ID}"


class DummyKeyring(KeyringBackend):
    priority = 1

    def __init__(self):
        self._storage: dict[str, dict[str, str]] = {}

    def get_password(self, service, name):  # pragma: no cover - simple
        return self._storage.get(service, {}).get(name)

    def set_password(self, service, name, value):  # pragma: no cover - simple
        self._storage.setdefault(service, {})[name] = value

    def delete_password(self, service, name):  # pragma: no cover - simple
        try:
            del self._storage[service][name]
        except KeyError:
            raise PasswordDeleteError(name) from None


@pytest.fixture(autouse=True)
def _disable_network(request: pytest.FixtureRequest):
    """Restrict network access while allowing opt-in socket usage."""

    if os.getenv("PYTEST_ALLOW_NETWORK", "0") == "1" or not (
        disable_socket and enable_socket
    ):
        yield
        return

    allow_marker = request.node.get_closest_marker(
        "enable_socket"
    ) or request.node.get_closest_marker("network")
    hosts = ["127.0.0.1", "::1"] if socket_allow_hosts else None

    if allow_marker:
        if hosts:
            socket_allow_hosts(hosts)
        enable_socket()
        try:
            yield
        finally:
            disable_socket()
    else:
        if hosts:
            socket_allow_hosts(hosts)
        disable_socket()
        try:
            yield
        finally:
            enable_socket()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep real tokens, settings and keyrings out of the tests."""

    for name in list(os.environ):
        if name.startswith("YANDEX_WEBMASTER_"):
            monkeypatch.delenv(name, raising=False)
    backend = DummyKeyring()
    keyring.set_keyring(backend)
    return backend


@pytest.fixture
def dummy_keyring(_isolated_env) -> DummyKeyring:
    return _isolated_env


def load_fixture(name: str) -> Any:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


@pytest.fixture
def client(requests_mock):
    c = YandexWebmasterClient("test-token", user_id=USER_ID)
    yield c
    c.close()
