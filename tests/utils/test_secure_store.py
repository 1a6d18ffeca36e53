from __future__ import annotations

import pytest

from yandexWebmaster.utils import secure_store


def test_roundtrip(dummy_keyring):
    secure_store.set_secret("FOO", "bar")
    assert secure_store.get_secret("FOO") == "bar"
    assert dummy_keyring.get_password(secure_store.SERVICE, "FOO") == "bar"
    assert secure_store.delete_secret("FOO") is True
    assert secure_store.get_secret("FOO", fallback="") == ""


def test_environment_wins_over_keyring(monkeypatch):
    secure_store.set_secret("YANDEX_WEBMASTER_TOKEN", "stored")
    monkeypatch.setenv("YANDEX_WEBMASTER_TOKEN", "env")
    assert secure_store.get_secret("YANDEX_WEBMASTER_TOKEN") == "env"


def test_missing_secret_without_fallback_raises():
    with pytest.raises(RuntimeError):
        secure_store.get_secret("MISSING_SECRET")


def test_delete_missing_secret():
    assert secure_store.delete_secret("MISSING_SECRET") is False
