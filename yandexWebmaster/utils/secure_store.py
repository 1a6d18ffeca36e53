"""Helpers for retrieving secrets from env vars or the OS keyring."""
from __future__ import annotations

import os

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

SERVICE = "yandexWebmaster"


def get_secret(name: str, *, fallback: str | None = None) -> str:
    """Return a secret from the environment or the OS keyring.

    Parameters
    ----------
    name:
        Environment variable and credential name.
    fallback:
        Value to return when the secret is absent. If ``None`` and the secret
        cannot be found, :class:`RuntimeError` is raised.
    """

    env = os.getenv(name)
    if env:
        return env
    try:
        value = keyring.get_password(SERVICE, name)
    except KeyringError:  # pragma: no cover - backend specific
        value = None
    if value:
        return value
    if fallback is not None:
        return fallback
    raise RuntimeError(f"Secret {name} not found")


def set_secret(name: str, value: str) -> None:
    keyring.set_password(SERVICE, name, value)


def delete_secret(name: str) -> bool:
    """Remove ``name`` from the keyring. Returns ``False`` if it was absent."""
    try:
        keyring.delete_password(SERVICE, name)
    except PasswordDeleteError:
        return False
    return True


__all__ = ["SERVICE", "get_secret", "set_secret", "delete_secret"]
