"""Shared helpers for the Yandex Webmaster client."""

from .log_json import JsonLogger
from .secure_store import delete_secret, get_secret, set_secret

__all__ = ["JsonLogger", "get_secret", "set_secret", "delete_secret"]
