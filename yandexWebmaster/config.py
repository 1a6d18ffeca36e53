from __future__ import annotations

"""Client settings resolved from an optional env file and the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping

from yandexWebmaster import __version__

DEFAULT_BASE_URL = "https://api.webmaster.yandex.net/v4"
DEFAULT_TIMEOUT = 30.0
TOKEN_SECRET_NAME = "YANDEX_WEBMASTER_TOKEN"
CONFIG_ENV = "YANDEX_WEBMASTER_CONFIG"


@dataclass(frozen=True)
class ClientSettings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = f"yandexWebmaster/{__version__}"


def _parse_env_file(path: Path) -> Dict[str, str]:
    """Parse a simple KEY=VALUE env-style file."""

    values: Dict[str, str] = {}
    if not path.exists():
        return values
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if "=" not in stripped:
            continue
        key, _, value = stripped.partition("=")
        values[key.strip()] = value.strip().strip('"').strip("'")
    return values


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ValueError(f"YANDEX_WEBMASTER_TIMEOUT must be a number, got {raw!r}") from exc
    if timeout <= 0:
        raise ValueError("YANDEX_WEBMASTER_TIMEOUT must be positive")
    return timeout


def load_settings(
    path: Path | None = None, *, environ: Mapping[str, str] | None = None
) -> ClientSettings:
    """Resolve :class:`ClientSettings`.

    Values from the env file at ``path`` (or ``$YANDEX_WEBMASTER_CONFIG``) are
    read first; real environment variables override them.
    """

    env = dict(os.environ if environ is None else environ)
    if path is None and env.get(CONFIG_ENV):
        path = Path(env[CONFIG_ENV])
    values: Dict[str, str] = _parse_env_file(path) if path is not None else {}
    values.update({k: v for k, v in env.items() if k.startswith("YANDEX_WEBMASTER_") and v})

    defaults = ClientSettings()
    base_url = values.get("YANDEX_WEBMASTER_BASE_URL") or defaults.base_url
    timeout_raw = values.get("YANDEX_WEBMASTER_TIMEOUT")
    timeout = _parse_timeout(timeout_raw) if timeout_raw else defaults.timeout
    user_agent = values.get("YANDEX_WEBMASTER_USER_AGENT") or defaults.user_agent
    return ClientSettings(
        base_url=base_url.rstrip("/"),
        timeout=timeout,
        user_agent=user_agent,
    )


__all__ = [
    "ClientSettings",
    "DEFAULT_BASE_URL",
    "TOKEN_SECRET_NAME",
    "load_settings",
]
