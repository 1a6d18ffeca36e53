from __future__ import annotations

import pytest

from yandexWebmaster.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientSettings, load_settings


def test_defaults():
    settings = load_settings(environ={})
    assert settings == ClientSettings()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.user_agent.startswith("yandexWebmaster/")


def test_environment_overrides():
    settings = load_settings(
        environ={
            "YANDEX_WEBMASTER_BASE_URL": "http://localhost:8080/v4/",
            "YANDEX_WEBMASTER_TIMEOUT": "2.5",
            "YANDEX_WEBMASTER_USER_AGENT": "probe/1.0",
        }
    )
    assert settings.base_url == "http://localhost:8080/v4"
    assert settings.timeout == 2.5
    assert settings.user_agent == "probe/1.0"


def test_env_file_then_environment(tmp_path):
    cfg = tmp_path / "webmaster.env"
    cfg.write_text(
        "# local overrides\n"
        "YANDEX_WEBMASTER_BASE_URL='http://file.local/v4'\n"
        "YANDEX_WEBMASTER_TIMEOUT=5\n"
        "not a setting\n",
        encoding="utf-8",
    )
    settings = load_settings(environ={"YANDEX_WEBMASTER_CONFIG": str(cfg)})
    assert settings.base_url == "http://file.local/v4"
    assert settings.timeout == 5.0

    settings = load_settings(cfg, environ={"YANDEX_WEBMASTER_TIMEOUT": "9"})
    assert settings.base_url == "http://file.local/v4"
    assert settings.timeout == 9.0


def test_missing_env_file_is_ignored(tmp_path):
    settings = load_settings(tmp_path / "absent.env", environ={})
    assert settings.base_url == DEFAULT_BASE_URL


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_bad_timeout(raw):
    with pytest.raises(ValueError):
        load_settings(environ={"YANDEX_WEBMASTER_TIMEOUT": raw})
