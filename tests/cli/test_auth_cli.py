from __future__ import annotations

from click.testing import CliRunner

from yandexWebmaster.cli.__main__ import cli
from yandexWebmaster.config import TOKEN_SECRET_NAME
from yandexWebmaster.utils.secure_store import SERVICE


def test_set_and_delete_token(dummy_keyring):
    runner = CliRunner()
    result = runner.invoke(cli, ["auth", "set-token", "--from-stdin"], input="secret-token\n")
    assert result.exit_code == 0, result.output
    assert "token stored" in result.output
    assert dummy_keyring.get_password(SERVICE, TOKEN_SECRET_NAME) == "secret-token"

    result = runner.invoke(cli, ["auth", "delete-token"])
    assert result.exit_code == 0
    assert "token deleted" in result.output
    result = runner.invoke(cli, ["auth", "delete-token"])
    assert "no token stored" in result.output


def test_empty_stdin_is_rejected(dummy_keyring):
    result = CliRunner().invoke(cli, ["auth", "set-token", "--from-stdin"], input="")
    assert result.exit_code == 1
    assert "no token on stdin" in result.output
    assert dummy_keyring.get_password(SERVICE, TOKEN_SECRET_NAME) is None


def test_stored_token_is_used(dummy_keyring, requests_mock):
    dummy_keyring.set_password(SERVICE, TOKEN_SECRET_NAME, "from-keyring")
    m = requests_mock.get("https://api.webmaster.yandex.net/v4/user", json={"user_id": 9})
    result = CliRunner().invoke(cli, ["user"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "9"
    assert m.last_request.headers["Authorization"] == "OAuth from-keyring"


def test_auth_commands_have_help_text():
    runner = CliRunner()
    result = runner.invoke(cli, ["auth", "set-token", "--help"])
    assert "Store a token read from stdin." in result.output
    result = runner.invoke(cli, ["auth", "delete-token", "--help"])
    assert result.exit_code == 0
    assert "Remove the stored token from the keyring." in result.output
