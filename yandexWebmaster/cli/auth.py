from __future__ import annotations

import sys

import click

from yandexWebmaster.config import TOKEN_SECRET_NAME
from yandexWebmaster.utils import secure_store


@click.group()
def auth() -> None:
    """Manage the OAuth token stored in the OS keyring."""


@auth.command(name="set-token")
@click.option("--from-stdin", is_flag=True, required=True)
def set_token(from_stdin: bool) -> None:
    """Store a token read from stdin."""
    value = sys.stdin.read().strip()
    if not value:
        raise click.ClickException("no token on stdin")
    secure_store.set_secret(TOKEN_SECRET_NAME, value)
    click.echo("token stored")


@auth.command(name="delete-token")
def delete_token() -> None:
    """Remove the stored token from the keyring."""
    if secure_store.delete_secret(TOKEN_SECRET_NAME):
        click.echo("token deleted")
    else:
        click.echo("no token stored")
