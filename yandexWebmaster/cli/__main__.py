"""Command line access to the Yandex Webmaster API."""

from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Iterator, List

import click
from pydantic import BaseModel
from tabulate import tabulate

from api_clients import YandexWebmasterClient, YandexWebmasterError
from yandexWebmaster import __version__
from yandexWebmaster.cli.auth import auth
from yandexWebmaster.schemas import (
    ApiQueryOrderField,
    GetSitemapsRequest,
    PopularQueriesRequest,
    RecrawlRequest,
)


@contextmanager
def _api_errors() -> Iterator[None]:
    try:
        yield
    except (YandexWebmasterError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc


def _client(ctx: click.Context) -> YandexWebmasterClient:
    obj = ctx.ensure_object(dict)
    client = obj.get("client")
    if client is None:
        client = YandexWebmasterClient(obj.get("token"))
        ctx.call_on_close(client.close)
        obj["client"] = client
    return client


def _dump(value: Any) -> None:
    if isinstance(value, BaseModel):
        data = value.model_dump(mode="json", exclude_none=True)
    elif isinstance(value, list):
        data = [v.model_dump(mode="json", exclude_none=True) for v in value]
    else:
        data = value
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _table(rows: List[List[Any]], headers: List[str]) -> None:
    click.echo(tabulate(rows, headers=headers))


json_option = click.option("--json", "as_json", is_flag=True, help="Print the raw response as JSON.")


@click.group()
@click.version_option(__version__)
@click.option(
    "--token",
    envvar="YANDEX_WEBMASTER_TOKEN",
    default=None,
    help="OAuth token (defaults to $YANDEX_WEBMASTER_TOKEN or the keyring).",
)
@click.pass_context
def cli(ctx: click.Context, token: str | None) -> None:
    """Yandex Webmaster API command line."""
    ctx.ensure_object(dict)["token"] = token


cli.add_command(auth)


@cli.command()
@click.pass_context
def user(ctx: click.Context) -> None:
    """Print the user id the token belongs to."""
    with _api_errors():
        click.echo(str(_client(ctx).user_id))


@cli.command()
@json_option
@click.pass_context
def hosts(ctx: click.Context, as_json: bool) -> None:
    """List sites added to Webmaster."""
    with _api_errors():
        items = _client(ctx).get_hosts()
    if as_json:
        _dump(items)
        return
    rows = [[h.host_id, h.unicode_host_url, "yes" if h.verified else "no"] for h in items]
    _table(rows, ["Host ID", "URL", "Verified"])


@cli.command()
@click.argument("host_id")
@json_option
@click.pass_context
def host(ctx: click.Context, host_id: str, as_json: bool) -> None:
    """Show details for HOST_ID."""
    with _api_errors():
        info = _client(ctx).get_host(host_id)
    if as_json:
        _dump(info)
        return
    rows = [
        ["Host ID", info.host_id],
        ["URL", info.unicode_host_url],
        ["Verified", "yes" if info.verified else "no"],
        ["Status", info.host_data_status or "-"],
        ["Display name", info.host_display_name or "-"],
    ]
    click.echo(tabulate(rows))


@cli.command()
@click.argument("host_id")
@json_option
@click.pass_context
def summary(ctx: click.Context, host_id: str, as_json: bool) -> None:
    """Show summary statistics for HOST_ID."""
    with _api_errors():
        result = _client(ctx).get_host_summary(host_id)
    if as_json:
        _dump(result)
        return
    rows = [
        ["SQI", result.sqi if result.sqi is not None else "-"],
        ["Searchable pages", result.searchable_pages_count if result.searchable_pages_count is not None else "-"],
        ["Excluded pages", result.excluded_pages_count if result.excluded_pages_count is not None else "-"],
    ]
    rows.extend([[f"Problems: {k}", v] for k, v in sorted(result.site_problems.items())])
    click.echo(tabulate(rows))


@cli.command()
@click.argument("host_id")
@click.option("--limit", type=click.IntRange(1, 100), default=None, help="Page size.")
@json_option
@click.pass_context
def sitemaps(ctx: click.Context, host_id: str, limit: int | None, as_json: bool) -> None:
    """List sitemap files known for HOST_ID."""
    with _api_errors():
        result = _client(ctx).get_sitemaps(host_id, GetSitemapsRequest(limit=limit))
    if as_json:
        _dump(result)
        return
    rows = [
        [s.sitemap_id, s.sitemap_url, s.urls_count if s.urls_count is not None else "-"]
        for s in result.sitemaps
    ]
    _table(rows, ["Sitemap ID", "URL", "URLs"])


@cli.command(name="popular-queries")
@click.argument("host_id")
@click.option(
    "--order-by",
    type=click.Choice([f.value for f in ApiQueryOrderField]),
    default=ApiQueryOrderField.TOTAL_SHOWS.value,
    show_default=True,
)
@click.option("--limit", type=click.IntRange(1, 500), default=None, help="Page size.")
@json_option
@click.pass_context
def popular_queries(
    ctx: click.Context, host_id: str, order_by: str, limit: int | None, as_json: bool
) -> None:
    """Show the most popular search queries for HOST_ID."""
    request = PopularQueriesRequest(order_by=ApiQueryOrderField(order_by), limit=limit)
    with _api_errors():
        result = _client(ctx).get_popular_queries(host_id, request)
    if as_json:
        _dump(result)
        return
    indicators = sorted({k for q in result.queries for k in q.indicators}, key=str)
    rows = [
        [q.query_text] + [q.indicators.get(k) for k in indicators] for q in result.queries
    ]
    _table(rows, ["Query"] + [str(k) for k in indicators])
    click.echo(f"\n{result.count} queries, {result.date_from} .. {result.date_to}")


@cli.command()
@click.argument("host_id")
@click.argument("url")
@click.pass_context
def recrawl(ctx: click.Context, host_id: str, url: str) -> None:
    """Queue URL of HOST_ID for recrawl."""
    with _api_errors():
        result = _client(ctx).recrawl_urls(host_id, RecrawlRequest(url=url))
    message = f"task {result.task_id}"
    if result.quota_remainder is not None:
        message += f" (quota remainder {result.quota_remainder})"
    click.echo(message)


@cli.command(name="recrawl-quota")
@click.argument("host_id")
@click.pass_context
def recrawl_quota(ctx: click.Context, host_id: str) -> None:
    """Show the daily recrawl quota for HOST_ID."""
    with _api_errors():
        result = _client(ctx).get_recrawl_quota(host_id)
    click.echo(f"{result.quota_remainder}/{result.quota}")


@cli.command()
@click.argument("host_id")
@click.option("--all", "show_all", is_flag=True, help="Include problems that are not present.")
@json_option
@click.pass_context
def diagnostics(ctx: click.Context, host_id: str, show_all: bool, as_json: bool) -> None:
    """Show site diagnostics for HOST_ID."""
    with _api_errors():
        result = _client(ctx).get_diagnostics(host_id)
    if as_json:
        _dump(result)
        return
    items = result.items if show_all else result.present()
    rows = [[i.item_type, str(i.severity), i.state or "-"] for i in items]
    _table(rows, ["Problem", "Severity", "State"])


def main() -> None:  # pragma: no cover - console script
    cli(obj={})


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()
