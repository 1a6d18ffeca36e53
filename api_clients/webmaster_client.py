"""Yandex Webmaster API (v4) client.

Every public method maps to exactly one HTTP request. Responses are validated
into the pydantic models from :mod:`yandexWebmaster.schemas`; failures are
raised as the exceptions from :mod:`api_clients.webmaster_errors`.
"""
from __future__ import annotations

import time
from typing import Any, Dict, List, Type, TypeVar
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError

from api_clients.webmaster_auth import OAuthTokenAuth
from api_clients.webmaster_errors import (
    ApiError,
    ApiErrorResponse,
    AuthenticationError,
    DeserializationError,
    GenericApiError,
    RequestEncodingError,
    TransportError,
    YandexWebmasterError,
)
from yandexWebmaster.config import TOKEN_SECRET_NAME, ClientSettings, load_settings
from yandexWebmaster.schemas import (
    AddHostRequest,
    AddHostResponse,
    AddSitemapRequest,
    AddSitemapResponse,
    BrokenLinksResponse,
    DiagnosticsResponse,
    ExplicitVerificationType,
    ExternalLinksResponse,
    FullHostInfo,
    GetIndexingSamplesRequest,
    GetRecrawlTasksRequest,
    GetSearchEventsSamplesRequest,
    GetSearchUrlsSamplesRequest,
    GetSitemapsRequest,
    GetUserSitemapsRequest,
    HostInfo,
    HostsResponse,
    HostSummaryResponse,
    HostVerificationResponse,
    HostVerificationStatusResponse,
    ImportantUrlHistoryResponse,
    ImportantUrlsResponse,
    IndexingHistoryRequest,
    IndexingHistoryResponse,
    IndexingSamplesResponse,
    Owner,
    OwnersResponse,
    PageRequest,
    PopularQueriesRequest,
    PopularQueriesResponse,
    QueryAnalyticsRequest,
    QueryAnalyticsResponse,
    QueryHistoryRequest,
    QueryHistoryResponse,
    QueryModel,
    RecrawlQuotaResponse,
    RecrawlRequest,
    RecrawlResponse,
    RecrawlTask,
    RecrawlTasksResponse,
    SearchEventsHistoryResponse,
    SearchEventsSamplesResponse,
    SearchUrlsHistoryResponse,
    SearchUrlsSamplesResponse,
    SitemapInfo,
    SitemapsResponse,
    SqiHistoryRequest,
    SqiHistoryResponse,
    SqiPoint,
    UserResponse,
    UserSitemapInfo,
    UserSitemapsResponse,
)
from yandexWebmaster.schemas.common import ApiModel
from yandexWebmaster.utils.log_json import JsonLogger
from yandexWebmaster.utils.secure_store import get_secret

_logger = JsonLogger("webmaster-client")
_BODY_PREVIEW = 200

T = TypeVar("T", bound=BaseModel)


def _segment(value: Any) -> str:
    # host ids look like ``https:example.com:443``; keep the colons readable.
    return quote(str(value), safe=":")


class YandexWebmasterClient:
    """Client for the Yandex Webmaster API.

    Parameters
    ----------
    oauth_token:
        OAuth token. Falls back to ``$YANDEX_WEBMASTER_TOKEN`` or the keyring
        entry of the same name.
    session:
        Optional :class:`requests.Session`. The client installs its auth and
        sets the ``User-Agent`` and ``Accept`` headers on it; these are not
        restored. A caller-supplied session is not closed by :meth:`close`.
    settings:
        Base URL, timeout and user agent; defaults to :func:`load_settings`.
    user_id:
        Known user id. When omitted the constructor calls ``GET /user``, so an
        invalid token fails here rather than on the first endpoint call.
    """

    def __init__(
        self,
        oauth_token: str | None = None,
        *,
        session: requests.Session | None = None,
        settings: ClientSettings | None = None,
        user_id: int | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        token = oauth_token or get_secret(TOKEN_SECRET_NAME, fallback="")
        if not token:
            raise AuthenticationError(
                f"no OAuth token given and {TOKEN_SECRET_NAME} is not configured"
            )
        self.session = session or requests.Session()
        self._owns_session = session is None
        self.session.auth = OAuthTokenAuth(token)
        self.session.headers.update(
            {"User-Agent": self.settings.user_agent, "Accept": "application/json"}
        )
        self.base_url = self.settings.base_url.rstrip("/")
        _logger.info(
            "api.client.init",
            base_url=self.base_url,
            user_agent=self.settings.user_agent,
            timeout=self.settings.timeout,
        )
        if user_id is None:
            try:
                user_id = self._fetch_user().user_id
            except YandexWebmasterError:
                self.close()
                raise
            _logger.info("api.authenticated", user_id=user_id)
        self._user_id = int(user_id)

    # ------------------------------------------------------------------#
    @property
    def user_id(self) -> int:
        return self._user_id

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "YandexWebmasterClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        user = getattr(self, "_user_id", None)
        return f"{type(self).__name__}(base_url={self.base_url!r}, user_id={user!r})"

    # ------------------------------------------------------------------#
    # Request plumbing
    # ------------------------------------------------------------------#
    def _fetch_user(self) -> UserResponse:
        return self._request("GET", "/user", model=UserResponse)

    def _host_path(self, host_id: str, *segments: Any) -> str:
        parts = [_segment(self._user_id), "hosts", _segment(host_id)]
        parts.extend(_segment(s) for s in segments)
        return "/user/" + "/".join(parts)

    def _get(self, path: str, model: Type[T], params: QueryModel | Dict[str, Any] | None = None) -> T:
        return self._request("GET", path, params=params, model=model)

    def _post(
        self,
        path: str,
        model: Type[T],
        body: ApiModel | None = None,
        params: QueryModel | Dict[str, Any] | None = None,
    ) -> T:
        return self._request("POST", path, params=params, body=body, model=model)

    def _delete(self, path: str) -> None:
        self._request("DELETE", path)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: QueryModel | Dict[str, Any] | None = None,
        body: ApiModel | None = None,
        model: Type[T] | None = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            query = params.to_params() if isinstance(params, QueryModel) else params
            payload = body.to_body() if body is not None else None
        except (TypeError, ValueError) as exc:
            raise RequestEncodingError(str(exc)) from exc

        _logger.info("api.request", method=method, route=path, params=query)
        start = time.perf_counter()
        try:
            resp = self.session.request(
                method,
                url,
                params=query,
                json=payload,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as exc:
            _logger.error("api.request_failed", method=method, route=path, error=str(exc))
            raise TransportError(str(exc)) from exc
        latency_ms = round((time.perf_counter() - start) * 1000, 3)

        if not 200 <= resp.status_code < 300:
            raise self._parse_error(resp, method=method, route=path)
        _logger.info(
            "api.response",
            method=method,
            route=path,
            status=resp.status_code,
            latency_ms=latency_ms,
        )
        if model is None:
            return None
        return self._decode(resp, model, route=path)

    @staticmethod
    def _decode(resp: requests.Response, model: Type[T], *, route: str) -> T:
        try:
            data = resp.json()
        except ValueError as exc:
            _logger.error("api.invalid_json", route=route, status=resp.status_code, error=str(exc))
            raise DeserializationError(str(exc), body=resp.text[:_BODY_PREVIEW]) from exc
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            _logger.error(
                "api.schema_mismatch",
                route=route,
                model=model.__name__,
                errors=exc.error_count(),
            )
            raise DeserializationError(str(exc), body=resp.text[:_BODY_PREVIEW]) from exc

    @staticmethod
    def _parse_error(resp: requests.Response, *, method: str, route: str) -> YandexWebmasterError:
        text = resp.text or ""
        try:
            error = ApiErrorResponse.model_validate_json(text)
        except ValidationError:
            _logger.error(
                "api.error",
                method=method,
                route=route,
                status=resp.status_code,
                body=text[:_BODY_PREVIEW],
            )
            return GenericApiError(resp.status_code, text, reason=resp.reason or "")
        _logger.error(
            "api.error",
            method=method,
            route=route,
            status=resp.status_code,
            error_code=str(error.error_code),
            error_message=error.error_message,
        )
        return ApiError(resp.status_code, error)

    # ------------------------------------------------------------------#
    # Hosts
    # ------------------------------------------------------------------#
    def get_hosts(self) -> List[HostInfo]:
        """List all sites added by the user."""
        path = f"/user/{_segment(self._user_id)}/hosts"
        return self._get(path, HostsResponse).hosts

    def add_host(self, request: AddHostRequest) -> AddHostResponse:
        path = f"/user/{_segment(self._user_id)}/hosts"
        return self._post(path, AddHostResponse, body=request)

    def get_host(self, host_id: str) -> FullHostInfo:
        return self._get(self._host_path(host_id), FullHostInfo)

    def delete_host(self, host_id: str) -> None:
        self._delete(self._host_path(host_id))

    # ------------------------------------------------------------------#
    # Verification
    # ------------------------------------------------------------------#
    def get_verification_status(self, host_id: str) -> HostVerificationStatusResponse:
        return self._get(self._host_path(host_id, "verification"), HostVerificationStatusResponse)

    def verify_host(
        self, host_id: str, verification_type: ExplicitVerificationType | str
    ) -> HostVerificationResponse:
        """Start the verification procedure with ``verification_type``."""
        try:
            method = ExplicitVerificationType(verification_type)
        except ValueError as exc:
            raise RequestEncodingError(f"unsupported verification type {verification_type!r}") from exc
        return self._post(
            self._host_path(host_id, "verification"),
            HostVerificationResponse,
            params={"verification_type": method.value},
        )

    def get_owners(self, host_id: str) -> List[Owner]:
        return self._get(self._host_path(host_id, "owners"), OwnersResponse).users

    # ------------------------------------------------------------------#
    # Site statistics
    # ------------------------------------------------------------------#
    def get_host_summary(self, host_id: str) -> HostSummaryResponse:
        return self._get(self._host_path(host_id, "summary"), HostSummaryResponse)

    def get_sqi_history(
        self, host_id: str, request: SqiHistoryRequest | None = None
    ) -> List[SqiPoint]:
        """Return the site quality index history points."""
        result = self._get(
            self._host_path(host_id, "sqi-history"),
            SqiHistoryResponse,
            request or SqiHistoryRequest(),
        )
        return result.points

    # ------------------------------------------------------------------#
    # Search queries
    # ------------------------------------------------------------------#
    def get_popular_queries(
        self, host_id: str, request: PopularQueriesRequest
    ) -> PopularQueriesResponse:
        return self._get(
            self._host_path(host_id, "search-queries", "popular"),
            PopularQueriesResponse,
            request,
        )

    def get_query_analytics(
        self, host_id: str, request: QueryAnalyticsRequest
    ) -> QueryAnalyticsResponse:
        """Overall history of the requested indicators across all queries."""
        return self._get(
            self._host_path(host_id, "search-queries", "all", "history"),
            QueryAnalyticsResponse,
            request,
        )

    def get_query_history(
        self, host_id: str, query_id: str, request: QueryHistoryRequest
    ) -> QueryHistoryResponse:
        return self._get(
            self._host_path(host_id, "search-queries", query_id, "history"),
            QueryHistoryResponse,
            request,
        )

    # ------------------------------------------------------------------#
    # Sitemaps
    # ------------------------------------------------------------------#
    def get_sitemaps(
        self, host_id: str, request: GetSitemapsRequest | None = None
    ) -> SitemapsResponse:
        return self._get(
            self._host_path(host_id, "sitemaps"),
            SitemapsResponse,
            request or GetSitemapsRequest(),
        )

    def get_sitemap(self, host_id: str, sitemap_id: str) -> SitemapInfo:
        return self._get(self._host_path(host_id, "sitemaps", sitemap_id), SitemapInfo)

    def get_user_sitemaps(
        self, host_id: str, request: GetUserSitemapsRequest | None = None
    ) -> UserSitemapsResponse:
        return self._get(
            self._host_path(host_id, "user-added-sitemaps"),
            UserSitemapsResponse,
            request or GetUserSitemapsRequest(),
        )

    def add_sitemap(self, host_id: str, request: AddSitemapRequest) -> AddSitemapResponse:
        return self._post(
            self._host_path(host_id, "user-added-sitemaps"), AddSitemapResponse, body=request
        )

    def get_user_sitemap(self, host_id: str, sitemap_id: str) -> UserSitemapInfo:
        return self._get(
            self._host_path(host_id, "user-added-sitemaps", sitemap_id), UserSitemapInfo
        )

    def delete_sitemap(self, host_id: str, sitemap_id: str) -> None:
        self._delete(self._host_path(host_id, "user-added-sitemaps", sitemap_id))

    # ------------------------------------------------------------------#
    # Indexing and pages in search
    # ------------------------------------------------------------------#
    def get_indexing_history(
        self, host_id: str, request: IndexingHistoryRequest | None = None
    ) -> IndexingHistoryResponse:
        return self._get(
            self._host_path(host_id, "indexing", "history"),
            IndexingHistoryResponse,
            request or IndexingHistoryRequest(),
        )

    def get_indexing_samples(
        self, host_id: str, request: GetIndexingSamplesRequest | None = None
    ) -> IndexingSamplesResponse:
        return self._get(
            self._host_path(host_id, "indexing", "samples"),
            IndexingSamplesResponse,
            request or GetIndexingSamplesRequest(),
        )

    def get_search_urls_history(
        self, host_id: str, request: IndexingHistoryRequest | None = None
    ) -> SearchUrlsHistoryResponse:
        return self._get(
            self._host_path(host_id, "search-urls", "in-search", "history"),
            SearchUrlsHistoryResponse,
            request or IndexingHistoryRequest(),
        )

    def get_search_urls_samples(
        self, host_id: str, request: GetSearchUrlsSamplesRequest | None = None
    ) -> SearchUrlsSamplesResponse:
        return self._get(
            self._host_path(host_id, "search-urls", "in-search", "samples"),
            SearchUrlsSamplesResponse,
            request or GetSearchUrlsSamplesRequest(),
        )

    def get_search_events_history(
        self, host_id: str, request: IndexingHistoryRequest | None = None
    ) -> SearchEventsHistoryResponse:
        """History of pages appearing in and disappearing from search."""
        return self._get(
            self._host_path(host_id, "search-urls", "events", "history"),
            SearchEventsHistoryResponse,
            request or IndexingHistoryRequest(),
        )

    def get_search_events_samples(
        self, host_id: str, request: GetSearchEventsSamplesRequest | None = None
    ) -> SearchEventsSamplesResponse:
        return self._get(
            self._host_path(host_id, "search-urls", "events", "samples"),
            SearchEventsSamplesResponse,
            request or GetSearchEventsSamplesRequest(),
        )

    # ------------------------------------------------------------------#
    # Important URLs
    # ------------------------------------------------------------------#
    def get_important_urls(self, host_id: str) -> ImportantUrlsResponse:
        return self._get(self._host_path(host_id, "important-urls"), ImportantUrlsResponse)

    def get_important_urls_history(self, host_id: str, url: str) -> ImportantUrlHistoryResponse:
        return self._get(
            self._host_path(host_id, "important-urls", "history"),
            ImportantUrlHistoryResponse,
            {"url": url},
        )

    # ------------------------------------------------------------------#
    # Recrawl
    # ------------------------------------------------------------------#
    def recrawl_urls(self, host_id: str, request: RecrawlRequest) -> RecrawlResponse:
        """Queue a page for recrawl."""
        return self._post(self._host_path(host_id, "recrawl", "queue"), RecrawlResponse, body=request)

    def get_recrawl_tasks(
        self, host_id: str, request: GetRecrawlTasksRequest | None = None
    ) -> RecrawlTasksResponse:
        return self._get(
            self._host_path(host_id, "recrawl", "queue"),
            RecrawlTasksResponse,
            request or GetRecrawlTasksRequest(),
        )

    def get_recrawl_task(self, host_id: str, task_id: str) -> RecrawlTask:
        return self._get(self._host_path(host_id, "recrawl", "queue", task_id), RecrawlTask)

    def get_recrawl_quota(self, host_id: str) -> RecrawlQuotaResponse:
        return self._get(self._host_path(host_id, "recrawl", "quota"), RecrawlQuotaResponse)

    # ------------------------------------------------------------------#
    # Links
    # ------------------------------------------------------------------#
    def get_broken_links(
        self, host_id: str, request: PageRequest | None = None
    ) -> BrokenLinksResponse:
        """Samples of broken internal links."""
        return self._get(
            self._host_path(host_id, "links", "internal", "broken", "samples"),
            BrokenLinksResponse,
            request or PageRequest(),
        )

    def get_broken_links_history(
        self, host_id: str, request: IndexingHistoryRequest | None = None
    ) -> IndexingHistoryResponse:
        return self._get(
            self._host_path(host_id, "links", "internal", "broken", "history"),
            IndexingHistoryResponse,
            request or IndexingHistoryRequest(),
        )

    def get_external_links(
        self, host_id: str, request: PageRequest | None = None
    ) -> ExternalLinksResponse:
        """Samples of external backlinks."""
        return self._get(
            self._host_path(host_id, "links", "external", "samples"),
            ExternalLinksResponse,
            request or PageRequest(),
        )

    def get_external_links_history(
        self,
        host_id: str,
        request: IndexingHistoryRequest | None = None,
        *,
        indicator: str = "LINKS_TOTAL_COUNT",
    ) -> IndexingHistoryResponse:
        params: Dict[str, Any] = (request or IndexingHistoryRequest()).to_params()
        params["indicator"] = indicator
        return self._get(
            self._host_path(host_id, "links", "external", "history"),
            IndexingHistoryResponse,
            params,
        )

    # ------------------------------------------------------------------#
    # Diagnostics
    # ------------------------------------------------------------------#
    def get_diagnostics(self, host_id: str) -> DiagnosticsResponse:
        return self._get(self._host_path(host_id, "diagnostics"), DiagnosticsResponse)


__all__ = ["YandexWebmasterClient"]
