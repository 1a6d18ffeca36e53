from .common import ApiDateTime, ApiModel, PageRequest, QueryModel, WireEnum
from .hosts import (
    AddHostRequest,
    AddHostResponse,
    FullHostInfo,
    HostDataStatus,
    HostInfo,
    HostsResponse,
    UserResponse,
)
from .verification import (
    ExplicitVerificationType,
    FailInfo,
    HostVerificationResponse,
    HostVerificationStatusResponse,
    Owner,
    OwnersResponse,
    VerificationFailReason,
    VerificationState,
    VerificationType,
)
from .statistics import (
    HostSummaryResponse,
    IndexingStats,
    SearchQueriesStats,
    SqiHistoryRequest,
    SqiHistoryResponse,
    SqiPoint,
)
from .search_queries import (
    ApiDeviceTypeIndicator,
    ApiQueryIndicator,
    ApiQueryOrderField,
    IndicatorPoint,
    PopularQueriesRequest,
    PopularQueriesResponse,
    PopularQuery,
    QueryAnalyticsRequest,
    QueryAnalyticsResponse,
    QueryHistoryRequest,
    QueryHistoryResponse,
)
from .sitemaps import (
    AddSitemapRequest,
    AddSitemapResponse,
    GetSitemapsRequest,
    GetUserSitemapsRequest,
    SitemapInfo,
    SitemapsResponse,
    UserSitemapInfo,
    UserSitemapsResponse,
)
from .indexing import (
    GetIndexingSamplesRequest,
    GetSearchEventsSamplesRequest,
    GetSearchUrlsSamplesRequest,
    IndexingHistoryRequest,
    IndexingHistoryResponse,
    IndexingIndicator,
    IndexingPoint,
    IndexingSamplesResponse,
    SearchEventSample,
    SearchEventsHistoryResponse,
    SearchEventsSamplesResponse,
    SearchUrlSample,
    SearchUrlsHistoryResponse,
    SearchUrlsSamplesResponse,
    UrlSample,
)
from .important_urls import ImportantUrl, ImportantUrlHistoryResponse, ImportantUrlsResponse
from .recrawl import (
    GetRecrawlTasksRequest,
    RecrawlQuotaResponse,
    RecrawlRequest,
    RecrawlResponse,
    RecrawlTask,
    RecrawlTaskState,
    RecrawlTasksResponse,
)
from .links import BrokenLink, BrokenLinksResponse, ExternalLink, ExternalLinksResponse
from .diagnostics import DiagnosticItem, DiagnosticSeverity, DiagnosticsResponse

__all__ = [
    "ApiDateTime",
    "ApiModel",
    "PageRequest",
    "QueryModel",
    "WireEnum",
    "AddHostRequest",
    "AddHostResponse",
    "FullHostInfo",
    "HostDataStatus",
    "HostInfo",
    "HostsResponse",
    "UserResponse",
    "ExplicitVerificationType",
    "FailInfo",
    "HostVerificationResponse",
    "HostVerificationStatusResponse",
    "Owner",
    "OwnersResponse",
    "VerificationFailReason",
    "VerificationState",
    "VerificationType",
    "HostSummaryResponse",
    "IndexingStats",
    "SearchQueriesStats",
    "SqiHistoryRequest",
    "SqiHistoryResponse",
    "SqiPoint",
    "ApiDeviceTypeIndicator",
    "ApiQueryIndicator",
    "ApiQueryOrderField",
    "IndicatorPoint",
    "PopularQueriesRequest",
    "PopularQueriesResponse",
    "PopularQuery",
    "QueryAnalyticsRequest",
    "QueryAnalyticsResponse",
    "QueryHistoryRequest",
    "QueryHistoryResponse",
    "AddSitemapRequest",
    "AddSitemapResponse",
    "GetSitemapsRequest",
    "GetUserSitemapsRequest",
    "SitemapInfo",
    "SitemapsResponse",
    "UserSitemapInfo",
    "UserSitemapsResponse",
    "GetIndexingSamplesRequest",
    "GetSearchEventsSamplesRequest",
    "GetSearchUrlsSamplesRequest",
    "IndexingHistoryRequest",
    "IndexingHistoryResponse",
    "IndexingIndicator",
    "IndexingPoint",
    "IndexingSamplesResponse",
    "SearchEventSample",
    "SearchEventsHistoryResponse",
    "SearchEventsSamplesResponse",
    "SearchUrlSample",
    "SearchUrlsHistoryResponse",
    "SearchUrlsSamplesResponse",
    "UrlSample",
    "ImportantUrl",
    "ImportantUrlHistoryResponse",
    "ImportantUrlsResponse",
    "GetRecrawlTasksRequest",
    "RecrawlQuotaResponse",
    "RecrawlRequest",
    "RecrawlResponse",
    "RecrawlTask",
    "RecrawlTaskState",
    "RecrawlTasksResponse",
    "BrokenLink",
    "BrokenLinksResponse",
    "ExternalLink",
    "ExternalLinksResponse",
    "DiagnosticItem",
    "DiagnosticSeverity",
    "DiagnosticsResponse",
]
