from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from .common import ApiDateTime, ApiModel, QueryModel


class IndexingStats(ApiModel):
    total_pages: Optional[int] = None
    pages_in_search: Optional[int] = None


class SearchQueriesStats(ApiModel):
    total_queries: Optional[int] = None
    total_shows: Optional[int] = None
    total_clicks: Optional[int] = None


class HostSummaryResponse(ApiModel):
    sqi: Optional[float] = Field(default=None, description="Site quality index")
    indexing: Optional[IndexingStats] = None
    search_queries: Optional[SearchQueriesStats] = None
    searchable_pages_count: Optional[int] = None
    excluded_pages_count: Optional[int] = None
    site_problems: Dict[str, int] = Field(
        default_factory=dict, description="Problem counts keyed by severity"
    )


class SqiHistoryRequest(QueryModel):
    date_from: Optional[ApiDateTime] = None
    date_to: Optional[ApiDateTime] = None


class SqiPoint(ApiModel):
    date: ApiDateTime
    value: float


class SqiHistoryResponse(ApiModel):
    points: List[SqiPoint] = Field(default_factory=list)


__all__ = [
    "HostSummaryResponse",
    "IndexingStats",
    "SearchQueriesStats",
    "SqiHistoryRequest",
    "SqiHistoryResponse",
    "SqiPoint",
]
