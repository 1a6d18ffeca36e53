from __future__ import annotations

"""Indexing history, in-search URLs and search event schemas."""

from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from .common import ApiDateTime, ApiModel, PageRequest, QueryModel


class IndexingHistoryRequest(QueryModel):
    date_from: Optional[ApiDateTime] = None
    date_to: Optional[ApiDateTime] = None


class IndexingPoint(ApiModel):
    date: ApiDateTime
    value: int


class IndexingIndicator(ApiModel):
    indicator: str = Field(..., description="Indicator name, e.g. HTTP_2XX or SITE_ERROR")
    points: List[IndexingPoint] = Field(default_factory=list)


class IndexingHistoryResponse(ApiModel):
    indicators: List[IndexingIndicator] = Field(default_factory=list)

    @field_validator("indicators", mode="before")
    @classmethod
    def _indicator_map_to_list(cls, value: Any) -> Any:
        # The service keys point lists by indicator name.
        if isinstance(value, dict):
            return [{"indicator": name, "points": points or []} for name, points in value.items()]
        return value

    def get(self, indicator: str) -> List[IndexingPoint]:
        for item in self.indicators:
            if item.indicator == indicator:
                return item.points
        return []


class GetIndexingSamplesRequest(PageRequest):
    pass


class UrlSample(ApiModel):
    url: str
    last_access: Optional[ApiDateTime] = None
    status: Optional[str] = Field(default=None, description="Crawl status, e.g. HTTP_2XX")
    http_code: Optional[int] = None
    access_date: Optional[ApiDateTime] = None


class IndexingSamplesResponse(ApiModel):
    samples: List[UrlSample] = Field(default_factory=list)
    count: Optional[int] = None


class SearchUrlsHistoryResponse(ApiModel):
    history: List[IndexingPoint] = Field(default_factory=list)


class GetSearchUrlsSamplesRequest(PageRequest):
    pass


class SearchUrlSample(ApiModel):
    url: str
    last_access: Optional[ApiDateTime] = None
    title: Optional[str] = None


class SearchUrlsSamplesResponse(ApiModel):
    samples: List[SearchUrlSample] = Field(default_factory=list)
    count: Optional[int] = None


class SearchEventsHistoryResponse(ApiModel):
    indicators: Dict[str, List[IndexingPoint]] = Field(
        default_factory=dict,
        description="APPEARED_IN_SEARCH / REMOVED_FROM_SEARCH point lists",
    )


class GetSearchEventsSamplesRequest(PageRequest):
    pass


class SearchEventSample(ApiModel):
    url: str
    title: Optional[str] = None
    event_date: Optional[ApiDateTime] = None
    last_access: Optional[ApiDateTime] = None
    event: Optional[str] = None
    excluded_url_status: Optional[str] = None
    bad_http_status: Optional[int] = None
    target_url: Optional[str] = None


class SearchEventsSamplesResponse(ApiModel):
    samples: List[SearchEventSample] = Field(default_factory=list)
    count: Optional[int] = None


__all__ = [
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
    "UrlSample",
]
