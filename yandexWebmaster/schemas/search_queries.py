from __future__ import annotations

"""Search query analytics schemas."""

from datetime import date
from typing import Dict, List, Optional

from pydantic import Field

from .common import ApiDateTime, ApiModel, QueryModel, WireEnum


class ApiQueryOrderField(WireEnum):
    TOTAL_SHOWS = "TOTAL_SHOWS"
    TOTAL_CLICKS = "TOTAL_CLICKS"


class ApiQueryIndicator(WireEnum):
    TOTAL_SHOWS = "TOTAL_SHOWS"
    TOTAL_CLICKS = "TOTAL_CLICKS"
    AVG_SHOW_POSITION = "AVG_SHOW_POSITION"
    AVG_CLICK_POSITION = "AVG_CLICK_POSITION"


class ApiDeviceTypeIndicator(WireEnum):
    ALL = "ALL"
    DESKTOP = "DESKTOP"
    MOBILE_AND_TABLET = "MOBILE_AND_TABLET"
    MOBILE = "MOBILE"
    TABLET = "TABLET"


class PopularQueriesRequest(QueryModel):
    order_by: ApiQueryOrderField = Field(..., description="Indicator used to sort queries")
    query_indicator: Optional[ApiQueryIndicator] = None
    device_type_indicator: Optional[ApiDeviceTypeIndicator] = Field(
        default=None, description="Server default is ALL"
    )
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    offset: Optional[int] = Field(default=None, ge=0)
    limit: Optional[int] = Field(default=None, ge=1, le=500, description="Server default is 500")


class PopularQuery(ApiModel):
    query_id: str
    query_text: str
    indicators: Dict[ApiQueryIndicator, Optional[float]] = Field(default_factory=dict)


class PopularQueriesResponse(ApiModel):
    queries: List[PopularQuery] = Field(default_factory=list)
    date_from: date
    date_to: date
    count: int = Field(..., description="Total number of queries available")


class IndicatorPoint(ApiModel):
    date: ApiDateTime
    value: float


class QueryAnalyticsRequest(QueryModel):
    query_indicator: List[ApiQueryIndicator] = Field(..., min_length=1)
    device_type_indicator: Optional[ApiDeviceTypeIndicator] = None
    date_from: Optional[ApiDateTime] = None
    date_to: Optional[ApiDateTime] = None


class QueryAnalyticsResponse(ApiModel):
    indicators: Dict[ApiQueryIndicator, List[IndicatorPoint]] = Field(default_factory=dict)


class QueryHistoryRequest(QueryModel):
    query_indicator: List[ApiQueryIndicator] = Field(..., min_length=1)
    device_type_indicator: Optional[ApiDeviceTypeIndicator] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None


class QueryHistoryResponse(ApiModel):
    query_id: str
    query_text: str
    indicators: Dict[ApiQueryIndicator, List[IndicatorPoint]] = Field(default_factory=dict)


__all__ = [
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
]
