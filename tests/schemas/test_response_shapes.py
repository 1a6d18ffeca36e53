from __future__ import annotations

import pytest
from pydantic import ValidationError

from yandexWebmaster.schemas import (
    AddHostRequest,
    DiagnosticsResponse,
    GetSitemapsRequest,
    IndexingHistoryResponse,
    PageRequest,
    PopularQueriesRequest,
    QueryAnalyticsRequest,
    RecrawlQuotaResponse,
    RecrawlTask,
    VerificationType,
)


def test_indexing_history_accepts_list_form():
    result = IndexingHistoryResponse.model_validate(
        {"indicators": [{"indicator": "HTTP_2XX", "points": [{"date": "2024-01-01", "value": 1}]}]}
    )
    assert result.get("HTTP_2XX")[0].value == 1


def test_indexing_history_accepts_map_form():
    result = IndexingHistoryResponse.model_validate(
        {"indicators": {"HTTP_3XX": [{"date": "2024-01-01", "value": 9}], "HTTP_5XX": None}}
    )
    assert result.get("HTTP_3XX")[0].value == 9
    assert result.get("HTTP_5XX") == []


def test_diagnostics_accepts_items_form():
    result = DiagnosticsResponse.model_validate(
        {"items": [{"item_type": "NO_SITEMAPS", "severity": "FATAL"}]}
    )
    assert result.present()[0].item_type == "NO_SITEMAPS"


def test_recrawl_aliases():
    task = RecrawlTask.model_validate(
        {"task_id": "t", "state": "IN_QUEUE", "added_date": "2024-01-01T00:00:00Z"}
    )
    assert task.added_date is not None
    assert not task.finished
    assert RecrawlQuotaResponse.model_validate({"quota": 10, "quota_remainder": 3}).quota == 10


def test_unknown_enum_value_is_rejected():
    with pytest.raises(ValidationError):
        RecrawlTask.model_validate({"task_id": "t", "state": "EXPLODED"})


def test_request_bodies_skip_unset_fields():
    assert AddHostRequest(host_url="https://example.com").to_body() == {
        "host_url": "https://example.com"
    }
    body = AddHostRequest(host_url="https://example.com", verification_type=VerificationType.DNS)
    assert body.to_body()["verification_type"] == "DNS"


def test_page_limits_are_validated():
    with pytest.raises(ValidationError):
        PageRequest(limit=0)
    with pytest.raises(ValidationError):
        PageRequest(offset=-1)
    with pytest.raises(ValidationError):
        PopularQueriesRequest(order_by="TOTAL_SHOWS", limit=501)


def test_query_analytics_needs_an_indicator():
    with pytest.raises(ValidationError):
        QueryAnalyticsRequest(query_indicator=[])


def test_sitemaps_request_alias():
    assert GetSitemapsRequest(**{"from": "abc"}).to_params() == {"from": "abc"}
    assert GetSitemapsRequest(from_="abc").to_params() == {"from": "abc"}
