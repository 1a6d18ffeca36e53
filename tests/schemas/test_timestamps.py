from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from yandexWebmaster.schemas import SqiHistoryRequest, SqiPoint
from yandexWebmaster.schemas.common import normalize_timestamp


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2016-01-01T00:00:00,000+0300", "2016-01-01T00:00:00.000000+03:00"),
        ("2016-01-01T00:00:00.5Z", "2016-01-01T00:00:00.500000+00:00"),
        ("2016-01-01T12:30+03", "2016-01-01T12:30:00+03:00"),
        ("2016-01-01T00:00:00-05:30", "2016-01-01T00:00:00-05:30"),
        ("2016-01-01", "2016-01-01T00:00:00+00:00"),
    ],
)
def test_normalize_timestamp(raw, expected):
    assert normalize_timestamp(raw) == expected


def test_non_matching_values_pass_through():
    assert normalize_timestamp("yesterday") == "yesterday"
    assert normalize_timestamp(1700000000) == 1700000000


def test_naive_datetime_gets_utc():
    value = normalize_timestamp(datetime(2024, 1, 1))
    assert value.tzinfo is timezone.utc


def test_model_parses_service_format():
    point = SqiPoint.model_validate({"date": "2016-01-01T00:00:00,123+0300", "value": 5})
    assert point.date.utcoffset() == timedelta(hours=3)
    assert point.date.microsecond == 123000
    assert point.date == datetime(2015, 12, 31, 21, 0, 0, 123000, tzinfo=timezone.utc)


def test_plain_date_becomes_utc_midnight():
    value = normalize_timestamp(date(2024, 1, 1))
    assert value == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert value.tzinfo is timezone.utc


def test_date_filter_is_sent_with_offset():
    params = SqiHistoryRequest(date_from=date(2024, 1, 1)).to_params()
    sent = datetime.fromisoformat(params["date_from"].replace("Z", "+00:00"))
    assert sent == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert sent.utcoffset() == timedelta(0)
