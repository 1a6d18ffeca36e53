from __future__ import annotations

"""Shared building blocks for the Webmaster API schemas."""

import re
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Annotated, Any, Dict

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# The service emits timestamps such as ``2016-01-01T00:00:00,000+0300``.
_TIMESTAMP_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})"
    r"(?:[T ](?P<time>\d{2}:\d{2}(?::\d{2})?)(?:[.,](?P<frac>\d+))?)?"
    r"(?P<tz>Z|z|[+-]\d{2}(?::?\d{2})?)?$"
)


def normalize_timestamp(value: Any) -> Any:
    """Rewrite a Webmaster timestamp into a form pydantic parses as aware UTC-offset time."""

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=timezone.utc)
    if not isinstance(value, str):
        return value
    match = _TIMESTAMP_RE.match(value.strip())
    if match is None:
        return value
    clock = match["time"] or "00:00:00"
    if len(clock) == 5:
        clock += ":00"
    frac = match["frac"]
    fraction = f".{frac[:6].ljust(6, '0')}" if frac else ""
    tz = match["tz"]
    if tz is None or tz in ("Z", "z"):
        offset = "+00:00"
    elif len(tz) == 3:
        offset = f"{tz}:00"
    elif ":" not in tz:
        offset = f"{tz[:3]}:{tz[3:]}"
    else:
        offset = tz
    return f"{match['date']}T{clock}{fraction}{offset}"


ApiDateTime = Annotated[datetime, BeforeValidator(normalize_timestamp)]


class WireEnum(str, Enum):
    """String enum whose ``str()`` is the wire value."""

    def __str__(self) -> str:
        return self.value


class ApiModel(BaseModel):
    """Base for response payloads; unknown fields are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class QueryModel(ApiModel):
    """Base for request objects sent as query-string parameters."""

    def to_params(self) -> Dict[str, Any]:
        """Return JSON-mode values keyed by wire name, without unset options.

        Sequence values stay lists so that ``requests`` encodes them as
        repeated keys (``query_indicator=A&query_indicator=B``).
        """
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class PageRequest(QueryModel):
    """Offset/limit paging shared by the sample listings."""

    offset: int | None = Field(default=None, ge=0, description="List offset")
    limit: int | None = Field(default=None, ge=1, le=100, description="Page size")


__all__ = [
    "ApiDateTime",
    "ApiModel",
    "PageRequest",
    "QueryModel",
    "WireEnum",
    "normalize_timestamp",
]
