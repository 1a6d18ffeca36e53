from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .common import ApiDateTime, ApiModel


class ImportantUrl(ApiModel):
    url: str
    priority: Optional[int] = None
    status: Optional[str] = None
    update_date: Optional[ApiDateTime] = None
    change_indicators: List[str] = Field(default_factory=list)


class ImportantUrlsResponse(ApiModel):
    urls: List[ImportantUrl] = Field(default_factory=list)


class ImportantUrlHistoryResponse(ApiModel):
    history: List[ImportantUrl] = Field(default_factory=list)


__all__ = ["ImportantUrl", "ImportantUrlHistoryResponse", "ImportantUrlsResponse"]
