from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, Field

from .common import ApiDateTime, ApiModel


class BrokenLink(ApiModel):
    source_url: str
    destination_url: str
    last_check: Optional[ApiDateTime] = Field(
        default=None, validation_alias=AliasChoices("last_check", "discovery_date")
    )


class BrokenLinksResponse(ApiModel):
    samples: List[BrokenLink] = Field(default_factory=list)
    count: Optional[int] = None


class ExternalLink(ApiModel):
    source_url: str
    destination_url: str
    discovered_date: Optional[ApiDateTime] = Field(
        default=None, validation_alias=AliasChoices("discovered_date", "discovery_date")
    )


class ExternalLinksResponse(ApiModel):
    samples: List[ExternalLink] = Field(default_factory=list)
    count: Optional[int] = None


__all__ = ["BrokenLink", "BrokenLinksResponse", "ExternalLink", "ExternalLinksResponse"]
