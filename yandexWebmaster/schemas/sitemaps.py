from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .common import ApiDateTime, ApiModel, PageRequest, QueryModel


class GetSitemapsRequest(QueryModel):
    parent_id: Optional[str] = Field(default=None, description="List children of this sitemap index")
    limit: Optional[int] = Field(default=None, ge=1, le=100)
    from_: Optional[str] = Field(
        default=None, alias="from", description="sitemap_id to continue listing from"
    )


class SitemapInfo(ApiModel):
    sitemap_id: str
    sitemap_url: str
    last_access_date: Optional[ApiDateTime] = None
    urls_count: Optional[int] = None
    errors_count: Optional[int] = None
    children_count: Optional[int] = None
    sources: List[str] = Field(default_factory=list, description="e.g. ROBOTS_TXT, WEBMASTER")
    sitemap_type: Optional[str] = None


class SitemapsResponse(ApiModel):
    sitemaps: List[SitemapInfo] = Field(default_factory=list)


class GetUserSitemapsRequest(PageRequest):
    pass


class UserSitemapInfo(ApiModel):
    sitemap_id: str
    sitemap_url: str
    added_date: Optional[ApiDateTime] = None


class UserSitemapsResponse(ApiModel):
    sitemaps: List[UserSitemapInfo] = Field(default_factory=list)
    count: Optional[int] = None


class AddSitemapRequest(ApiModel):
    url: str = Field(..., min_length=1)


class AddSitemapResponse(ApiModel):
    sitemap_id: str


__all__ = [
    "AddSitemapRequest",
    "AddSitemapResponse",
    "GetSitemapsRequest",
    "GetUserSitemapsRequest",
    "SitemapInfo",
    "SitemapsResponse",
    "UserSitemapInfo",
    "UserSitemapsResponse",
]
