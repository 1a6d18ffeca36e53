from __future__ import annotations

"""User and site (host) schemas."""

from typing import List, Optional

from pydantic import Field

from .common import ApiModel, WireEnum
from .verification import VerificationType


class UserResponse(ApiModel):
    user_id: int = Field(..., description="ID required by every other Webmaster resource")


class HostDataStatus(WireEnum):
    NOT_INDEXED = "NOT_INDEXED"
    NOT_LOADED = "NOT_LOADED"
    OK = "OK"


class HostInfo(ApiModel):
    host_id: str = Field(..., description="Site identifier, e.g. https:example.com:443")
    ascii_host_url: str = Field(..., description="ASCII-encoded site URL")
    unicode_host_url: str = Field(..., description="UTF-8 encoded site URL")
    verified: bool = Field(..., description="Ownership verification status")
    main_mirror: Optional[HostInfo] = Field(default=None, description="Primary site address")


class FullHostInfo(HostInfo):
    host_data_status: Optional[HostDataStatus] = Field(
        default=None, description="Indexing status; shown for verified sites only"
    )
    host_display_name: Optional[str] = None


class HostsResponse(ApiModel):
    hosts: List[HostInfo] = Field(default_factory=list)


class AddHostRequest(ApiModel):
    host_url: str = Field(..., min_length=1)
    verification_type: Optional[VerificationType] = None


class AddHostResponse(ApiModel):
    host_id: str


__all__ = [
    "AddHostRequest",
    "AddHostResponse",
    "FullHostInfo",
    "HostDataStatus",
    "HostInfo",
    "HostsResponse",
    "UserResponse",
]
