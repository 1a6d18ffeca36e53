from __future__ import annotations

"""Site ownership verification schemas."""

from typing import List, Optional

from pydantic import Field

from .common import ApiDateTime, ApiModel, WireEnum


class VerificationState(WireEnum):
    NONE = "NONE"
    VERIFIED = "VERIFIED"
    IN_PROGRESS = "IN_PROGRESS"
    VERIFICATION_FAILED = "VERIFICATION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ExplicitVerificationType(WireEnum):
    """Methods a user can start explicitly."""

    DNS = "DNS"
    META_TAG = "META_TAG"
    HTML_FILE = "HTML_FILE"


class VerificationType(WireEnum):
    AUTO = "AUTO"  # deprecated, *.narod.ru only
    DELEGATED = "DELEGATED"
    PDD = "PDD"
    TXT_FILE = "TXT_FILE"
    DNS = "DNS"
    META_TAG = "META_TAG"
    HTML_FILE = "HTML_FILE"


class VerificationFailReason(WireEnum):
    DELEGATION_CANCELLED = "DELEGATION_CANCELLED"
    DNS_RECORD_NOT_FOUND = "DNS_RECORD_NOT_FOUND"
    META_TAG_NOT_FOUND = "META_TAG_NOT_FOUND"
    WRONG_HTML_PAGE_CONTENT = "WRONG_HTML_PAGE_CONTENT"
    PDD_VERIFICATION_CANCELLED = "PDD_VERIFICATION_CANCELLED"


class FailInfo(ApiModel):
    message: str
    reason: VerificationFailReason


class HostVerificationResponse(ApiModel):
    verification_state: VerificationState
    verification_type: VerificationType
    verification_uin: str = Field(..., description="Token for DNS, meta tag and HTML file checks")
    applicable_verifiers: List[ExplicitVerificationType] = Field(default_factory=list)


class HostVerificationStatusResponse(HostVerificationResponse):
    latest_verification_time: Optional[ApiDateTime] = Field(
        default=None, description="Time of the last check unless the state is NONE"
    )
    fail_info: Optional[FailInfo] = None


class Owner(ApiModel):
    user_login: str
    verification_uin: str
    verification_type: VerificationType
    verification_date: Optional[ApiDateTime] = None


class OwnersResponse(ApiModel):
    users: List[Owner] = Field(default_factory=list)


__all__ = [
    "ExplicitVerificationType",
    "FailInfo",
    "HostVerificationResponse",
    "HostVerificationStatusResponse",
    "Owner",
    "OwnersResponse",
    "VerificationFailReason",
    "VerificationState",
    "VerificationType",
]
