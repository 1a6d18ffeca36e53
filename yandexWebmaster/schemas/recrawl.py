from __future__ import annotations

"""Recrawl queue schemas."""

from typing import List, Optional

from pydantic import AliasChoices, Field

from .common import ApiDateTime, ApiModel, PageRequest, WireEnum


class RecrawlRequest(ApiModel):
    url: str = Field(..., min_length=1, description="Page to send for recrawl")


class RecrawlResponse(ApiModel):
    task_id: str
    quota_remainder: Optional[int] = None


class GetRecrawlTasksRequest(PageRequest):
    date_from: Optional[ApiDateTime] = None
    date_to: Optional[ApiDateTime] = None


class RecrawlTaskState(WireEnum):
    IN_QUEUE = "IN_QUEUE"
    PROCESSING = "PROCESSING"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class RecrawlTask(ApiModel):
    task_id: str
    url: Optional[str] = None
    state: RecrawlTaskState
    added_date: Optional[ApiDateTime] = Field(
        default=None, validation_alias=AliasChoices("added_date", "added_time")
    )

    @property
    def finished(self) -> bool:
        return self.state in (
            RecrawlTaskState.DONE,
            RecrawlTaskState.COMPLETED,
            RecrawlTaskState.FAILED,
        )


class RecrawlTasksResponse(ApiModel):
    tasks: List[RecrawlTask] = Field(default_factory=list)


class RecrawlQuotaResponse(ApiModel):
    quota: int = Field(..., validation_alias=AliasChoices("quota", "daily_quota"))
    quota_remainder: int


__all__ = [
    "GetRecrawlTasksRequest",
    "RecrawlQuotaResponse",
    "RecrawlRequest",
    "RecrawlResponse",
    "RecrawlTask",
    "RecrawlTaskState",
    "RecrawlTasksResponse",
]
