from __future__ import annotations

"""Site diagnostics schemas."""

from typing import Any, List, Optional

from pydantic import Field, model_validator

from .common import ApiDateTime, ApiModel, WireEnum


class DiagnosticSeverity(WireEnum):
    FATAL = "FATAL"
    CRITICAL = "CRITICAL"
    POSSIBLE_PROBLEM = "POSSIBLE_PROBLEM"
    RECOMMENDATION = "RECOMMENDATION"
    WARNING = "WARNING"
    INFO = "INFO"


class DiagnosticItem(ApiModel):
    item_type: str
    severity: DiagnosticSeverity
    description: Optional[str] = None
    state: Optional[str] = Field(default=None, description="PRESENT, ABSENT or NOT_APPLICABLE")
    last_state_update: Optional[ApiDateTime] = None


class DiagnosticsResponse(ApiModel):
    items: List[DiagnosticItem] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _problems_to_items(cls, data: Any) -> Any:
        # {"problems": {"NO_SITEMAPS": {"severity": ..., "state": ...}}}
        if isinstance(data, dict) and "items" not in data and isinstance(data.get("problems"), dict):
            items = []
            for item_type, problem in data["problems"].items():
                entry = dict(problem or {})
                entry["item_type"] = item_type
                items.append(entry)
            return {"items": items}
        return data

    def present(self) -> List[DiagnosticItem]:
        """Items whose problem is currently present (or whose state is unknown)."""
        return [item for item in self.items if item.state in (None, "PRESENT")]


__all__ = ["DiagnosticItem", "DiagnosticSeverity", "DiagnosticsResponse"]
