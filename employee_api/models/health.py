from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class HealthStatus(str, Enum):
    OK = "ok"
    DEGRADED = "degraded"
    CRITICAL = "critical"
    UNKNOWN = "unknown"


class HealthSummaryResponse(BaseModel):
    status: HealthStatus = Field(..., description="Aggregate health classification")
    checked_at: datetime = Field(..., description="Timestamp when the health snapshot was generated (UTC)")
    uptime_seconds: int = Field(..., ge=0, description="Seconds the API has been running")
    version: Optional[str] = Field(None, description="Running service version")


__all__ = [
    "HealthStatus",
    "HealthSummaryResponse",
]
