"""Observability schemas for requests sent to the OANDA API."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field


class RequestRecord(BaseModel):
    """Record of a single HTTP round trip for latency and error tracking."""

    request_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    method: str = ""
    path: str = ""  # "/v3/accounts/001-001/orders"
    environment: str = ""  # "live", "practice"
    status_code: int | None = None
    latency_ms: float = 0.0
    success: bool = True
    error_message: str = ""
