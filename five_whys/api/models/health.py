"""Health check response."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from five_whys.inquiry.models import utc_now
from five_whys.inquiry.store import StoreStats


class HealthResponse(BaseModel):
    """Body of GET /health.

    The service reports degraded while the session store is full, since
    the next new inquiry will push an existing one out.
    """

    status: Literal["healthy", "degraded"]
    version: str
    sessions: StoreStats
    checked_at: datetime = Field(default_factory=utc_now)
