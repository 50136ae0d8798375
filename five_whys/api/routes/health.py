"""Health check and metrics endpoints."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from five_whys import __version__
from five_whys.api.dependencies import SessionStoreDep
from five_whys.api.models.health import HealthResponse
from five_whys.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()
metrics_router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(session_store: SessionStoreDep) -> HealthResponse:
    """Report service status and session store occupancy."""
    stats = await session_store.stats()
    status = "degraded" if stats.count >= stats.capacity else "healthy"

    logger.debug("health_checked", status=status, sessions=stats.count)

    return HealthResponse(status=status, version=__version__, sessions=stats)


@metrics_router.get("/metrics")
async def get_metrics() -> Response:
    """Get Prometheus metrics in text exposition format."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
