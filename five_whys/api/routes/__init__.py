"""API route registration."""

from fastapi import APIRouter, FastAPI

from five_whys.observability.logging import get_logger

logger = get_logger(__name__)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all routes."""
    router = APIRouter(prefix="/v1")

    from five_whys.api.routes.five_whys import router as five_whys_router
    from five_whys.api.routes.sessions import router as sessions_router

    router.include_router(five_whys_router, tags=["Five Whys"])
    router.include_router(sessions_router, tags=["Sessions"])

    logger.debug("v1_router_created", routes=["five-whys", "sessions"])

    return router


def register_routes(app: FastAPI, metrics_enabled: bool = True) -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
        metrics_enabled: Whether to expose /metrics
    """
    app.include_router(create_v1_router())

    from five_whys.api.mcp import router as mcp_router
    from five_whys.api.routes.health import metrics_router
    from five_whys.api.routes.health import router as health_router

    app.include_router(mcp_router, tags=["Tools"])
    app.include_router(health_router, tags=["Health"])
    if metrics_enabled:
        app.include_router(metrics_router, tags=["Health"])

    logger.info("routes_registered", metrics_enabled=metrics_enabled)
