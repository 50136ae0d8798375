"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, and route registration.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from five_whys import __version__
from five_whys.api.exceptions import FiveWhysAPIError
from five_whys.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from five_whys.api.routes import register_routes
from five_whys.config import Settings, get_settings
from five_whys.observability.logging import get_logger

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app from; loaded from config when omitted

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Five Whys API",
        description="Stateful 5-Whys root cause analysis for conversational agents",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    register_routes(app, metrics_enabled=settings.metrics_enabled)

    logger.info(
        "app_created",
        metrics_enabled=settings.metrics_enabled,
        session_capacity=settings.session_store.capacity,
    )

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(FiveWhysAPIError)
    async def five_whys_api_error_handler(
        request: Request, exc: FiveWhysAPIError
    ) -> JSONResponse:
        """Handle FiveWhysAPIError and its subclasses."""
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            path=request.url.path,
        )

        response = ErrorResponse(
            error=ErrorBody(
                code=exc.error_code,
                message=exc.message,
                details=exc.details,
            )
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=response.model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request body validation errors."""
        logger.warning(
            "validation_error",
            error_count=len(exc.errors()),
            path=request.url.path,
        )

        details = [
            ErrorDetail(
                field=".".join(str(loc) for loc in error["loc"]),
                message=error["msg"],
            )
            for error in exc.errors()
        ]

        response = ErrorResponse(
            error=ErrorBody(
                code=ErrorCode.INVALID_REQUEST,
                message=(
                    "Invalid input format. Expected format for first call: "
                    '{"problem": "your problem statement"}. Expected format for '
                    'subsequent calls: {"sessionId": "session_id", '
                    '"currentReason": "your answer"}'
                ),
                details=details,
            )
        )

        return JSONResponse(
            status_code=400,
            content=response.model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )

        response = ErrorResponse(
            error=ErrorBody(
                code=ErrorCode.INTERNAL_ERROR,
                message="An unexpected error occurred",
            )
        )

        return JSONResponse(
            status_code=500,
            content=response.model_dump(mode="json"),
        )

    logger.debug("exception_handlers_registered")


# Create the app instance for uvicorn
app = create_app()
