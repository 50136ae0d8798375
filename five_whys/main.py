"""Process entry point: configure logging and serve the API with uvicorn."""

import uvicorn

from five_whys.config import get_settings
from five_whys.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def run() -> None:
    """Start the API server using configured host and port."""
    settings = get_settings()
    log_config = settings.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )

    logger.info(
        "server_starting",
        host=settings.api.host,
        port=settings.api.port,
    )

    uvicorn.run(
        "five_whys.api.app:app",
        host=settings.api.host,
        port=settings.api.port,
        log_level=log_config.level.lower(),
    )


if __name__ == "__main__":
    run()
