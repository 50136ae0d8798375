"""Dependency injection for API routes.

Provides FastAPI dependencies for the session store and inquiry engine.
The store is created once per process from settings and can be
overridden for testing via `app.dependency_overrides`.
"""

from typing import Annotated

from fastapi import Depends

from five_whys.config import Settings, get_settings
from five_whys.inquiry.engine import InquiryEngine
from five_whys.inquiry.store import SessionStore
from five_whys.inquiry.stores.inmemory import InMemorySessionStore
from five_whys.observability.logging import get_logger

logger = get_logger(__name__)

_session_store: SessionStore | None = None


def get_session_store(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SessionStore:
    """Get the process-wide SessionStore instance."""
    global _session_store
    if _session_store is None:
        config = settings.session_store
        _session_store = InMemorySessionStore(
            capacity=config.capacity,
            idle_timeout=config.idle_timeout,
        )
        logger.info(
            "session_store_initialized",
            capacity=config.capacity,
            idle_timeout_seconds=config.idle_timeout_seconds,
        )
    return _session_store


def get_inquiry_engine(
    session_store: Annotated[SessionStore, Depends(get_session_store)],
) -> InquiryEngine:
    """Get an InquiryEngine bound to the session store.

    The engine holds no state of its own, so one is built per request.
    """
    return InquiryEngine(session_store)


# Type aliases for dependency injection
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
InquiryEngineDep = Annotated[InquiryEngine, Depends(get_inquiry_engine)]


def reset_dependencies() -> None:
    """Reset all cached dependencies.

    Used for testing to ensure fresh instances.
    """
    global _session_store

    _session_store = None
    get_settings.cache_clear()
