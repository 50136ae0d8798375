"""Session introspection and deletion endpoints."""

from fastapi import APIRouter, Response, status

from five_whys.api.dependencies import SessionStoreDep
from five_whys.api.exceptions import SessionNotFoundError
from five_whys.api.models.session import SessionResponse
from five_whys.inquiry.rendering import session_not_found_message
from five_whys.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/sessions")


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str, session_store: SessionStoreDep) -> SessionResponse:
    """Get the stored progress of an inquiry.

    Reading a session resets its idle timeout, like any other access.
    """
    record = await session_store.get(session_id)
    if record is None:
        raise SessionNotFoundError(session_not_found_message(session_id))
    return SessionResponse.from_record(session_id, record)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, session_store: SessionStoreDep) -> Response:
    """Discard an inquiry."""
    deleted = await session_store.delete(session_id)
    if not deleted:
        raise SessionNotFoundError(session_not_found_message(session_id))

    logger.info("session_deleted", session_id=session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
