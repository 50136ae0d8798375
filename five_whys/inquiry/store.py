"""SessionStore abstract interface."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from five_whys.inquiry.models import InquiryRecord


class StoreStats(BaseModel):
    """Population snapshot of a session store."""

    count: int
    capacity: int


class SessionStore(ABC):
    """Abstract interface for inquiry session storage.

    Implementations bound the number of live sessions and expire idle
    ones. Records handed out by `get` are copies; changes only take
    effect through `put`.
    """

    @abstractmethod
    async def put(self, session_id: str, record: InquiryRecord) -> None:
        """Store or replace a record, refreshing its last-touched time."""
        pass

    @abstractmethod
    async def get(self, session_id: str) -> InquiryRecord | None:
        """Get a record by session id, refreshing its last-touched time."""
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> bool:
        """Delete a record, returning whether it existed."""
        pass

    @abstractmethod
    async def exists(self, session_id: str) -> bool:
        """Check whether a session id is live without touching it."""
        pass

    @abstractmethod
    async def stats(self) -> StoreStats:
        """Current population and capacity."""
        pass
