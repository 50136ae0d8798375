"""In-memory implementation of SessionStore."""

import asyncio
from collections.abc import Callable
from datetime import datetime, timedelta

from five_whys.inquiry.models import InquiryRecord, utc_now
from five_whys.inquiry.store import SessionStore, StoreStats
from five_whys.observability.logging import get_logger
from five_whys.observability.metrics import ACTIVE_SESSIONS, SESSIONS_EVICTED

logger = get_logger(__name__)

DEFAULT_CAPACITY = 100
DEFAULT_IDLE_TIMEOUT = timedelta(minutes=30)


class InMemorySessionStore(SessionStore):
    """Bounded, sliding-expiry session store held in process memory.

    Expiry is lazy: nothing runs on a timer, and idle sessions are only
    dropped when a `put` finds the store at capacity. Until then an
    expired session is still returned by `get`, which also resets its
    idle clock.

    Eviction under capacity pressure first removes every expired session
    other than the one being written. When the write adds a new session
    and the store is still full, the least recently touched ones (ties
    broken by session id) go next until one slot is free. Replacing an
    existing session never displaces a live one.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        idle_timeout: timedelta = DEFAULT_IDLE_TIMEOUT,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._idle_timeout = idle_timeout
        self._clock = clock
        self._records: dict[str, InquiryRecord] = {}
        self._lock = asyncio.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def idle_timeout(self) -> timedelta:
        return self._idle_timeout

    async def put(self, session_id: str, record: InquiryRecord) -> None:
        """Store or replace a record, evicting first if the store is full."""
        async with self._lock:
            now = self._clock()
            if len(self._records) >= self._capacity:
                self._evict(now, session_id)

            stored = record.model_copy(deep=True)
            stored.last_touched = now
            self._records[session_id] = stored
            ACTIVE_SESSIONS.set(len(self._records))

    async def get(self, session_id: str) -> InquiryRecord | None:
        """Get a copy of a record, refreshing its last-touched time."""
        async with self._lock:
            record = self._records.get(session_id)
            if record is None:
                return None
            record.last_touched = self._clock()
            return record.model_copy(deep=True)

    async def delete(self, session_id: str) -> bool:
        """Delete a record."""
        async with self._lock:
            if session_id in self._records:
                del self._records[session_id]
                ACTIVE_SESSIONS.set(len(self._records))
                return True
            return False

    async def exists(self, session_id: str) -> bool:
        """Check membership without refreshing the record."""
        async with self._lock:
            return session_id in self._records

    async def stats(self) -> StoreStats:
        """Current population and capacity."""
        async with self._lock:
            return StoreStats(count=len(self._records), capacity=self._capacity)

    def _evict(self, now: datetime, incoming: str) -> None:
        """Make room for `incoming`. Caller must hold the lock."""
        expired = [
            session_id
            for session_id, record in self._records.items()
            if session_id != incoming
            and now - record.last_touched > self._idle_timeout
        ]
        for session_id in expired:
            del self._records[session_id]

        overflow: list[str] = []
        if incoming not in self._records and len(self._records) >= self._capacity:
            by_age = sorted(
                self._records.items(),
                key=lambda item: (item[1].last_touched, item[0]),
            )
            to_remove = len(self._records) - self._capacity + 1
            overflow = [session_id for session_id, _ in by_age[:to_remove]]
            for session_id in overflow:
                del self._records[session_id]

        if expired:
            SESSIONS_EVICTED.labels(reason="expired").inc(len(expired))
        if overflow:
            SESSIONS_EVICTED.labels(reason="capacity").inc(len(overflow))
        if not expired and not overflow:
            return

        logger.info(
            "sessions_evicted",
            expired=len(expired),
            least_recently_used=len(overflow),
            remaining=len(self._records),
            capacity=self._capacity,
        )
