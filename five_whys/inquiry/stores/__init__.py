"""Session stores for inquiry progress."""

from five_whys.inquiry.store import SessionStore, StoreStats
from five_whys.inquiry.stores.inmemory import InMemorySessionStore

__all__ = [
    "SessionStore",
    "StoreStats",
    "InMemorySessionStore",
]
