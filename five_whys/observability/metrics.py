"""Prometheus metrics for Five Whys.

Tracks inquiry step outcomes, errors surfaced to callers, session
evictions and the live session population.
"""

from prometheus_client import Counter, Gauge

# Step outcomes: started, advanced, completed
STEPS = Counter(
    "five_whys_steps_total",
    "Total number of inquiry steps processed",
    labelnames=["outcome"],
)

ERRORS = Counter(
    "five_whys_errors_total",
    "Total number of inquiry steps rejected",
    labelnames=["error_type"],
)

# Eviction reasons: expired, capacity
SESSIONS_EVICTED = Counter(
    "five_whys_sessions_evicted_total",
    "Total number of sessions evicted from the store",
    labelnames=["reason"],
)

ACTIVE_SESSIONS = Gauge(
    "five_whys_active_sessions",
    "Number of sessions currently held by the store",
)
