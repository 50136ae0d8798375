"""Tests for Prometheus metrics."""

from datetime import timedelta

import pytest
from prometheus_client import REGISTRY

from five_whys.inquiry import InquiryEngine, SessionNotFoundError
from five_whys.inquiry.models import InquiryRecord, StepRequest
from five_whys.inquiry.stores import InMemorySessionStore


def sample(name: str, **labels: str) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestStoreMetrics:
    async def test_capacity_eviction_counted(self, clock):
        store = InMemorySessionStore(capacity=1, clock=clock)
        before = sample("five_whys_sessions_evicted_total", reason="capacity")

        await store.put("a", InquiryRecord(problem="X"))
        await store.put("b", InquiryRecord(problem="Y"))

        assert sample("five_whys_sessions_evicted_total", reason="capacity") == before + 1

    async def test_expired_eviction_counted(self, clock):
        store = InMemorySessionStore(capacity=1, idle_timeout=timedelta(minutes=1), clock=clock)
        before = sample("five_whys_sessions_evicted_total", reason="expired")

        await store.put("a", InquiryRecord(problem="X"))
        clock.advance(minutes=2)
        await store.put("b", InquiryRecord(problem="Y"))

        assert sample("five_whys_sessions_evicted_total", reason="expired") == before + 1

    async def test_active_sessions_gauge(self, clock):
        store = InMemorySessionStore(capacity=5, clock=clock)

        await store.put("a", InquiryRecord(problem="X"))
        await store.put("b", InquiryRecord(problem="Y"))
        await store.delete("a")

        assert sample("five_whys_active_sessions") == 1


class TestEngineMetrics:
    async def test_step_outcomes_counted(self, clock):
        engine = InquiryEngine(InMemorySessionStore(clock=clock))
        started = sample("five_whys_steps_total", outcome="started")
        advanced = sample("five_whys_steps_total", outcome="advanced")

        response = await engine.step(StepRequest(problem="X"))
        await engine.step(StepRequest(session_id=response.session_id, answer="Y"))

        assert sample("five_whys_steps_total", outcome="started") == started + 1
        assert sample("five_whys_steps_total", outcome="advanced") == advanced + 1

    async def test_rejections_counted(self, clock):
        engine = InquiryEngine(InMemorySessionStore(clock=clock))
        before = sample("five_whys_errors_total", error_type="SessionNotFoundError")

        with pytest.raises(SessionNotFoundError):
            await engine.step(StepRequest(session_id="missing"))

        assert sample("five_whys_errors_total", error_type="SessionNotFoundError") == before + 1
