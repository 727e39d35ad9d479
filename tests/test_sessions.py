"""Tests for PaymentSessionStore, including eviction."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

from staychill.schemas.payment import PaymentState
from staychill.services.payment import PaymentFlow
from staychill.sessions import PaymentSessionStore


def _flow(booking_id: int = 1) -> PaymentFlow:
    return PaymentFlow(AsyncMock(), AsyncMock(), booking_id=booking_id, amount=10.0)


def test_add_and_get():
    store = PaymentSessionStore()
    flow = store.add(_flow())

    assert store.get(flow.session_id) is flow
    assert store.get("missing") is None
    assert len(store) == 1


def test_discard_closes_flow():
    store = PaymentSessionStore()
    flow = store.add(_flow())

    assert store.discard(flow.session_id) is flow
    assert flow.closed is True
    assert store.get(flow.session_id) is None
    assert store.discard(flow.session_id) is None


def test_eviction_removes_oldest_finished_first():
    store = PaymentSessionStore(max_sessions=2)
    old_done = _flow(1)
    old_done.state = PaymentState.succeeded
    old_done.created_at = datetime.now(timezone.utc) - timedelta(minutes=5)
    active = _flow(2)
    store.add(old_done)
    store.add(active)

    newest = store.add(_flow(3))

    assert store.get(old_done.session_id) is None
    assert store.get(active.session_id) is active
    assert store.get(newest.session_id) is newest


def test_eviction_closes_oldest_abandoned_flows():
    store = PaymentSessionStore(max_sessions=2)
    flows = []
    for booking_id in range(1, 6):
        flow = _flow(booking_id)
        flow.state = PaymentState.intent_ready
        flow.client_secret = "pi_1_secret_abc"
        flow.created_at = datetime.now(timezone.utc) + timedelta(seconds=booking_id)
        flows.append(store.add(flow))

    assert len(store) == 2
    assert [store.get(f.session_id) for f in flows[-2:]] == flows[-2:]
    for evicted in flows[:3]:
        assert store.get(evicted.session_id) is None
        assert evicted.closed is True
        assert evicted.client_secret is None


def test_eviction_prefers_finished_over_older_active():
    store = PaymentSessionStore(max_sessions=2)
    active = _flow(1)
    active.created_at = datetime.now(timezone.utc) - timedelta(minutes=10)
    done = _flow(2)
    done.state = PaymentState.intent_failed
    store.add(active)
    store.add(done)

    newest = store.add(_flow(3))

    assert store.get(done.session_id) is None
    assert store.get(active.session_id) is active
    assert active.closed is False
    assert store.get(newest.session_id) is newest
