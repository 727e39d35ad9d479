"""Tests for the PaymentFlow state machine."""

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest
import respx
from httpx import Response

from staychill.exceptions.custom import BackendError, PaymentFlowError, PaymentProcessorError
from staychill.schemas.payment import ConfirmationResult, PaymentState, ProcessorIntent
from staychill.services.backend import BackendService
from staychill.services.payment import (
    GENERIC_PAYMENT_ERROR,
    STATUS_UPDATE_ERROR,
    PaymentFlow,
)

SECRET = "pi_1_secret_abc"
BOOKING = {
    "id": 7,
    "propertyId": 3,
    "name": "Mona",
    "email": "mona@example.com",
    "phone": "01000000000",
    "checkIn": "2024-06-01T00:00:00.000Z",
    "checkOut": "2024-06-10T00:00:00.000Z",
    "guests": 2,
    "status": "confirmed",
    "paymentStatus": "paid",
    "totalAmount": "1620.00",
}


def _succeeded(intent_id: str = "pi_1") -> ConfirmationResult:
    return ConfirmationResult(paymentIntent=ProcessorIntent(id=intent_id, status="succeeded"))


@pytest.fixture
def backend():
    backend = AsyncMock()
    backend.create_payment_intent.return_value = SECRET
    return backend


@pytest.fixture
def processor():
    processor = AsyncMock()
    processor.confirm_card_payment.return_value = _succeeded()
    return processor


@pytest.fixture
def on_success():
    return AsyncMock()


@pytest.fixture
def flow(backend, processor, on_success):
    return PaymentFlow(backend, processor, booking_id=7, amount=1620.0, on_success=on_success)


# --- open ---


async def test_open_requests_intent(flow, backend):
    assert flow.state == PaymentState.idle

    await flow.open()

    backend.create_payment_intent.assert_awaited_once_with(7, 1620.0)
    assert flow.state == PaymentState.intent_ready
    assert flow.client_secret == SECRET
    assert flow.actions == ["submit", "cancel"]


async def test_open_invalid_booking_stays_idle(backend, processor):
    flow = PaymentFlow(backend, processor, booking_id=0, amount=10.0)

    await flow.open()

    assert flow.state == PaymentState.idle
    backend.create_payment_intent.assert_not_awaited()


async def test_intent_failure_shows_server_message(flow, backend, processor):
    backend.create_payment_intent.side_effect = BackendError("card_declined", status_code=400)

    await flow.open()

    assert flow.state == PaymentState.intent_failed
    assert flow.error == "card_declined"
    assert flow.actions == ["close"]
    assert flow.notifications[0].title == "Payment initialization failed"
    assert flow.notifications[0].description == "card_declined"

    with pytest.raises(PaymentFlowError):
        await flow.submit("pm_1")
    processor.confirm_card_payment.assert_not_awaited()


async def test_intent_failure_without_message_uses_fallback(flow, backend):
    backend.create_payment_intent.side_effect = BackendError("")

    await flow.open()

    assert flow.error == "Failed to initialize payment"


async def test_open_twice_rejected(flow):
    await flow.open()
    with pytest.raises(PaymentFlowError):
        await flow.open()


# --- submit ---


async def test_submit_before_intent_rejected(flow, processor):
    with pytest.raises(PaymentFlowError):
        await flow.submit("pm_1")
    processor.confirm_card_payment.assert_not_awaited()


async def test_success_patches_once_before_callback(flow, backend, on_success):
    order: list[str] = []
    backend.update_payment_status.side_effect = lambda *a: order.append("patch")
    on_success.side_effect = lambda: order.append("callback")
    await flow.open()

    await flow.submit("pm_card_visa")

    assert flow.state == PaymentState.succeeded
    backend.update_payment_status.assert_awaited_once_with(7, "paid", "pi_1")
    assert order == ["patch", "callback"]
    assert flow.finished_at is not None
    assert flow.actions == ["close"]


async def test_card_error_is_retryable_with_same_secret(flow, processor, on_success, backend):
    processor.confirm_card_payment.return_value = ConfirmationResult(error="Your card was declined.")
    await flow.open()

    await flow.submit("pm_bad")

    assert flow.state == PaymentState.failed
    assert flow.error == "Your card was declined."
    assert flow.actions == ["submit", "cancel"]
    backend.update_payment_status.assert_not_awaited()
    on_success.assert_not_awaited()

    processor.confirm_card_payment.return_value = _succeeded()
    await flow.submit("pm_good")

    assert flow.state == PaymentState.succeeded
    assert processor.confirm_card_payment.await_args_list[1].args == (SECRET, "pm_good")
    backend.create_payment_intent.assert_awaited_once()


async def test_other_status_fails_generic(flow, processor, backend):
    processor.confirm_card_payment.return_value = ConfirmationResult(
        paymentIntent=ProcessorIntent(id="pi_1", status="requires_action")
    )
    await flow.open()

    await flow.submit("pm_1")

    assert flow.state == PaymentState.failed
    assert flow.error == GENERIC_PAYMENT_ERROR
    backend.update_payment_status.assert_not_awaited()


async def test_processor_exception_fails_with_notification(flow, processor):
    processor.confirm_card_payment.side_effect = PaymentProcessorError("Network down")
    await flow.open()

    await flow.submit("pm_1")

    assert flow.state == PaymentState.failed
    assert flow.error == "Network down"
    assert flow.notifications[-1].title == "Payment failed"


async def test_status_patch_failure_never_recharges(flow, backend, processor, on_success):
    backend.update_payment_status.side_effect = BackendError("boom", status_code=500)
    await flow.open()

    await flow.submit("pm_1")

    assert flow.state == PaymentState.failed
    assert flow.error == STATUS_UPDATE_ERROR
    on_success.assert_not_awaited()

    backend.update_payment_status.side_effect = None
    await flow.submit("pm_1")

    assert flow.state == PaymentState.succeeded
    processor.confirm_card_payment.assert_awaited_once()
    assert backend.update_payment_status.await_count == 2
    on_success.assert_awaited_once()


async def test_duplicate_submit_rejected(flow, processor):
    release = asyncio.Event()

    async def _slow_confirm(*_args):
        await release.wait()
        return _succeeded()

    processor.confirm_card_payment.side_effect = _slow_confirm
    await flow.open()

    first = asyncio.create_task(flow.submit("pm_1"))
    await asyncio.sleep(0)
    assert flow.state == PaymentState.processing_payment
    assert flow.actions == []

    with pytest.raises(PaymentFlowError):
        await flow.submit("pm_1")

    release.set()
    await first
    assert flow.state == PaymentState.succeeded
    processor.confirm_card_payment.assert_awaited_once()


# --- close ---


async def test_close_discards_secret_without_backend_call(flow, backend):
    await flow.open()

    flow.close()

    assert flow.closed is True
    assert flow.client_secret is None
    assert flow.is_finished
    backend.update_payment_status.assert_not_awaited()
    with pytest.raises(PaymentFlowError):
        await flow.submit("pm_1")


async def test_close_during_processing_skips_callback(flow, backend, processor, on_success):
    release = asyncio.Event()

    async def _slow_confirm(*_args):
        await release.wait()
        return _succeeded()

    processor.confirm_card_payment.side_effect = _slow_confirm
    await flow.open()

    task = asyncio.create_task(flow.submit("pm_1"))
    await asyncio.sleep(0)
    flow.close()
    release.set()
    await task

    backend.update_payment_status.assert_awaited_once_with(7, "paid", "pi_1")
    on_success.assert_not_awaited()


async def test_close_during_failed_intent_stays_closed(flow, backend):
    release = asyncio.Event()

    async def _slow_intent(*_args):
        await release.wait()
        raise BackendError("boom", status_code=500)

    backend.create_payment_intent.side_effect = _slow_intent

    task = asyncio.create_task(flow.open())
    await asyncio.sleep(0)
    flow.close()
    closed_at = flow.finished_at
    release.set()
    await task

    assert flow.state == PaymentState.requesting_intent
    assert flow.finished_at == closed_at
    assert flow.notifications == []
    assert flow.is_finished


# --- against the HTTP backend ---

BASE = "http://backend.test"
INTENT_URL = f"{BASE}/api/payments/create-payment-intent"
STATUS_URL = f"{BASE}/api/bookings/7/payment-status"


@pytest.fixture
async def http_flow(processor, on_success):
    async with httpx.AsyncClient() as client:
        backend = BackendService(client, BASE)
        yield PaymentFlow(backend, processor, booking_id=7, amount=1620.0, on_success=on_success)


@respx.mock
async def test_rate_limited_intent_fails(http_flow):
    respx.post(INTENT_URL).mock(return_value=Response(429))

    await http_flow.open()

    assert http_flow.state == PaymentState.intent_failed
    assert http_flow.error == "Failed to initialize payment"
    assert http_flow.actions == ["close"]
    assert http_flow.is_finished


@respx.mock
async def test_rate_limited_status_patch_can_be_retried(http_flow, processor, on_success):
    respx.post(INTENT_URL).mock(return_value=Response(200, json={"clientSecret": SECRET}))
    patch = respx.patch(STATUS_URL).mock(
        side_effect=[Response(429), Response(200, json=BOOKING)]
    )
    await http_flow.open()

    await http_flow.submit("pm_1")

    assert http_flow.state == PaymentState.failed
    assert http_flow.error == STATUS_UPDATE_ERROR
    assert http_flow.actions == ["submit", "cancel"]
    on_success.assert_not_awaited()

    await http_flow.submit("pm_1")

    assert http_flow.state == PaymentState.succeeded
    assert patch.call_count == 2
    processor.confirm_card_payment.assert_awaited_once()
    on_success.assert_awaited_once()


@respx.mock
async def test_malformed_status_patch_response_fails(http_flow, processor):
    respx.post(INTENT_URL).mock(return_value=Response(200, json={"clientSecret": SECRET}))
    respx.patch(STATUS_URL).mock(return_value=Response(200, json={"ok": True}))
    await http_flow.open()

    await http_flow.submit("pm_1")

    assert http_flow.state == PaymentState.failed
    assert http_flow.error == STATUS_UPDATE_ERROR
    assert http_flow.notifications[-1].title == "Payment failed"
    processor.confirm_card_payment.assert_awaited_once()
