import logging

from fastapi import APIRouter, HTTPException, Response

from staychill.dependencies import BackendDep, ProcessorDep, SessionStoreDep, SettingsDep
from staychill.schemas.payment import (
    ConfirmPaymentRequest,
    OpenPaymentRequest,
    PaymentSessionResponse,
)
from staychill.services.payment import PaymentFlow
from staychill.sessions import PaymentSessionStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments"])


def _to_response(flow: PaymentFlow) -> PaymentSessionResponse:
    return PaymentSessionResponse(
        session_id=flow.session_id,
        booking_id=flow.booking_id,
        amount=flow.amount,
        state=flow.state,
        client_secret=flow.client_secret,
        error=flow.error,
        actions=flow.actions,
        notifications=flow.notifications,
        created_at=flow.created_at,
        finished_at=flow.finished_at,
    )


def _get_flow(store: PaymentSessionStore, session_id: str) -> PaymentFlow:
    flow = store.get(session_id)
    if flow is None:
        raise HTTPException(status_code=404, detail="Payment session not found")
    return flow


@router.get("/config/public")
async def public_config(settings: SettingsDep) -> dict[str, str]:
    return {"stripePublishableKey": settings.stripe_publishable_key}


@router.post("/payments", response_model=PaymentSessionResponse, status_code=201)
async def open_payment(
    request: OpenPaymentRequest,
    backend: BackendDep,
    processor: ProcessorDep,
    store: SessionStoreDep,
) -> PaymentSessionResponse:
    if processor is None:
        raise HTTPException(status_code=503, detail="Payments are not configured")

    booking_id = request.bookingId

    async def _paid() -> None:
        logger.info("Booking %s paid", booking_id)

    flow = store.add(
        PaymentFlow(backend, processor, booking_id, request.amount, on_success=_paid)
    )
    await flow.open()
    return _to_response(flow)


@router.get("/payments/{session_id}", response_model=PaymentSessionResponse)
async def get_payment(session_id: str, store: SessionStoreDep) -> PaymentSessionResponse:
    return _to_response(_get_flow(store, session_id))


@router.post("/payments/{session_id}/confirm", response_model=PaymentSessionResponse)
async def confirm_payment(
    session_id: str,
    request: ConfirmPaymentRequest,
    store: SessionStoreDep,
) -> PaymentSessionResponse:
    flow = _get_flow(store, session_id)
    await flow.submit(request.paymentMethod)
    return _to_response(flow)


@router.delete("/payments/{session_id}", status_code=204)
async def close_payment(session_id: str, store: SessionStoreDep) -> Response:
    if store.discard(session_id) is None:
        raise HTTPException(status_code=404, detail="Payment session not found")
    return Response(status_code=204)
