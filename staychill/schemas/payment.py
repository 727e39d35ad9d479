from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class PaymentState(StrEnum):
    idle = "idle"
    requesting_intent = "requesting_intent"
    intent_ready = "intent_ready"
    intent_failed = "intent_failed"
    processing_payment = "processing_payment"
    succeeded = "succeeded"
    failed = "failed"


class Toast(BaseModel):
    title: str
    description: str
    variant: str = "destructive"


class ProcessorIntent(BaseModel):
    id: str
    status: str


class ConfirmationResult(BaseModel):
    """Outcome of a card confirmation: either an error message or an intent."""

    error: str | None = None
    paymentIntent: ProcessorIntent | None = None


class OpenPaymentRequest(BaseModel):
    bookingId: int = Field(gt=0)
    amount: float = Field(gt=0)


class ConfirmPaymentRequest(BaseModel):
    paymentMethod: str


class PaymentSessionResponse(BaseModel):
    session_id: str
    booking_id: int
    amount: float
    state: PaymentState
    client_secret: str | None = None
    error: str | None = None
    actions: list[str] = []
    notifications: list[Toast] = []
    created_at: datetime
    finished_at: datetime | None = None
