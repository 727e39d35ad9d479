"""Payment flow for a single booking: intent, card confirmation, status patch.

One ``PaymentFlow`` backs one open payment modal. Steps run strictly in
order: confirmation never starts without a client secret, and the success
callback never fires before the booking's payment status is patched.
"""

import logging
import uuid
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Protocol

from staychill.exceptions.custom import (
    BackendError,
    PaymentFlowError,
    PaymentProcessorError,
    RateLimitError,
)
from staychill.schemas.payment import ConfirmationResult, PaymentState, Toast
from staychill.services.backend import INTENT_FALLBACK_MESSAGE, BackendService

logger = logging.getLogger(__name__)

PAID = "paid"
GENERIC_PAYMENT_ERROR = "Payment failed. Please try again."
CARD_ERROR_FALLBACK = "An error occurred during payment processing"
UNEXPECTED_ERROR = "An unexpected error occurred"
STATUS_UPDATE_ERROR = (
    "Your payment was received but the booking could not be updated. "
    "Please try again to finish confirming it."
)

TERMINAL_STATES = (PaymentState.succeeded, PaymentState.intent_failed)

SuccessCallback = Callable[[], Awaitable[None]]


class PaymentProcessor(Protocol):
    async def confirm_card_payment(
        self, client_secret: str, payment_method: str
    ) -> ConfirmationResult: ...


class PaymentFlow:
    def __init__(
        self,
        backend: BackendService,
        processor: PaymentProcessor,
        booking_id: int,
        amount: float,
        on_success: SuccessCallback | None = None,
    ) -> None:
        self.session_id = uuid.uuid4().hex[:12]
        self.booking_id = booking_id
        self.amount = amount
        self.state = PaymentState.idle
        self.client_secret: str | None = None
        self.error: str | None = None
        self.notifications: list[Toast] = []
        self.created_at = datetime.now(timezone.utc)
        self.finished_at: datetime | None = None
        self.closed = False
        self._backend = backend
        self._processor = processor
        self._on_success = on_success
        # Set once the processor reports success; later submits only retry the patch.
        self._charged_intent_id: str | None = None

    @property
    def actions(self) -> list[str]:
        if self.state in (PaymentState.intent_ready, PaymentState.failed):
            return ["submit", "cancel"]
        if self.state == PaymentState.processing_payment:
            return []
        return ["close"]

    @property
    def is_finished(self) -> bool:
        return self.closed or self.state in TERMINAL_STATES

    def _transition(self, state: PaymentState) -> None:
        logger.info(
            "Payment %s (booking %s): %s -> %s",
            self.session_id, self.booking_id, self.state, state,
        )
        self.state = state
        if state in TERMINAL_STATES:
            self.finished_at = datetime.now(timezone.utc)

    def _notify(self, title: str, description: str) -> None:
        self.notifications.append(Toast(title=title, description=description))

    async def open(self) -> None:
        """Request a payment intent for the booking."""
        if self.state != PaymentState.idle or self.closed:
            raise PaymentFlowError("Payment already started", state=self.state)
        if self.booking_id <= 0:
            logger.warning("Not opening payment for invalid booking id %s", self.booking_id)
            return

        self._transition(PaymentState.requesting_intent)
        try:
            secret = await self._backend.create_payment_intent(self.booking_id, self.amount)
        except BackendError as exc:
            self._fail_intent(exc.message or INTENT_FALLBACK_MESSAGE)
            return
        except RateLimitError:
            self._fail_intent(INTENT_FALLBACK_MESSAGE)
            return

        if self.closed:
            return
        self.client_secret = secret
        self._transition(PaymentState.intent_ready)

    def _fail_intent(self, message: str) -> None:
        if self.closed:
            return
        logger.error("Payment intent for booking %s failed: %s", self.booking_id, message)
        self.error = message
        self._notify("Payment initialization failed", message)
        self._transition(PaymentState.intent_failed)

    async def submit(self, payment_method: str) -> None:
        if self.closed:
            raise PaymentFlowError("Payment was closed", state=self.state)
        if self.state == PaymentState.processing_payment:
            raise PaymentFlowError("Payment is already processing", state=self.state)
        if self.state not in (PaymentState.intent_ready, PaymentState.failed):
            raise PaymentFlowError(f"Cannot submit payment while {self.state}", state=self.state)

        self._transition(PaymentState.processing_payment)
        self.error = None

        if self._charged_intent_id is None:
            try:
                result = await self._processor.confirm_card_payment(
                    self.client_secret, payment_method
                )
            except PaymentProcessorError as exc:
                self._fail_payment(exc.message or UNEXPECTED_ERROR, notify=True)
                return

            if result.error is not None:
                self._fail_payment(result.error or CARD_ERROR_FALLBACK)
                return
            if result.paymentIntent is None or result.paymentIntent.status != "succeeded":
                self._fail_payment(GENERIC_PAYMENT_ERROR)
                return
            self._charged_intent_id = result.paymentIntent.id

        await self._record_payment()

    async def _record_payment(self) -> None:
        try:
            await self._backend.update_payment_status(
                self.booking_id, PAID, self._charged_intent_id
            )
        except (BackendError, RateLimitError) as exc:
            logger.error(
                "Charge %s succeeded but booking %s status update failed: %s",
                self._charged_intent_id, self.booking_id, exc,
            )
            self._fail_payment(STATUS_UPDATE_ERROR, notify=True)
            return

        if self.closed:
            logger.info("Payment %s finished after close; skipping callback", self.session_id)
            return
        self._transition(PaymentState.succeeded)
        if self._on_success is not None:
            await self._on_success()

    def _fail_payment(self, message: str, notify: bool = False) -> None:
        self.error = message
        if notify:
            self._notify("Payment failed", message)
        if not self.closed:
            self._transition(PaymentState.failed)

    def close(self) -> None:
        """Discard the secret and any in-flight state. No backend call is made."""
        if self.closed:
            return
        logger.info("Payment %s closed in state %s", self.session_id, self.state)
        self.closed = True
        self.client_secret = None
        if self.state != PaymentState.succeeded:
            self.finished_at = datetime.now(timezone.utc)
