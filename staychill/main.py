import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from staychill.config import Settings
from staychill.exceptions.custom import (
    BackendError,
    PaymentFlowError,
    PaymentProcessorError,
    RateLimitError,
)
from staychill.exceptions.handlers import (
    backend_error_handler,
    payment_flow_error_handler,
    payment_processor_error_handler,
    rate_limit_error_handler,
)
from staychill.routers.bookings import router as bookings_router
from staychill.routers.dashboard import router as dashboard_router
from staychill.routers.destinations import router as destinations_router
from staychill.routers.payments import router as payments_router
from staychill.routers.search import router as search_router
from staychill.services.backend import BackendService
from staychill.services.processor import StripeProcessor, get_stripe_client
from staychill.sessions import PaymentSessionStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        app.state.settings = settings
        app.state.backend_service = BackendService(client, settings.backend_base_url)
        payment_processor: StripeProcessor | None = None
        if settings.stripe_secret_key:
            payment_processor = StripeProcessor(get_stripe_client(settings.stripe_secret_key))
        app.state.payment_processor = payment_processor
        app.state.session_store = PaymentSessionStore(settings.max_payment_sessions)

        yield


app = FastAPI(title="Stay Chill", lifespan=lifespan)

app.add_exception_handler(BackendError, backend_error_handler)
app.add_exception_handler(PaymentProcessorError, payment_processor_error_handler)
app.add_exception_handler(PaymentFlowError, payment_flow_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)

app.include_router(destinations_router)
app.include_router(search_router)
app.include_router(dashboard_router)
app.include_router(bookings_router)
app.include_router(payments_router)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}
