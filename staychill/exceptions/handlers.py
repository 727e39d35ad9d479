import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import BackendError, PaymentFlowError, PaymentProcessorError, RateLimitError

logger = logging.getLogger(__name__)


async def backend_error_handler(_request: Request, exc: BackendError) -> JSONResponse:
    logger.error("Backend error: %s (status=%s)", exc.message, exc.status_code)
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"detail": exc.message})
    return JSONResponse(
        status_code=502,
        content={"detail": f"Backend error: {exc.message}"},
    )


async def payment_processor_error_handler(
    _request: Request, exc: PaymentProcessorError
) -> JSONResponse:
    logger.error("Payment processor error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Payment processor error: {exc.message}"},
    )


async def payment_flow_error_handler(_request: Request, exc: PaymentFlowError) -> JSONResponse:
    logger.warning("Rejected payment action in state %s: %s", exc.state, exc.message)
    return JSONResponse(
        status_code=409,
        content={"detail": exc.message, "state": exc.state},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )
