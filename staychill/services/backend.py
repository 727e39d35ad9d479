import logging

import httpx
from pydantic import ValidationError

from staychill.exceptions.custom import BackendError, RateLimitError
from staychill.schemas.backend import Booking, PaymentIntentResponse, Property
from staychill.schemas.search import PropertySearch

logger = logging.getLogger(__name__)

OWNER_PROPERTIES_PATH = "/api/properties/owner"
PROPERTIES_PATH = "/api/properties"
FEATURED_PROPERTIES_PATH = "/api/properties/featured"
PROPERTY_SEARCH_PATH = "/api/properties/search"
BOOKINGS_PATH = "/api/bookings"
PAYMENT_INTENT_PATH = "/api/payments/create-payment-intent"

INTENT_FALLBACK_MESSAGE = "Failed to initialize payment"


def _error_message(resp: httpx.Response, fallback: str) -> str:
    """Pull the ``error`` field out of a JSON error body, else ``fallback``."""
    try:
        body = resp.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return fallback


class BackendService:
    """Typed client for the listings/bookings REST backend."""

    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def _request(
        self,
        method: str,
        path: str,
        fallback: str,
        **kwargs,
    ) -> httpx.Response:
        try:
            resp = await self._client.request(method, f"{self._base_url}{path}", **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise BackendError(f"{fallback}: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError("Backend")
        if resp.status_code >= 400:
            raise BackendError(_error_message(resp, fallback), status_code=resp.status_code)
        return resp

    def _parse_properties(self, resp: httpx.Response) -> list[Property]:
        try:
            return [Property(**item) for item in resp.json()]
        except (ValueError, TypeError, ValidationError) as exc:
            raise BackendError(f"Malformed property list: {exc}", status_code=resp.status_code) from exc

    async def get_owner_properties(self) -> list[Property]:
        resp = await self._request("GET", OWNER_PROPERTIES_PATH, "Failed to fetch properties")
        return self._parse_properties(resp)

    async def get_properties(self) -> list[Property]:
        resp = await self._request("GET", PROPERTIES_PATH, "Failed to fetch properties")
        return self._parse_properties(resp)

    async def get_featured_properties(self, limit: int = 3) -> list[Property]:
        resp = await self._request(
            "GET",
            FEATURED_PROPERTIES_PATH,
            "Failed to fetch featured properties",
            params={"limit": limit},
        )
        return self._parse_properties(resp)

    async def search_properties(self, search: PropertySearch) -> list[Property]:
        resp = await self._request(
            "POST",
            PROPERTY_SEARCH_PATH,
            "Failed to search properties",
            json=search.model_dump(exclude_none=True),
        )
        return self._parse_properties(resp)

    async def get_property(self, property_id: int) -> Property:
        resp = await self._request(
            "GET", f"{PROPERTIES_PATH}/{property_id}", "Failed to fetch property"
        )
        try:
            return Property(**resp.json())
        except (ValueError, TypeError, ValidationError) as exc:
            raise BackendError(f"Malformed property: {exc}", status_code=resp.status_code) from exc

    async def get_booking(self, booking_id: int) -> Booking:
        resp = await self._request(
            "GET", f"{BOOKINGS_PATH}/{booking_id}", "Failed to fetch booking"
        )
        return self._parse_booking(resp)

    def _parse_booking(self, resp: httpx.Response) -> Booking:
        try:
            return Booking(**resp.json())
        except (ValueError, TypeError, ValidationError) as exc:
            raise BackendError(f"Malformed booking: {exc}", status_code=resp.status_code) from exc

    async def create_payment_intent(self, booking_id: int, amount: float) -> str:
        resp = await self._request(
            "POST",
            PAYMENT_INTENT_PATH,
            INTENT_FALLBACK_MESSAGE,
            json={"bookingId": booking_id, "amount": amount},
        )
        try:
            return PaymentIntentResponse(**resp.json()).clientSecret
        except (ValueError, TypeError, ValidationError) as exc:
            raise BackendError(INTENT_FALLBACK_MESSAGE, status_code=resp.status_code) from exc

    async def update_payment_status(
        self,
        booking_id: int,
        payment_status: str,
        payment_intent_id: str,
    ) -> Booking:
        resp = await self._request(
            "PATCH",
            f"{BOOKINGS_PATH}/{booking_id}/payment-status",
            "Failed to update payment status",
            json={"paymentStatus": payment_status, "paymentIntentId": payment_intent_id},
        )
        logger.info("Booking %s payment status set to %s", booking_id, payment_status)
        return self._parse_booking(resp)
