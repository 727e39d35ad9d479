import logging

from fastapi import APIRouter, Path

from staychill.dependencies import BackendDep, ViewContextDep
from staychill.exceptions.custom import BackendError
from staychill.mappers.views import booking_detail
from staychill.schemas.views import BookingDetailView

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("/{booking_id}", response_model=BookingDetailView)
async def get_booking_detail(
    backend: BackendDep,
    context: ViewContextDep,
    booking_id: int = Path(gt=0),
) -> BookingDetailView:
    booking = await backend.get_booking(booking_id)

    # The property panel is optional; the booking still renders without it.
    try:
        prop = await backend.get_property(booking.propertyId)
    except BackendError as exc:
        logger.warning("Property %s for booking %s unavailable: %s", booking.propertyId, booking_id, exc.message)
        prop = None

    return booking_detail(booking, prop, context)
