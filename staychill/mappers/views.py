"""Stateless builders for the view models rendered by the pages."""

from collections.abc import Sequence
from datetime import datetime, timezone

from staychill.routes import (
    DESTINATIONS_ROUTE,
    booking_chat_route,
    booking_detail_route,
    destination_route,
    property_route,
)
from staychill.schemas.backend import Booking, Property
from staychill.schemas.dashboard import DashboardSummary
from staychill.schemas.location import Language, LocationRecord
from staychill.schemas.views import (
    BookingDetailView,
    DashboardCard,
    DashboardView,
    DestinationCard,
    DestinationDetailView,
    DestinationListView,
    PropertyCard,
    StatusDisplay,
    TripProgress,
    ViewContext,
)

BOOKING_STATUSES: dict[str, tuple[str, str, str]] = {
    "confirmed": ("Confirmed", "مؤكد", "bg-green-500"),
    "cancelled": ("Cancelled", "ملغي", "bg-red-500"),
    "pending": ("Pending", "قيد الانتظار", "bg-amber-500"),
}

PAYMENT_STATUSES: dict[str, tuple[str, str, str]] = {
    "paid": ("Paid", "مدفوع", "bg-green-500"),
    "processing": ("Processing", "قيد المعالجة", "bg-blue-500"),
    "failed": ("Unpaid", "غير مدفوع", "bg-red-500"),
    "unpaid": ("Unpaid", "غير مدفوع", "bg-gray-500"),
}

TRIP_STAGES: dict[str, tuple[str, str]] = {
    "upcoming": ("Upcoming", "قادم"),
    "completed": ("Completed", "مكتمل"),
}

DASHBOARD_LABELS: dict[str, tuple[str, str]] = {
    "properties": ("Properties", "العقارات"),
    "revenue": ("Revenue", "الإيرادات"),
    "bookings": ("Bookings", "الحجوزات"),
    "rating": ("Average rating", "متوسط التقييم"),
}


def _pick(pair: tuple[str, str], context: ViewContext) -> str:
    return pair[1] if context.language == Language.ar else pair[0]


def destination_card(record: LocationRecord, context: ViewContext) -> DestinationCard:
    return DestinationCard(
        id=record.id,
        name=record.name(context.language),
        region=record.region(context.language),
        description=record.description(context.language),
        image=record.images[0] if record.images else None,
        best_seasons=list(record.seasons(context.language)),
        route=destination_route(record.id),
    )


def destination_list(
    records: Sequence[LocationRecord], query: str, context: ViewContext
) -> DestinationListView:
    empty = not records
    return DestinationListView(
        query=query,
        language=context.language,
        is_rtl=context.is_rtl,
        results=[destination_card(r, context) for r in records],
        empty=empty,
        clear_query_route=DESTINATIONS_ROUTE if empty and query else None,
    )


def destination_detail(record: LocationRecord, context: ViewContext) -> DestinationDetailView:
    ar = context.language == Language.ar
    return DestinationDetailView(
        id=record.id,
        name=record.name(context.language),
        region=record.region(context.language),
        description=record.description(context.language),
        images=list(record.images),
        best_seasons=list(record.seasons(context.language)),
        neighborhoods=[n.nameAr if ar else n.nameEn for n in record.neighborhoods],
        highlights=[h.titleAr if ar else h.titleEn for h in record.highlights],
        activities=[a.nameAr if ar else a.nameEn for a in record.activities],
        local_tips=[t.tipAr if ar else t.tipEn for t in record.localTips],
        is_rtl=context.is_rtl,
    )


def property_card(prop: Property) -> PropertyCard:
    return PropertyCard(
        id=prop.id,
        title=prop.title,
        location=prop.location,
        price=prop.price,
        image=prop.images[0] if prop.images else None,
        rating=(prop.rating / 10) if prop.rating else None,
        route=property_route(prop.id),
    )


def dashboard_view(
    summary: DashboardSummary,
    properties: Sequence[Property] | None,
    context: ViewContext,
) -> DashboardView:
    cards = [
        DashboardCard(
            key="properties",
            label=_pick(DASHBOARD_LABELS["properties"], context),
            value=str(summary.property_count),
        ),
        DashboardCard(
            key="revenue",
            label=_pick(DASHBOARD_LABELS["revenue"], context),
            value=f"${summary.total_revenue}",
        ),
        DashboardCard(
            key="bookings",
            label=_pick(DASHBOARD_LABELS["bookings"], context),
            value=str(summary.total_bookings),
        ),
        DashboardCard(
            key="rating",
            label=_pick(DASHBOARD_LABELS["rating"], context),
            value=f"{summary.average_rating:.1f}",
        ),
    ]
    return DashboardView(
        summary=summary,
        cards=cards,
        properties=[property_card(p) for p in properties or []],
    )


def booking_status(status: str, context: ViewContext) -> StatusDisplay:
    key = status if status in BOOKING_STATUSES else "pending"
    en, ar, color = BOOKING_STATUSES[key]
    return StatusDisplay(key=key, text=_pick((en, ar), context), color=color)


def payment_status(status: str | None, context: ViewContext) -> StatusDisplay:
    key = status if status in PAYMENT_STATUSES else "unpaid"
    en, ar, color = PAYMENT_STATUSES[key]
    return StatusDisplay(key=key, text=_pick((en, ar), context), color=color)


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def trip_progress(
    check_in: datetime,
    check_out: datetime,
    context: ViewContext,
    now: datetime | None = None,
) -> TripProgress:
    today = _aware(now or datetime.now(timezone.utc))
    start, end = _aware(check_in), _aware(check_out)

    if today < start:
        return TripProgress(stage="upcoming", text=_pick(TRIP_STAGES["upcoming"], context), progress=0)
    if today > end:
        return TripProgress(stage="completed", text=_pick(TRIP_STAGES["completed"], context), progress=100)

    total = (end - start).total_seconds()
    percent = round((today - start).total_seconds() / total * 100) if total else 100
    return TripProgress(stage="active", text=f"{percent}%", progress=percent)


def booking_detail(
    booking: Booking,
    prop: Property | None,
    context: ViewContext,
    now: datetime | None = None,
) -> BookingDetailView:
    return BookingDetailView(
        id=booking.id,
        check_in=booking.checkIn.date().isoformat(),
        check_out=booking.checkOut.date().isoformat(),
        guests=booking.guests,
        status=booking_status(booking.status, context),
        payment_status=payment_status(booking.paymentStatus, context),
        trip_progress=trip_progress(booking.checkIn, booking.checkOut, context, now=now),
        total_amount=booking.totalAmount,
        property=property_card(prop) if prop else None,
        chat_route=booking_chat_route(booking.id),
        detail_route=booking_detail_route(booking.id),
        is_rtl=context.is_rtl,
    )
