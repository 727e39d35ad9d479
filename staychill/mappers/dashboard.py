from collections.abc import Sequence

from staychill.schemas.backend import Property
from staychill.schemas.dashboard import DashboardSummary

RATING_SCALE = 10


def summarize_properties(properties: Sequence[Property] | None) -> DashboardSummary:
    """Reduce the owner's properties to the four dashboard metrics.

    Revenue is the sum of nightly prices and bookings the sum of review
    counts. The rating figure is the summed rating over the storage scale,
    not a per-property mean.
    """
    if not properties:
        return DashboardSummary()

    rating_sum = sum(p.rating or 0 for p in properties)
    return DashboardSummary(
        property_count=len(properties),
        total_revenue=sum(p.price for p in properties),
        average_rating=round(rating_sum / RATING_SCALE, 1),
        total_bookings=sum(p.reviewCount or 0 for p in properties),
    )
