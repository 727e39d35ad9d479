"""Pure functions translating search form state into query strings and payloads.

No I/O. The hero search form, the listing page and the backend search
endpoint all go through here.
"""

import logging
from datetime import datetime, timezone
from urllib.parse import parse_qs, urlencode

from staychill.schemas.search import (
    ALL_LOCATIONS,
    DEFAULT_GUEST_COUNT,
    BookingSearchQuery,
    DateRange,
    InitialFilters,
    PropertyFilters,
    PropertySearch,
)

logger = logging.getLogger(__name__)

PRICE_RANGES: dict[str, tuple[int, int | None]] = {
    "$0 - $100": (0, 100),
    "$100 - $200": (100, 200),
    "$200 - $300": (200, 300),
    "$300+": (300, None),
}

# Category shortcut → (extra amenity, property type)
CATEGORIES: dict[str, tuple[str | None, str | None]] = {
    "Desert": ("Desert View", None),
    "Beachfront": ("Beachfront", None),
    "Lake": ("Lake View", None),
    "Cabins": (None, "Cabin"),
    "Treehouses": (None, "Treehouse"),
}

AMENITIES_PLACEHOLDER = "Select Amenities"


def to_iso_timestamp(value: datetime) -> str:
    """UTC ISO-8601 with millisecond precision, e.g. 2024-06-01T00:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_guest_count(guest_count: str | None) -> int | None:
    """Extract the number from a display string like "2 People" or "4+ People".

    Returns None when the leading token is not a positive integer.
    """
    if not guest_count:
        return None
    token = guest_count.strip().split(" ")[0].rstrip("+")
    if not token.isdigit():
        logger.debug("Ignoring malformed guest count: %r", guest_count)
        return None
    number = int(token)
    return number if number > 0 else None


def format_guest_count(guests: int) -> str:
    return DEFAULT_GUEST_COUNT if guests == 1 else f"{guests} People"


def build_search_query(
    location: str | None,
    date_range: DateRange | None,
    guest_count: str | None,
) -> BookingSearchQuery:
    query = BookingSearchQuery()

    if location and location != ALL_LOCATIONS:
        query.location = location

    if date_range and date_range.is_complete:
        query.checkIn = to_iso_timestamp(date_range.from_)
        query.checkOut = to_iso_timestamp(date_range.to)

    if guest_count and guest_count != DEFAULT_GUEST_COUNT:
        query.guests = parse_guest_count(guest_count)

    return query


def build_search_params(
    location: str | None,
    date_range: DateRange | None,
    guest_count: str | None,
) -> str:
    query = build_search_query(location, date_range, guest_count)
    return urlencode(query.model_dump(exclude_none=True), safe=":")


def parse_search_params(query: str) -> InitialFilters:
    """Seed the listing page filters from a search-results query string."""
    values = parse_qs(query.lstrip("?"))
    location = values.get("location", [None])[0] or None

    guest_count = None
    raw_guests = values.get("guests", [None])[0]
    if raw_guests and raw_guests.isdigit() and int(raw_guests) > 0:
        guest_count = format_guest_count(int(raw_guests))

    return InitialFilters(location=location, guestCount=guest_count)


def build_property_search(filters: PropertyFilters) -> PropertySearch:
    search = PropertySearch()

    if filters.location and filters.location != ALL_LOCATIONS:
        search.area = filters.location

    if filters.bedrooms and filters.bedrooms != "Any":
        token = filters.bedrooms.replace("+", "")
        if token.isdigit():
            search.bedrooms = int(token)

    if filters.priceRange in PRICE_RANGES:
        search.minPrice, search.maxPrice = PRICE_RANGES[filters.priceRange]

    if filters.propertyType and filters.propertyType != "All Types":
        search.propertyType = filters.propertyType

    amenities = [] if AMENITIES_PLACEHOLDER in filters.amenities else list(filters.amenities)

    if filters.category in CATEGORIES:
        amenity, property_type = CATEGORIES[filters.category]
        if amenity:
            amenities.append(amenity)
        if property_type:
            search.propertyType = property_type

    if amenities:
        search.amenities = amenities

    return search
