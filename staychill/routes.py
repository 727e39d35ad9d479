LISTING_ROUTE = "/properties"
DESTINATIONS_ROUTE = "/destinations"


def search_results_route(query: str) -> str:
    return f"{LISTING_ROUTE}?{query}" if query else LISTING_ROUTE


def property_route(property_id: int) -> str:
    return f"/property/{property_id}"


def destination_route(location_id: str) -> str:
    return f"{DESTINATIONS_ROUTE}/{location_id}"


def booking_detail_route(booking_id: int) -> str:
    return f"/bookings/{booking_id}"


def booking_chat_route(booking_id: int) -> str:
    return f"/bookings/{booking_id}/chat"
