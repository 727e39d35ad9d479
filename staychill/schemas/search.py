from datetime import datetime

from pydantic import BaseModel, Field

ALL_LOCATIONS = "All Locations"
DEFAULT_GUEST_COUNT = "1 Person"


class DateRange(BaseModel):
    from_: datetime | None = Field(default=None, alias="from")
    to: datetime | None = None

    model_config = {"populate_by_name": True}

    @property
    def is_complete(self) -> bool:
        return self.from_ is not None and self.to is not None and self.from_ <= self.to


class BookingSearchQuery(BaseModel):
    location: str | None = None
    checkIn: str | None = None
    checkOut: str | None = None
    guests: int | None = None


class SearchRequest(BaseModel):
    location: str = ALL_LOCATIONS
    dateRange: DateRange = DateRange()
    guestCount: str = DEFAULT_GUEST_COUNT


class SearchLink(BaseModel):
    query: str
    route: str


class InitialFilters(BaseModel):
    location: str | None = None
    guestCount: str | None = None


class PropertyFilters(BaseModel):
    location: str | None = None
    propertyType: str = "All Types"
    priceRange: str = "Any Price"
    bedrooms: str = "Any"
    amenities: list[str] = ["Select Amenities"]
    category: str = "All"


class PropertySearch(BaseModel):
    area: str | None = None
    minPrice: int | None = None
    maxPrice: int | None = None
    bedrooms: int | None = None
    amenities: list[str] | None = None
    propertyType: str | None = None
    maxGuests: int | None = None
