from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Property(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    title: str
    location: str = ""
    price: int = 0  # per night
    rating: int | None = 0  # out of 5, times 10 (45 = 4.5)
    reviewCount: int | None = 0
    images: list[str] = []
    description: str | None = None
    area: str | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    maxGuests: int | None = None
    amenities: list[str] = []
    featured: bool | None = False
    isNew: bool | None = False


class Booking(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    propertyId: int
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    checkIn: datetime
    checkOut: datetime
    guests: int = 1
    message: str | None = None
    status: str = "pending"  # pending | confirmed | cancelled
    paymentStatus: str | None = None  # paid | processing | failed
    totalAmount: str | None = None


class PaymentIntentResponse(BaseModel):
    clientSecret: str
