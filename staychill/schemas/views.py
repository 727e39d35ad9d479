from __future__ import annotations

from pydantic import BaseModel

from staychill.schemas.dashboard import DashboardSummary
from staychill.schemas.location import Language


class ViewContext(BaseModel):
    language: Language = Language.en

    @property
    def is_rtl(self) -> bool:
        return self.language == Language.ar


class DestinationCard(BaseModel):
    id: str
    name: str
    region: str
    description: str
    image: str | None = None
    best_seasons: list[str] = []
    route: str


class DestinationListView(BaseModel):
    query: str
    language: Language
    is_rtl: bool
    results: list[DestinationCard]
    empty: bool
    clear_query_route: str | None = None


class DestinationDetailView(BaseModel):
    id: str
    name: str
    region: str
    description: str
    images: list[str]
    best_seasons: list[str]
    neighborhoods: list[str]
    highlights: list[str]
    activities: list[str]
    local_tips: list[str]
    is_rtl: bool


class PropertyCard(BaseModel):
    id: int
    title: str
    location: str
    price: int
    image: str | None = None
    rating: float | None = None
    route: str


class DashboardCard(BaseModel):
    key: str
    label: str
    value: str


class DashboardView(BaseModel):
    summary: DashboardSummary
    cards: list[DashboardCard]
    properties: list[PropertyCard]


class StatusDisplay(BaseModel):
    key: str
    text: str
    color: str


class TripProgress(BaseModel):
    stage: str  # "upcoming" | "active" | "completed"
    text: str
    progress: int


class BookingDetailView(BaseModel):
    id: int
    check_in: str
    check_out: str
    guests: int
    status: StatusDisplay
    payment_status: StatusDisplay
    trip_progress: TripProgress
    total_amount: str | None = None
    property: PropertyCard | None = None
    chat_route: str
    detail_route: str
    is_rtl: bool
