from pydantic import BaseModel


class DashboardSummary(BaseModel):
    property_count: int = 0
    total_revenue: int = 0
    average_rating: float = 0.0
    total_bookings: int = 0
