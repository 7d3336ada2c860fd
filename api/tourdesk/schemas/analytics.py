"""
Dashboard Analytics Schemas
"""
from pydantic import BaseModel
from typing import List

from tourdesk.schemas.booking import Booking

MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


class DemographicEntry(BaseModel):
    """Share of bookings going to one destination"""
    name: str
    count: int
    percentage: int


class MonthlySeries(BaseModel):
    labels: List[str] = MONTH_LABELS
    data: List[int]


class MonthlyStatistics(BaseModel):
    """Bookings ("sales") and trips ("revenue") per calendar month"""
    labels: List[str] = MONTH_LABELS
    sales: List[int]
    revenue: List[int]


class MonthlyProgress(BaseModel):
    """Current month bookings against the target"""
    percentage: float
    current: int
    target: int


class DashboardSummary(BaseModel):
    """Everything the dashboard home page renders"""
    total_customers: int
    total_orders: int
    demographics: List[DemographicEntry]
    monthly_sales: MonthlySeries
    statistics: MonthlyStatistics
    recent_bookings: List[Booking]
    monthly_progress: MonthlyProgress
    is_loading: bool = False
