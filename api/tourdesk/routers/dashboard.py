"""
Dashboard Analytics Endpoints
"""
from fastapi import APIRouter, Depends
import asyncio

from tourdesk.schemas.analytics import DashboardSummary
from tourdesk.services.analytics import build_dashboard
from tourdesk.services.registry import StoreRegistry, get_registry

router = APIRouter()


@router.get("", response_model=DashboardSummary)
async def dashboard_stats(stores: StoreRegistry = Depends(get_registry)):
    """
    Return dashboard statistics derived from the bookings and trips collections
    """
    bookings, trips = await asyncio.gather(stores.bookings.items(), stores.trips.items())
    return build_dashboard(
        bookings,
        trips,
        is_loading=stores.bookings.loading or stores.trips.loading,
    )
