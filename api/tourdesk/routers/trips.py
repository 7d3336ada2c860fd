"""
Trip Management Endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
import logging

from tourdesk.schemas.common import DeleteResponse, MutationResponse
from tourdesk.schemas.trip import (
    Trip,
    TripCreate,
    TripUpdate,
    TripStatus,
    TripStatusUpdate,
    BookedUser,
)
from tourdesk.services.notifications import StaticConfirmer
from tourdesk.services.registry import StoreRegistry, get_confirmer, get_registry

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[Trip])
async def list_trips(
    status_filter: Optional[str] = Query(None, alias="status", description="Filter by status"),
    stores: StoreRegistry = Depends(get_registry),
):
    """
    List all trips (served from cache, fetched on first use)
    """
    trips = await stores.trips.items()

    if status_filter:
        try:
            wanted = TripStatus.parse(status_filter).value
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown trip status: {status_filter}"
            )
        trips = [trip for trip in trips if trip.status == wanted]

    return trips


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    stores: StoreRegistry = Depends(get_registry),
):
    """
    Create a new trip
    """
    with stores.notifier.scope() as raised:
        result = await stores.trips.create(trip_data)
    logger.info(f"Trip created: {trip_data.destination}")
    return MutationResponse(result=result, notifications=raised)


@router.get("/all/bookings", response_model=List[BookedUser])
async def list_all_trip_bookings(
    stores: StoreRegistry = Depends(get_registry),
):
    """
    Users booked onto any trip
    """
    return await stores.trips.booked_users("all")


@router.get("/{trip_id}/bookings", response_model=List[BookedUser])
async def list_trip_bookings(
    trip_id: str,
    stores: StoreRegistry = Depends(get_registry),
):
    """
    Users booked onto one trip
    """
    return await stores.trips.booked_users(trip_id)


@router.get("/{trip_id}", response_model=Trip)
async def get_trip(
    trip_id: str,
    stores: StoreRegistry = Depends(get_registry),
):
    """
    Get trip details
    """
    return await stores.trips.get(trip_id)


@router.put("/{trip_id}", response_model=MutationResponse)
async def update_trip(
    trip_id: str,
    changes: TripUpdate,
    stores: StoreRegistry = Depends(get_registry),
):
    """
    Save the edit panel
    """
    with stores.notifier.scope() as raised:
        result = await stores.trips.update(trip_id, changes.model_dump(mode="json", exclude_none=True))
    return MutationResponse(result=result, notifications=raised)


@router.put("/{trip_id}/status", response_model=MutationResponse)
async def update_trip_status(
    trip_id: str,
    status_update: TripStatusUpdate,
    stores: StoreRegistry = Depends(get_registry),
):
    """
    Change a trip's status (no confirmation required)
    """
    with stores.notifier.scope() as raised:
        result = await stores.trips.update_status(trip_id, status_update.status)
    logger.info(f"Trip {trip_id} status set to {status_update.status.value}")
    return MutationResponse(result=result, notifications=raised)


@router.delete("/{trip_id}", response_model=DeleteResponse)
async def delete_trip(
    trip_id: str,
    confirmer: StaticConfirmer = Depends(get_confirmer),
    stores: StoreRegistry = Depends(get_registry),
):
    """
    Delete a trip; requires `?confirm=true`
    """
    with stores.notifier.scope() as raised:
        deleted = await stores.trips.delete(trip_id, confirmer)
    return DeleteResponse(deleted=deleted, notifications=raised)
