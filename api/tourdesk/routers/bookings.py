"""
Booking Form Endpoints
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from tourdesk.schemas.booking import Booking, BookingUpdate
from tourdesk.schemas.common import DeleteResponse, MutationResponse
from tourdesk.services.notifications import StaticConfirmer
from tourdesk.services.registry import StoreRegistry, get_confirmer, get_registry

router = APIRouter()


@router.get("", response_model=List[Booking])
async def list_bookings(
    search: Optional[str] = Query(None, description="Filter by guest name"),
    stores: StoreRegistry = Depends(get_registry),
):
    """List bookings, optionally filtered by name"""
    return await stores.bookings.search(search)


@router.get("/{booking_id}", response_model=Booking)
async def get_booking(
    booking_id: str,
    stores: StoreRegistry = Depends(get_registry),
):
    return await stores.bookings.get(booking_id)


@router.put("/{booking_id}", response_model=MutationResponse)
async def update_booking(
    booking_id: str,
    changes: BookingUpdate,
    stores: StoreRegistry = Depends(get_registry),
):
    with stores.notifier.scope() as raised:
        result = await stores.bookings.update(booking_id, changes.model_dump(exclude_none=True))
    return MutationResponse(result=result, notifications=raised)


@router.delete("/{booking_id}", response_model=DeleteResponse)
async def delete_booking(
    booking_id: str,
    confirmer: StaticConfirmer = Depends(get_confirmer),
    stores: StoreRegistry = Depends(get_registry),
):
    """Delete a booking; requires `?confirm=true`"""
    with stores.notifier.scope() as raised:
        deleted = await stores.bookings.delete(booking_id, confirmer)
    return DeleteResponse(deleted=deleted, notifications=raised)
