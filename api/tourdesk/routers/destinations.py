"""
Destination (Places) Endpoints
"""
from fastapi import APIRouter, Depends, status
from typing import List

from tourdesk.schemas.common import DeleteResponse, MutationResponse
from tourdesk.schemas.destination import Destination, DestinationCreate, DestinationUpdate
from tourdesk.services.notifications import StaticConfirmer
from tourdesk.services.registry import StoreRegistry, get_confirmer, get_registry

router = APIRouter()


@router.get("", response_model=List[Destination])
async def list_destinations(stores: StoreRegistry = Depends(get_registry)):
    """
    List destinations (highlights always as a list)
    """
    return await stores.destinations.items()


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def create_destination(
    destination: DestinationCreate,
    stores: StoreRegistry = Depends(get_registry),
):
    """
    Create a destination; the first image URL becomes the thumbnail
    """
    with stores.notifier.scope() as raised:
        result = await stores.destinations.create(destination)
    return MutationResponse(result=result, notifications=raised)


@router.get("/{destination_id}", response_model=Destination)
async def get_destination(
    destination_id: str,
    stores: StoreRegistry = Depends(get_registry),
):
    return await stores.destinations.get(destination_id)


@router.put("/{destination_id}", response_model=MutationResponse)
async def update_destination(
    destination_id: str,
    changes: DestinationUpdate,
    stores: StoreRegistry = Depends(get_registry),
):
    with stores.notifier.scope() as raised:
        result = await stores.destinations.update(destination_id, changes.model_dump(exclude_none=True))
    return MutationResponse(result=result, notifications=raised)


@router.delete("/{destination_id}", response_model=DeleteResponse)
async def delete_destination(
    destination_id: str,
    confirmer: StaticConfirmer = Depends(get_confirmer),
    stores: StoreRegistry = Depends(get_registry),
):
    with stores.notifier.scope() as raised:
        deleted = await stores.destinations.delete(destination_id, confirmer)
    return DeleteResponse(deleted=deleted, notifications=raised)
