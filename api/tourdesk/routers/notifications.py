"""
Notification (Toast) Endpoints
"""
from fastapi import APIRouter, Depends, Query
from typing import List

from tourdesk.schemas.common import Notification
from tourdesk.services.registry import StoreRegistry, get_registry

router = APIRouter()


@router.get("", response_model=List[Notification])
async def list_notifications(
    peek: bool = Query(False, description="Return pending notifications without clearing them"),
    stores: StoreRegistry = Depends(get_registry),
):
    """Pending notifications, cleared once read unless `peek` is set"""
    if peek:
        return stores.notifier.peek()
    return stores.notifier.drain()
