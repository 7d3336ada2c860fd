"""
Cache Administration Endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
import logging

from tourdesk.services.registry import StoreRegistry, get_registry

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/invalidate")
async def invalidate_all(stores: StoreRegistry = Depends(get_registry)):
    """Drop every cached collection"""
    await stores.invalidate_all()
    return {"invalidated": sorted(stores.stores)}


@router.post("/invalidate/{resource}")
async def invalidate_resource(resource: str, stores: StoreRegistry = Depends(get_registry)):
    """Drop one cached collection so the next read re-fetches it"""
    store = stores.get_store(resource)
    if store is None:
        raise HTTPException(status_code=404, detail=f"Unknown resource: {resource}")

    await store.invalidate()
    logger.info(f"Cache invalidated for {resource}")
    return {"invalidated": [resource]}
