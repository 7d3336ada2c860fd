"""
View Preference Endpoints
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from tourdesk.schemas.common import ViewMode
from tourdesk.services.registry import StoreRegistry, get_registry

router = APIRouter()


class ViewModeBody(BaseModel):
    view_mode: ViewMode


@router.get("/{component}/view-mode", response_model=ViewModeBody)
async def get_view_mode(component: str, stores: StoreRegistry = Depends(get_registry)):
    return ViewModeBody(view_mode=await stores.preferences.get(component))


@router.put("/{component}/view-mode", response_model=ViewModeBody)
async def set_view_mode(
    component: str,
    body: ViewModeBody,
    stores: StoreRegistry = Depends(get_registry),
):
    return ViewModeBody(view_mode=await stores.preferences.set(component, body.view_mode))
