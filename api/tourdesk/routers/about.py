"""
About Us Content Endpoints
"""
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from typing import Optional

from tourdesk.schemas.about import AboutContent
from tourdesk.schemas.common import MutationResponse
from tourdesk.services.registry import StoreRegistry, get_registry

router = APIRouter()


@router.get("", response_model=AboutContent)
async def get_about(stores: StoreRegistry = Depends(get_registry)):
    """Last saved About Us content (defaults until the first save)"""
    return stores.about.current


@router.put("", response_model=MutationResponse)
async def update_about(
    title: str = Form(...),
    story: str = Form(...),
    image: Optional[UploadFile] = File(None),
    stores: StoreRegistry = Depends(get_registry),
):
    """
    Replace the About Us title, story and (optionally) image
    """
    upload = None
    if image is not None:
        upload = (image.filename or "image", await image.read(), image.content_type or "")

    try:
        with stores.notifier.scope() as raised:
            content = await stores.about.update(title, story, upload)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return MutationResponse(result=content.model_dump(), notifications=raised)
