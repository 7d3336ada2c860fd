"""
Photo Gallery Endpoints
"""
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from typing import List
import logging

from tourdesk.schemas.common import MutationResponse
from tourdesk.schemas.media import GalleryPhoto, PhotoLikeResponse
from tourdesk.services.registry import StoreRegistry, get_registry

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[GalleryPhoto])
async def list_photos(stores: StoreRegistry = Depends(get_registry)):
    """List gallery photos"""
    return await stores.photos.items()


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def upload_photo(
    file: UploadFile = File(...),
    image_title: str = Form(""),
    description: str = Form(""),
    image_location: str = Form(""),
    stores: StoreRegistry = Depends(get_registry),
):
    """
    Upload a new photo to the gallery
    """
    content = await file.read()
    try:
        with stores.notifier.scope() as raised:
            result = await stores.photos.upload(
                content,
                file.filename or "upload",
                file.content_type,
                image_title=image_title,
                description=description,
                image_location=image_location,
            )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(f"Photo uploaded: {file.filename} ({len(content)} bytes)")
    return MutationResponse(result=result, notifications=raised)


@router.post("/{photo_id}/like", response_model=PhotoLikeResponse)
async def like_photo(
    photo_id: str,
    stores: StoreRegistry = Depends(get_registry),
):
    likes = await stores.photos.like(photo_id)
    return PhotoLikeResponse(id=photo_id, likes=likes)
