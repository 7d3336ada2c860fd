"""
Video Library Endpoints
"""
from fastapi import APIRouter, Depends, status
from typing import List

from tourdesk.schemas.common import DeleteResponse, MutationResponse
from tourdesk.schemas.media import Video, VideoCreate, VideoUpdate
from tourdesk.services.notifications import StaticConfirmer
from tourdesk.services.registry import StoreRegistry, get_confirmer, get_registry

router = APIRouter()


@router.get("", response_model=List[Video])
async def list_videos(stores: StoreRegistry = Depends(get_registry)):
    """List videos (tags always as a list)"""
    return await stores.videos.items()


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def create_video(
    video: VideoCreate,
    stores: StoreRegistry = Depends(get_registry),
):
    with stores.notifier.scope() as raised:
        result = await stores.videos.create(video)
    return MutationResponse(result=result, notifications=raised)


@router.put("/{video_id}", response_model=MutationResponse)
async def update_video(
    video_id: str,
    changes: VideoUpdate,
    stores: StoreRegistry = Depends(get_registry),
):
    with stores.notifier.scope() as raised:
        result = await stores.videos.update(video_id, changes.model_dump(exclude_none=True))
    return MutationResponse(result=result, notifications=raised)


@router.delete("/{video_id}", response_model=DeleteResponse)
async def delete_video(
    video_id: str,
    confirmer: StaticConfirmer = Depends(get_confirmer),
    stores: StoreRegistry = Depends(get_registry),
):
    with stores.notifier.scope() as raised:
        deleted = await stores.videos.delete(video_id, confirmer)
    return DeleteResponse(deleted=deleted, notifications=raised)
