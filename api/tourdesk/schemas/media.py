"""
Video & Gallery Photo Schemas
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List

from tourdesk.schemas.common import RecordId, split_delimited


class Video(BaseModel):
    """Video entry (tags arrive either as a list or as comma-joined text)"""
    model_config = ConfigDict(extra="ignore")

    id: RecordId
    video_url: str = ""
    video_title: str = ""
    video_likes: int = 0
    tags: List[str] = []
    description: str = ""

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        return split_delimited(value)

    @field_validator("video_url", "video_title", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return value or ""

    @field_validator("video_likes", mode="before")
    @classmethod
    def _coerce_likes(cls, value):
        return value or 0


class VideoCreate(BaseModel):
    """Schema for POST /videos/upload"""
    video_url: str = Field(..., min_length=1)
    video_title: str = Field(..., min_length=1)
    video_likes: int = Field(default=0, ge=0)
    tags: List[str] = []
    description: str = ""

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        return split_delimited(value)


class VideoUpdate(BaseModel):
    """Editable video fields"""
    video_url: Optional[str] = None
    video_title: Optional[str] = None
    video_likes: Optional[int] = Field(default=None, ge=0)
    tags: Optional[List[str]] = None
    description: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        return None if value is None else split_delimited(value)


class GalleryPhoto(BaseModel):
    """Photo in the public gallery"""
    model_config = ConfigDict(extra="ignore")

    id: RecordId
    image_url: str = ""
    image_title: Optional[str] = None
    description: Optional[str] = None
    image_location: Optional[str] = None
    image_likes: int = 0
    created_at: Optional[str] = None

    @property
    def display_title(self) -> str:
        return self.image_title or "Untitled"

    @field_validator("image_likes", mode="before")
    @classmethod
    def _coerce_likes(cls, value):
        return value or 0


class PhotoLikeResponse(BaseModel):
    """New like count after POST /photos/photos/{id}/like"""
    id: RecordId
    likes: int
