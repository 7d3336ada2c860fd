"""
Destination Schemas
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List

from tourdesk.schemas.common import RecordId, split_delimited


class DestinationImages(BaseModel):
    """Thumbnail plus gallery images of a destination"""
    thumbnail: Optional[str] = None
    gallery: List[str] = []

    @field_validator("gallery", mode="before")
    @classmethod
    def _normalize_gallery(cls, value):
        return split_delimited(value)

    @classmethod
    def from_urls(cls, urls: List[str]) -> "DestinationImages":
        """First URL is the thumbnail, the rest form the gallery"""
        urls = split_delimited(urls)
        if not urls:
            return cls()
        return cls(thumbnail=urls[0], gallery=urls[1:])

    def urls(self) -> List[str]:
        head = [self.thumbnail] if self.thumbnail else []
        return head + list(self.gallery)


class Destination(BaseModel):
    """Place featured on the public site"""
    model_config = ConfigDict(extra="ignore")

    id: RecordId
    title: str = ""
    description: str = ""
    key_highlights: List[str] = []
    ratings: float = 0
    d_images: DestinationImages = Field(default_factory=DestinationImages)

    @field_validator("key_highlights", mode="before")
    @classmethod
    def _normalize_highlights(cls, value):
        return split_delimited(value)

    @field_validator("d_images", mode="before")
    @classmethod
    def _default_images(cls, value):
        return value or {}

    @field_validator("title", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return value or ""

    @field_validator("ratings", mode="before")
    @classmethod
    def _coerce_ratings(cls, value):
        return value or 0


class DestinationCreate(BaseModel):
    """
    Schema for the Create Destination form.

    Image URLs may be given as `image_urls` (list or comma-delimited text),
    in which case the first becomes the thumbnail.
    """
    title: str = Field(..., min_length=1)
    description: str = ""
    key_highlights: List[str] = []
    ratings: float = Field(default=0, ge=0, le=5)
    image_urls: List[str] = []

    @field_validator("key_highlights", "image_urls", mode="before")
    @classmethod
    def _normalize_lists(cls, value):
        return split_delimited(value)

    def to_remote(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "key_highlights": self.key_highlights,
            "ratings": self.ratings,
            "d_images": DestinationImages.from_urls(self.image_urls).model_dump(),
        }


class DestinationUpdate(BaseModel):
    """Editable destination fields"""
    title: Optional[str] = None
    description: Optional[str] = None
    key_highlights: Optional[List[str]] = None
    ratings: Optional[float] = Field(default=None, ge=0, le=5)
    image_urls: Optional[List[str]] = None

    @field_validator("key_highlights", "image_urls", mode="before")
    @classmethod
    def _normalize_lists(cls, value):
        return None if value is None else split_delimited(value)
