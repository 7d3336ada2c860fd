"""
Trip Schemas
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime
from enum import Enum

from tourdesk.schemas.common import RecordId, split_delimited


class TripStatus(str, Enum):
    """Trip lifecycle status as stored by the remote service"""
    ACTIVE = "active"
    IN_PROGRESS = "progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    # Older two-value variant (active/inactive)
    INACTIVE = "inactive"

    @classmethod
    def parse(cls, value: str) -> "TripStatus":
        """Accept the hyphen/underscore spellings of in-progress"""
        normalized = value.strip().lower()
        if normalized in ("in-progress", "in_progress", "inprogress"):
            return cls.IN_PROGRESS
        return cls(normalized)

    @property
    def label(self) -> str:
        return {
            TripStatus.ACTIVE: "Active",
            TripStatus.IN_PROGRESS: "In Progress",
            TripStatus.COMPLETED: "Completed",
            TripStatus.CANCELLED: "Cancelled",
            TripStatus.INACTIVE: "Inactive",
        }[self]


class Trip(BaseModel):
    """Trip listing mirrored from the remote service"""
    model_config = ConfigDict(extra="ignore")

    id: RecordId
    destination: str = ""
    price: float = 0
    description: str = ""
    image_url: str = ""
    gallery: List[str] = []
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    ratings: float = 0
    max_capacity: int = 0
    required_staff: int = 0
    # Kept as text: the remote service may hold values outside TripStatus
    status: str = TripStatus.ACTIVE.value
    created_at: Optional[str] = None

    @field_validator("gallery", mode="before")
    @classmethod
    def _normalize_gallery(cls, value):
        return split_delimited(value)

    @field_validator("ratings", mode="before")
    @classmethod
    def _clamp_ratings(cls, value):
        try:
            return min(5.0, max(0.0, float(value or 0)))
        except (TypeError, ValueError):
            return 0.0

    @field_validator("price", "max_capacity", "required_staff", mode="before")
    @classmethod
    def _coerce_numbers(cls, value):
        return value or 0

    @field_validator("description", "image_url", "destination", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return value or ""


class TripCreate(BaseModel):
    """Schema for creating a trip from the Add Trip form"""
    destination: str = Field(..., min_length=1)
    price: float = Field(default=0, ge=0)
    description: str = ""
    image_url: str = Field(..., min_length=1)
    gallery: List[str] = []
    start_date: datetime
    end_date: datetime
    ratings: float = Field(default=0, ge=0, le=5)
    max_capacity: int = Field(default=0, ge=0)
    required_staff: int = Field(default=0, ge=0)
    status: TripStatus = TripStatus.ACTIVE

    @field_validator("gallery", mode="before")
    @classmethod
    def _normalize_gallery(cls, value):
        return split_delimited(value)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value):
        return TripStatus.parse(value) if isinstance(value, str) else value

    @model_validator(mode="after")
    def _require_gallery(self):
        if not self.gallery:
            raise ValueError("Please add at least one gallery image URL")
        return self

    def to_remote(self) -> dict:
        """Payload for POST /books/trips/ (dates as ISO-8601 timestamps)"""
        return self.model_dump(mode="json")


class TripUpdate(BaseModel):
    """Schema for a full trip update from the edit panel"""
    destination: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None
    image_url: Optional[str] = None
    gallery: Optional[List[str]] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    ratings: Optional[float] = Field(default=None, ge=0, le=5)
    max_capacity: Optional[int] = Field(default=None, ge=0)
    required_staff: Optional[int] = Field(default=None, ge=0)
    status: Optional[TripStatus] = None

    @field_validator("gallery", mode="before")
    @classmethod
    def _normalize_gallery(cls, value):
        return None if value is None else split_delimited(value)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value):
        return TripStatus.parse(value) if isinstance(value, str) else value


class TripStatusUpdate(BaseModel):
    """Schema for the status-only update"""
    status: TripStatus

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value):
        return TripStatus.parse(value) if isinstance(value, str) else value


class BookedUser(BaseModel):
    """A user booked onto a trip (GET /books/trips/{id}/users/full)"""
    model_config = ConfigDict(extra="ignore")

    user_id: RecordId
    name: str = ""
    email: str = ""
    phone: str = ""
    is_admin: bool = False
    trip_id: Optional[RecordId] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
