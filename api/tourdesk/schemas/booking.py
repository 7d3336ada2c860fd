"""
Booking Schemas
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from tourdesk.schemas.common import RecordId

# The remote booking form stores these two fields misspelled
REMOTE_FIELD_NAMES = {
    "guest_capacity": "guest_capcity",
    "activities": "activites",
}


class Booking(BaseModel):
    """Booking form submission mirrored from the remote service"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: RecordId
    name: str = ""
    email: str = ""
    phone: str = ""
    destination: str = ""
    guest_capacity: int = Field(
        default=0,
        validation_alias=AliasChoices("guest_capacity", "guest_capcity"),
    )
    checkin_date: Optional[str] = None
    checkout_date: Optional[str] = None
    special_requests: str = ""
    activities: str = Field(
        default="",
        validation_alias=AliasChoices("activities", "activites"),
    )
    message: str = ""
    created_at: Optional[str] = None

    @field_validator(
        "name", "email", "phone", "destination",
        "special_requests", "activities", "message",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, list):
            return ", ".join(str(item) for item in value)
        return str(value)

    @field_validator("guest_capacity", mode="before")
    @classmethod
    def _coerce_capacity(cls, value):
        try:
            return int(value or 0)
        except (TypeError, ValueError):
            return 0

    def to_remote(self) -> dict:
        """Payload for PUT /bookform/{id} using the remote field names"""
        payload = self.model_dump(mode="json")
        for field_name, remote_name in REMOTE_FIELD_NAMES.items():
            payload[remote_name] = payload.pop(field_name)
        return payload


class BookingUpdate(BaseModel):
    """Editable booking fields from the edit panel"""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    destination: Optional[str] = None
    guest_capacity: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("guest_capacity", "guest_capcity"),
    )
    checkin_date: Optional[str] = None
    checkout_date: Optional[str] = None
    special_requests: Optional[str] = None
    activities: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("activities", "activites"),
    )
    message: Optional[str] = None
