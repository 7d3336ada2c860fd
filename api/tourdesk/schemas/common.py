"""
Shared Schema Helpers
"""
from pydantic import BaseModel, Field
from typing import Any, List, Optional, Union
from datetime import datetime, timezone
from enum import Enum


# Remote identifiers are integers for some resources and strings for others
RecordId = Union[int, str]


def split_delimited(value: Any) -> List[str]:
    """
    Normalise a list-or-text field into an ordered list of strings.

    "beach, sunset" -> ["beach", "sunset"]; lists pass through unchanged.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]


def join_delimited(items: Optional[List[str]]) -> str:
    """Serialise a list back to the comma-delimited text form"""
    if not items:
        return ""
    return ", ".join(item.strip() for item in items if item and item.strip())


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, returning None when it is missing or malformed"""
    if isinstance(value, datetime):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def same_id(left: Any, right: Any) -> bool:
    """Compare two record identifiers regardless of int/str representation"""
    return str(left) == str(right)


class NotificationKind(str, Enum):
    """Toast/banner severity"""
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


class Notification(BaseModel):
    """A transient notification raised by a mutation"""
    kind: NotificationKind
    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ViewMode(str, Enum):
    """Grid/list toggle for collection pages"""
    GRID = "grid"
    LIST = "list"


class MutationResponse(BaseModel):
    """Envelope returned by every mutating endpoint"""
    result: Optional[Any] = None
    notifications: List[Notification] = []


class DeleteResponse(BaseModel):
    """Result of a delete request (declined confirmations delete nothing)"""
    deleted: bool
    notifications: List[Notification] = []
