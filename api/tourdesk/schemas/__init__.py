"""Pydantic Schemas"""
from tourdesk.schemas.common import Notification, NotificationKind, ViewMode, split_delimited, join_delimited
from tourdesk.schemas.trip import Trip, TripCreate, TripUpdate, TripStatus, TripStatusUpdate, BookedUser
from tourdesk.schemas.booking import Booking, BookingUpdate
from tourdesk.schemas.media import Video, VideoCreate, VideoUpdate, GalleryPhoto, PhotoLikeResponse
from tourdesk.schemas.destination import Destination, DestinationCreate, DestinationUpdate, DestinationImages
from tourdesk.schemas.about import AboutContent
from tourdesk.schemas.analytics import DashboardSummary, DemographicEntry

__all__ = [
    "Notification", "NotificationKind", "ViewMode", "split_delimited", "join_delimited",
    "Trip", "TripCreate", "TripUpdate", "TripStatus", "TripStatusUpdate", "BookedUser",
    "Booking", "BookingUpdate",
    "Video", "VideoCreate", "VideoUpdate", "GalleryPhoto", "PhotoLikeResponse",
    "Destination", "DestinationCreate", "DestinationUpdate", "DestinationImages",
    "AboutContent",
    "DashboardSummary", "DemographicEntry",
]
