"""
Remote Resource Clients - One client per resource of the tourism REST service
"""
import logging

import httpx

from .base import ResourceClient, ResourceError
from .trips import TripClient
from .bookings import BookingClient
from .videos import VideoClient
from .photos import PhotoClient
from .destinations import DestinationClient
from .about import AboutClient

logger = logging.getLogger(__name__)


class RemoteService:
    """All resource clients sharing one HTTP connection pool"""

    def __init__(self, client: httpx.AsyncClient):
        self.http = client
        self.trips = TripClient(client)
        self.bookings = BookingClient(client)
        self.videos = VideoClient(client)
        self.photos = PhotoClient(client)
        self.destinations = DestinationClient(client)
        self.about = AboutClient(client)

    async def health_check(self) -> bool:
        """Check the remote service answers the trip listing"""
        try:
            await self.trips.list()
            return True
        except ResourceError as e:
            logger.warning(f"Remote service health check failed: {e}")
            return False


__all__ = [
    "ResourceClient",
    "ResourceError",
    "TripClient",
    "BookingClient",
    "VideoClient",
    "PhotoClient",
    "DestinationClient",
    "AboutClient",
    "RemoteService",
]
