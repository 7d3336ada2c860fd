"""
Booking Resource Client - /bookform/
"""
from typing import Any, Dict, List

from tourdesk.schemas.common import RecordId
from .base import ResourceClient


class BookingClient(ResourceClient):
    """Booking form submissions"""

    name = "bookings"
    path = "/bookform/"

    async def list(self) -> List[Dict[str, Any]]:
        return await self._request("GET", self.path)

    async def update(self, booking: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", self._url(booking["id"]), json=booking)

    async def delete(self, booking_id: RecordId) -> Any:
        return await self._request("DELETE", self._url(booking_id))
