"""
Trip Resource Client - /books/trips/
"""
from typing import Any, Dict, List

from tourdesk.schemas.common import RecordId
from .base import ResourceClient


class TripClient(ResourceClient):
    """Trip listings and the users booked onto them"""

    name = "trips"
    path = "/books/trips/"

    async def list(self) -> List[Dict[str, Any]]:
        return await self._request("GET", self.path)

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(
            "POST", self.path, json=data, headers={"Content-Type": "application/json"}
        )

    async def update(self, trip: Dict[str, Any]) -> Dict[str, Any]:
        """Full update; the record carries its own id"""
        return await self._request("PUT", self._url(trip["id"]), json=trip)

    async def delete(self, trip_id: RecordId) -> Any:
        return await self._request("DELETE", self._url(trip_id))

    async def update_status(self, trip_id: RecordId, status: str) -> Any:
        """PUT /books/trips/{id}/status?status=<value>"""
        return await self._request(
            "PUT", self._url(trip_id, "status"), params={"status": status}
        )

    async def booked_users(self, trip_id: RecordId) -> List[Dict[str, Any]]:
        """Bookings joined to a trip"""
        return await self._request("GET", self._url(trip_id, "users", "full"))
