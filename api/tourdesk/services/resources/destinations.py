"""
Destination Resource Client - /places/
"""
from typing import Any, Dict, List

from tourdesk.schemas.common import RecordId
from .base import ResourceClient


class DestinationClient(ResourceClient):
    """Places featured on the public site"""

    name = "destinations"
    path = "/places/"

    async def list(self) -> List[Dict[str, Any]]:
        return await self._request("GET", self.path)

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", self.path, json=data)

    async def update(self, destination: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", self._url(destination["id"]), json=destination)

    async def delete(self, destination_id: RecordId) -> Any:
        return await self._request("DELETE", self._url(destination_id))
