"""
Video Resource Client - /videos
"""
from typing import Any, Dict, List

from tourdesk.schemas.common import RecordId
from .base import ResourceClient


class VideoClient(ResourceClient):
    """Video library"""

    name = "videos"
    path = "/videos"

    async def list(self) -> List[Dict[str, Any]]:
        return await self._request("GET", self._url("list"))

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", self._url("upload"), json=data)

    async def update(self, video: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", self._url(video["id"]), json=video)

    async def delete(self, video_id: RecordId) -> Any:
        return await self._request("DELETE", self._url(video_id))
