"""
Gallery Photo Resource Client - /photos
"""
from typing import Any, Dict, List, Optional

from tourdesk.schemas.common import RecordId
from .base import ResourceClient


class PhotoClient(ResourceClient):
    """
    Photo gallery.

    Uploads are multipart: the image goes in the `file` field while the
    metadata travels as query parameters.
    """

    name = "photos"
    path = "/photos"

    async def list(self) -> List[Dict[str, Any]]:
        return await self._request("GET", self._url("gallery"))

    async def upload(
        self,
        file: bytes,
        filename: str,
        content_type: str,
        image_title: str = "",
        description: str = "",
        image_location: str = "",
    ) -> Optional[Dict[str, Any]]:
        params = {
            "image_title": image_title,
            "description": description,
            "image_location": image_location,
        }
        return await self._request(
            "POST",
            self._url("upload"),
            params=params,
            files={"file": (filename, file, content_type)},
        )

    async def like(self, photo_id: RecordId) -> Dict[str, Any]:
        """Returns {"likes": <new count>}"""
        return await self._request("POST", self._url("photos", photo_id, "like"))
