"""
About Us Resource Client - /aboutus
"""
from typing import Any, Optional, Tuple

from .base import ResourceClient


class AboutClient(ResourceClient):
    """About Us content (multipart form: title, story, optional image)"""

    name = "about"
    path = "/aboutus"

    async def update(
        self,
        title: str,
        story: str,
        image: Optional[Tuple[str, bytes, str]] = None,
    ) -> Any:
        """`image` is a (filename, content, content_type) tuple"""
        # Text fields go through `files` so the body is always multipart
        parts = [("title", (None, title)), ("story", (None, story))]
        if image:
            parts.append(("image", image))
        return await self._request("POST", self._url("update"), files=parts)
