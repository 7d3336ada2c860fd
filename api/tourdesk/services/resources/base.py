"""
Base Resource Client - Shared request plumbing for remote tourism resources
"""
from typing import Any, Optional
import logging

import httpx
from prometheus_client import Counter

logger = logging.getLogger(__name__)

REMOTE_REQUEST_COUNT = Counter(
    'remote_requests_total',
    'Requests issued to the remote tourism service',
    ['resource', 'method', 'status']
)


class ResourceError(Exception):
    """Exception raised when a remote resource call fails"""
    def __init__(
        self,
        resource: str,
        message: str,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        self.resource = resource
        self.message = message
        self.status_code = status_code
        self.original_error = original_error
        super().__init__(f"{resource}: {message}")


class ResourceClient:
    """
    Base class for remote resource clients.

    Every public method of a subclass issues exactly one HTTP request and
    returns the deserialized response body. Transport failures and non-2xx
    responses raise ResourceError; nothing is retried.
    """

    # Resource identification
    name: str = "base"
    path: str = "/"

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    def _url(self, *parts: Any) -> str:
        """Join the collection path with item segments"""
        if not parts:
            return self.path
        base = self.path.rstrip("/")
        return "/".join([base, *(str(part) for part in parts)])

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        """Issue one request and return the parsed body"""
        logger.debug(f"{self.name}: {method} {url}")
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            REMOTE_REQUEST_COUNT.labels(resource=self.name, method=method, status="error").inc()
            logger.warning(f"{self.name}: {method} {url} failed: {e}")
            raise ResourceError(self.name, str(e) or type(e).__name__, original_error=e)

        REMOTE_REQUEST_COUNT.labels(
            resource=self.name, method=method, status=response.status_code
        ).inc()

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = self._error_message(response)
            logger.warning(f"{self.name}: {method} {url} returned HTTP {response.status_code}: {message}")
            raise ResourceError(self.name, message, response.status_code, e)

        return self._parse_body(response)

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer the server's `detail`, then the raw text"""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("detail"):
            detail = body["detail"]
            return detail if isinstance(detail, str) else str(detail)

        return response.text or f"HTTP {response.status_code}"
