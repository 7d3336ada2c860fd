"""
Remote Service HTTP Connection
"""
import httpx
from typing import Optional
import logging

from tourdesk.config import settings

logger = logging.getLogger(__name__)

# Shared client instance
http_client: Optional[httpx.AsyncClient] = None


def build_http_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Create an AsyncClient bound to the remote service base URL"""
    return httpx.AsyncClient(
        base_url=settings.REMOTE_API_BASE_URL,
        headers={"accept": "application/json"},
        timeout=settings.REMOTE_API_TIMEOUT,
        transport=transport,
    )


async def init_http_client():
    """Initialize the shared HTTP client"""
    global http_client
    logger.info(f"Initializing HTTP client for {settings.REMOTE_API_BASE_URL}...")
    http_client = build_http_client()


async def close_http_client():
    """Close the shared HTTP client"""
    global http_client
    if http_client:
        logger.info("Closing HTTP client...")
        await http_client.aclose()
        http_client = None
        logger.info("HTTP client closed")


def get_http_client() -> httpx.AsyncClient:
    """
    Return the shared client, creating one lazily when the lifespan
    has not run (e.g. scripts importing the services directly)
    """
    global http_client
    if http_client is None:
        logger.warning("HTTP client not initialized, creating one lazily")
        http_client = build_http_client()
    return http_client
