"""
Collection Cache - Holds the last fetched collection of each resource

The cache is always subordinate to the remote service: entries are only
written by a completed list fetch and only dropped by invalidation.
"""
from typing import Any, Dict, List, Optional
import json
import logging

from tourdesk.config import settings
from tourdesk.utils.redis import get_redis

logger = logging.getLogger(__name__)


class CollectionCache:
    """Interface for caches keyed by resource name"""

    async def get(self, resource: str) -> Optional[List[Dict[str, Any]]]:
        raise NotImplementedError

    async def set(self, resource: str, items: List[Dict[str, Any]]) -> None:
        raise NotImplementedError

    async def invalidate(self, resource: str) -> None:
        raise NotImplementedError

    async def clear(self) -> None:
        raise NotImplementedError


class MemoryCollectionCache(CollectionCache):
    """Process-local cache"""

    def __init__(self):
        self._entries: Dict[str, List[Dict[str, Any]]] = {}

    async def get(self, resource: str) -> Optional[List[Dict[str, Any]]]:
        return self._entries.get(resource)

    async def set(self, resource: str, items: List[Dict[str, Any]]) -> None:
        self._entries[resource] = items

    async def invalidate(self, resource: str) -> None:
        self._entries.pop(resource, None)

    async def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, resource: str) -> bool:
        return resource in self._entries


class RedisCollectionCache(CollectionCache):
    """
    Redis-backed cache so several worker processes see the same collections.

    Values are stored as JSON under `<prefix>:<resource>` with a TTL. Without
    an explicit client the connection is resolved on every operation, so the
    cache recovers once Redis comes back.
    """

    def __init__(self, client=None, prefix: str = "tourdesk:collections", ttl: int = settings.CACHE_TTL_COLLECTIONS):
        self.client = client
        self.prefix = prefix
        self.ttl = ttl

    def _key(self, resource: str) -> str:
        return f"{self.prefix}:{resource}"

    async def _redis(self):
        return self.client if self.client is not None else await get_redis()

    async def get(self, resource: str) -> Optional[List[Dict[str, Any]]]:
        client = await self._redis()
        value = await client.get(self._key(resource))
        if not value:
            logger.debug(f"Cache MISS: {resource}")
            return None
        try:
            logger.debug(f"Cache HIT: {resource}")
            return json.loads(value)
        except json.JSONDecodeError:
            logger.warning(f"Discarding unreadable cache entry for {resource}")
            await self.invalidate(resource)
            return None

    async def set(self, resource: str, items: List[Dict[str, Any]]) -> None:
        client = await self._redis()
        await client.setex(self._key(resource), self.ttl, json.dumps(items, default=str))

    async def invalidate(self, resource: str) -> None:
        client = await self._redis()
        await client.delete(self._key(resource))

    async def clear(self) -> None:
        """Drop every collection under the prefix, whichever worker cached it"""
        client = await self._redis()
        keys = [key async for key in client.scan_iter(match=f"{self.prefix}:*")]
        if keys:
            await client.delete(*keys)
        logger.debug(f"Cleared {len(keys)} cached collections")
