"""
Redis Connection - Backing store for the shared collection cache and view preferences
"""
import redis.asyncio as redis
from typing import Any, AsyncIterator, Optional
import logging

from tourdesk.config import settings

logger = logging.getLogger(__name__)

# Redis client instance
redis_client: Optional[redis.Redis] = None


async def init_redis():
    """Initialize Redis connection"""
    global redis_client
    logger.info("Initializing Redis connection...")
    redis_client = redis.from_url(
        settings.REDIS_URL,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,  # 5 second connection timeout
        socket_timeout=5,  # 5 second operation timeout
        retry_on_timeout=True,
    )
    # Test connection
    try:
        await redis_client.ping()
        logger.info("Redis connection established")
    except Exception as e:
        logger.warning(f"Redis connection failed: {e}. Collections will be fetched from the remote service on every read.")


async def close_redis():
    """Close Redis connection"""
    global redis_client
    if redis_client:
        logger.info("Closing Redis connection...")
        await redis_client.close()
        redis_client = None
        logger.info("Redis connection closed")


class NoOpRedis:
    """A no-op client that stores nothing - used when Redis is unavailable"""
    async def get(self, key: str) -> None:
        return None

    async def set(self, key: str, value: Any, *args, **kwargs) -> bool:
        return True

    async def setex(self, key: str, ttl: int, value: Any) -> bool:
        return True

    async def delete(self, *keys: str) -> int:
        return 0

    async def exists(self, key: str) -> int:
        return 0

    async def scan_iter(self, *args, **kwargs) -> AsyncIterator[str]:
        for key in ():
            yield key

    async def ping(self) -> bool:
        return False

_noop_redis = NoOpRedis()


async def get_redis() -> redis.Redis:
    """
    Provide the Redis client, or a no-op client if Redis is unavailable
    (graceful degradation)
    """
    if redis_client is None:
        logger.warning("Redis client not initialized, using no-op client")
        return _noop_redis

    # Quick health check
    try:
        await redis_client.ping()
        return redis_client
    except Exception as e:
        logger.warning(f"Redis ping failed: {e}, using no-op client")
        return _noop_redis
