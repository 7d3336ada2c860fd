"""
View Preferences - Per-component grid/list toggle with injected persistence
"""
from typing import Dict, Optional
import logging

from tourdesk.schemas.common import ViewMode
from tourdesk.utils.redis import get_redis

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Minimal async key-value persistence"""

    async def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    async def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self):
        self._values: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value


class RedisKeyValueStore(KeyValueStore):
    """Preferences persisted in Redis (no expiry), connection resolved per call unless given"""

    def __init__(self, client=None, prefix: str = "tourdesk:prefs"):
        self.client = client
        self.prefix = prefix

    async def _redis(self):
        return self.client if self.client is not None else await get_redis()

    async def get(self, key: str) -> Optional[str]:
        client = await self._redis()
        return await client.get(f"{self.prefix}:{key}")

    async def set(self, key: str, value: str) -> None:
        client = await self._redis()
        await client.set(f"{self.prefix}:{key}", value)


class ViewPreferences:
    """
    Remembers how each collection page is displayed.

    Anything other than a stored "list" reads back as the grid default.
    """

    def __init__(self, store: KeyValueStore, namespace: str = "view_mode"):
        self.store = store
        self.namespace = namespace

    def _key(self, component: str) -> str:
        return f"{self.namespace}:{component}"

    async def get(self, component: str) -> ViewMode:
        saved = await self.store.get(self._key(component))
        return ViewMode.LIST if saved == ViewMode.LIST.value else ViewMode.GRID

    async def set(self, component: str, mode: ViewMode) -> ViewMode:
        mode = ViewMode(mode)
        await self.store.set(self._key(component), mode.value)
        logger.debug(f"View mode for {component} set to {mode.value}")
        return mode
