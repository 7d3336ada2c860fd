"""
Store Registry - Wires the remote clients, collection cache, stores and notifier
"""
from typing import Dict, Optional
import logging

from fastapi import Query

from tourdesk.config import settings
from tourdesk.services.cache import CollectionCache, MemoryCollectionCache, RedisCollectionCache
from tourdesk.services.notifications import NotificationCenter, StaticConfirmer
from tourdesk.services.preferences import (
    KeyValueStore,
    MemoryKeyValueStore,
    RedisKeyValueStore,
    ViewPreferences,
)
from tourdesk.services.resources import RemoteService
from tourdesk.services.stores import (
    AboutStore,
    BookingStore,
    DestinationStore,
    PhotoStore,
    ResourceStore,
    TripStore,
    VideoStore,
)
from tourdesk.utils.http import get_http_client

logger = logging.getLogger(__name__)


class StoreRegistry:
    """
    One store per remote collection, sharing:
    - the remote service clients
    - a collection cache keyed by resource name
    - the notification center
    """

    def __init__(
        self,
        remote: RemoteService,
        cache: Optional[CollectionCache] = None,
        notifier: Optional[NotificationCenter] = None,
        preference_store: Optional[KeyValueStore] = None,
    ):
        self.remote = remote
        self.cache = cache or MemoryCollectionCache()
        self.notifier = notifier or NotificationCenter()
        self.preferences = ViewPreferences(preference_store or MemoryKeyValueStore())

        self.trips = TripStore(remote.trips, self.cache, self.notifier)
        self.bookings = BookingStore(remote.bookings, self.cache, self.notifier)
        self.videos = VideoStore(remote.videos, self.cache, self.notifier)
        self.photos = PhotoStore(remote.photos, self.cache, self.notifier)
        self.destinations = DestinationStore(remote.destinations, self.cache, self.notifier)
        self.about = AboutStore(remote.about, self.notifier)

    @property
    def stores(self) -> Dict[str, ResourceStore]:
        return {
            store.name: store
            for store in (self.trips, self.bookings, self.videos, self.photos, self.destinations)
        }

    def get_store(self, name: str) -> Optional[ResourceStore]:
        return self.stores.get(name)

    async def invalidate_all(self):
        await self.cache.clear()
        logger.info("All cached collections invalidated")


# Registry instance for the application
registry: Optional[StoreRegistry] = None


async def init_registry():
    """Build the registry on top of the configured cache backend"""
    global registry
    remote = RemoteService(get_http_client())

    if settings.CACHE_BACKEND == "redis":
        # Connection resolved per operation, falling back to no-op while Redis is down
        registry = StoreRegistry(
            remote,
            cache=RedisCollectionCache(),
            preference_store=RedisKeyValueStore(),
        )
    else:
        registry = StoreRegistry(remote)

    logger.info(f"Store registry ready ({settings.CACHE_BACKEND} cache)")


async def close_registry():
    global registry
    registry = None


def get_registry() -> StoreRegistry:
    """
    Dependency that provides the store registry
    Usage: stores: StoreRegistry = Depends(get_registry)
    """
    global registry
    if registry is None:
        logger.warning("Store registry not initialized, using in-memory cache")
        registry = StoreRegistry(RemoteService(get_http_client()))
    return registry


def get_confirmer(
    confirm: bool = Query(False, description="Confirm the destructive action"),
) -> StaticConfirmer:
    """Map the request's `confirm` flag onto the confirmation gate"""
    return StaticConfirmer(confirm)
