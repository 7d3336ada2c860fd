"""
Resource Stores - Fetch, cache and invalidate remote collections

Each store mirrors one remote collection. Reads are served from the
collection cache (fetching on a miss); mutations call the remote service,
raise a notification and then invalidate and re-fetch the collection
instead of patching it locally.
"""
from typing import Any, Awaitable, Dict, Generic, List, Optional, Type, TypeVar, Union
import asyncio
import logging

from pydantic import BaseModel, ValidationError

from tourdesk.schemas.common import NotificationKind, RecordId, same_id
from tourdesk.schemas.trip import Trip, TripCreate, TripStatus, BookedUser
from tourdesk.schemas.booking import Booking
from tourdesk.schemas.media import Video, VideoCreate, GalleryPhoto
from tourdesk.schemas.destination import Destination, DestinationCreate, DestinationImages
from tourdesk.schemas.about import AboutContent
from tourdesk.services.cache import CollectionCache
from tourdesk.services.notifications import Confirmer, Notifier, DELETE_PROMPT
from tourdesk.services.resources import (
    ResourceClient,
    ResourceError,
    TripClient,
    BookingClient,
    VideoClient,
    PhotoClient,
    DestinationClient,
    AboutClient,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class RecordNotFound(LookupError):
    """Raised when an id is not present in the cached collection"""
    def __init__(self, resource: str, record_id: RecordId):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource}: no record with id {record_id}")


class ResourceStore(Generic[ModelT]):
    """
    Fetch-cache-invalidate cycle for one remote collection.

    List-fetch failures leave the collection empty and are only logged;
    mutation failures raise an error notification, leave the cache as it
    was and propagate the ResourceError.
    """

    name: str = "base"
    model: Type[BaseModel] = BaseModel

    # Notification texts
    update_success = "Record updated successfully!"
    update_error = "Failed to update record."
    delete_success = "The record has been deleted."
    delete_error = "Failed to delete the record."
    create_success = "Record created successfully!"
    create_error = "Failed to create record."

    def __init__(self, client: ResourceClient, cache: CollectionCache, notifier: Notifier):
        self.client = client
        self.cache = cache
        self.notifier = notifier
        self._loading = False

    @property
    def loading(self) -> bool:
        return self._loading

    async def refresh(self) -> List[Dict[str, Any]]:
        """Fetch the collection from the remote service and cache it"""
        self._loading = True
        try:
            data = await self.client.list()
        except ResourceError as e:
            logger.warning(f"Failed to fetch {self.name}: {e.message}")
            return []
        finally:
            self._loading = False

        if not isinstance(data, list):
            logger.warning(f"Unexpected {self.name} payload ({type(data).__name__}), treating as empty")
            data = []

        await self.cache.set(self.name, data)
        logger.debug(f"Fetched {len(data)} {self.name}")
        return data

    async def invalidate(self) -> None:
        await self.cache.invalidate(self.name)

    async def raw_items(self) -> List[Dict[str, Any]]:
        cached = await self.cache.get(self.name)
        if cached is None:
            cached = await self.refresh()
        return cached

    async def items(self) -> List[ModelT]:
        """The cached collection, fetched on first use"""
        parsed = []
        for raw in await self.raw_items():
            try:
                parsed.append(self.model.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Skipping malformed {self.name} record: {e.error_count()} error(s)")
        return parsed

    async def get(self, record_id: RecordId) -> ModelT:
        for item in await self.items():
            if same_id(item.id, record_id):
                return item
        raise RecordNotFound(self.name, record_id)

    async def _mutate(self, call: Awaitable[Any], success_message: str, error_message: str) -> Any:
        try:
            result = await call
        except ResourceError as e:
            self.notifier.notify(NotificationKind.ERROR, f"{error_message} {e.message}")
            raise

        self.notifier.notify(NotificationKind.SUCCESS, success_message)
        await self.invalidate()
        await self.refresh()
        return result

    async def _merged(self, record_id: RecordId, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Current record with the non-null changes applied"""
        current = await self.get(record_id)
        payload = current.model_dump(mode="json")
        payload.update({key: value for key, value in changes.items() if value is not None})
        payload["id"] = current.id
        return payload

    async def update(self, record_id: RecordId, changes: Dict[str, Any]) -> Any:
        payload = await self._merged(record_id, changes)
        return await self._mutate(
            self.client.update(self._to_remote(payload)),
            self.update_success,
            self.update_error,
        )

    def _to_remote(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return payload

    async def delete(self, record_id: RecordId, confirmer: Confirmer) -> bool:
        """
        Delete after explicit confirmation.

        Returns False without touching the remote service when the
        confirmation is declined.
        """
        if not confirmer.confirm(DELETE_PROMPT):
            logger.info(f"Delete of {self.name} {record_id} cancelled")
            return False

        await self._mutate(self.client.delete(record_id), self.delete_success, self.delete_error)
        return True


class TripStore(ResourceStore[Trip]):
    name = "trips"
    model = Trip

    update_success = "The trip has been updated."
    update_error = "There was an error updating the trip."
    delete_success = "The trip has been deleted."
    delete_error = "Failed to delete the trip."
    create_success = "Trip added successfully!"
    create_error = "Failed to add trip."

    client: TripClient

    async def create(self, trip: TripCreate) -> Any:
        return await self._mutate(
            self.client.create(trip.to_remote()), self.create_success, self.create_error
        )

    async def update_status(self, trip_id: RecordId, status: Union[TripStatus, str]) -> Any:
        """Status change through the dedicated endpoint (no confirmation)"""
        value = status.value if isinstance(status, TripStatus) else str(status)
        return await self._mutate(
            self.client.update_status(trip_id, value),
            "Trip status updated successfully!",
            "Failed to update status.",
        )

    async def destination_name(self, trip_id: RecordId) -> Optional[str]:
        """Resolve a trip id to its destination for display"""
        try:
            return (await self.get(trip_id)).destination
        except RecordNotFound:
            return None

    async def booked_users(self, trip_id: Union[RecordId, str] = "all") -> List[BookedUser]:
        """
        Users booked onto one trip, or onto every trip when `trip_id` is "all".

        For "all" the per-trip requests run concurrently; trips whose request
        fails are skipped.
        """
        if str(trip_id) == "all":
            trips = await self.items()
            results = await asyncio.gather(
                *[self.client.booked_users(trip.id) for trip in trips],
                return_exceptions=True,
            )
            rows: List[Dict[str, Any]] = []
            for trip, result in zip(trips, results):
                if isinstance(result, BaseException):
                    logger.warning(f"Failed to fetch bookings for trip {trip.id}: {result}")
                    continue
                rows.extend(result or [])
        else:
            try:
                rows = await self.client.booked_users(trip_id) or []
            except ResourceError as e:
                logger.warning(f"Failed to fetch bookings for trip {trip_id}: {e.message}")
                rows = []

        return [BookedUser.model_validate(row) for row in rows]


class BookingStore(ResourceStore[Booking]):
    name = "bookings"
    model = Booking

    update_success = "Booking updated successfully!"
    update_error = "Failed to update booking. Please try again."
    delete_success = "Booking has been deleted."
    delete_error = "Failed to delete booking. Please try again."

    client: BookingClient

    def _to_remote(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return Booking.model_validate(payload).to_remote()

    async def search(self, term: Optional[str] = None) -> List[Booking]:
        """Case-insensitive match on the guest name"""
        bookings = await self.items()
        if not term:
            return bookings
        needle = term.lower()
        return [booking for booking in bookings if needle in booking.name.lower()]


class VideoStore(ResourceStore[Video]):
    name = "videos"
    model = Video

    update_success = "The video has been updated."
    update_error = "There was an error saving the video."
    delete_success = "The video has been deleted."
    delete_error = "There was an error deleting the video."
    create_success = "The video has been created."
    create_error = "There was an error saving the video."

    client: VideoClient

    async def create(self, video: VideoCreate) -> Any:
        return await self._mutate(
            self.client.create(video.model_dump(mode="json")),
            self.create_success,
            self.create_error,
        )


class PhotoStore(ResourceStore[GalleryPhoto]):
    name = "photos"
    model = GalleryPhoto

    client: PhotoClient

    async def upload(
        self,
        content: bytes,
        filename: str,
        content_type: Optional[str],
        image_title: str = "",
        description: str = "",
        image_location: str = "",
    ) -> Any:
        if not content_type or not content_type.startswith("image/"):
            raise ValueError("Please select a valid image file.")

        return await self._mutate(
            self.client.upload(
                content,
                filename,
                content_type,
                image_title=image_title,
                description=description,
                image_location=image_location,
            ),
            "Image uploaded successfully!",
            "Failed to upload image:",
        )

    async def like(self, photo_id: RecordId) -> int:
        """
        Like a photo and patch its cached like count in place
        (the remote answers with the new count).
        """
        photo = await self.get(photo_id)
        body = await self.client.like(photo.id)
        likes = int((body or {}).get("likes", photo.image_likes + 1))

        cached = await self.cache.get(self.name)
        if cached is not None:
            for raw in cached:
                if same_id(raw.get("id"), photo.id):
                    raw["image_likes"] = likes
            await self.cache.set(self.name, cached)

        logger.info(f"Photo {photo.id} now has {likes} likes")
        return likes


class DestinationStore(ResourceStore[Destination]):
    name = "destinations"
    model = Destination

    update_success = "The destination has been updated."
    update_error = "There was an error updating the destination."
    delete_success = "The destination has been deleted."
    delete_error = "There was an error deleting the destination."
    create_success = "Destination created successfully."
    create_error = "There was an error creating the destination."

    client: DestinationClient

    async def create(self, destination: DestinationCreate) -> Any:
        return await self._mutate(
            self.client.create(destination.to_remote()),
            self.create_success,
            self.create_error,
        )

    def _to_remote(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        image_urls = payload.pop("image_urls", None)
        if image_urls is not None:
            payload["d_images"] = DestinationImages.from_urls(image_urls).model_dump()
        return payload


class AboutStore:
    """About Us content; there is no list endpoint, the last saved content is kept here"""

    name = "about"

    def __init__(self, client: AboutClient, notifier: Notifier):
        self.client = client
        self.notifier = notifier
        self.current = AboutContent()

    async def update(
        self,
        title: str,
        story: str,
        image: Optional[tuple] = None,
    ) -> AboutContent:
        if image and not (image[2] or "").startswith("image/"):
            raise ValueError("Please select a valid image file")

        try:
            body = await self.client.update(title, story, image)
        except ResourceError as e:
            self.notifier.notify(
                NotificationKind.ERROR,
                f"Failed to update content. Please try again. {e.message}",
            )
            raise

        image_url = body.get("image_url") if isinstance(body, dict) else None
        self.current = AboutContent(
            title=title,
            story=story,
            image_url=image_url or self.current.image_url,
        )
        self.notifier.notify(NotificationKind.SUCCESS, "About Us content updated successfully!")
        return self.current
