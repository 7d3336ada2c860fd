import os

# The app refuses to start without the identity provider key
os.environ.setdefault("IDENTITY_PROVIDER_PUBLISHABLE_KEY", "pk_test_tourdesk")
# Point the production client factory at the fake remote service
os.environ.setdefault("REMOTE_API_BASE_URL", "https://remote.test")

import copy
import json
import re

import httpx
import pytest
from fastapi.testclient import TestClient

from tourdesk.main import app
from tourdesk.services.registry import StoreRegistry, get_registry
from tourdesk.services.resources import RemoteService
from tourdesk.utils.http import build_http_client

BASE_URL = "https://remote.test"


# ---------- FAKE REMOTE SERVICE ----------

class FakeTourismAPI:
    """
    In-memory stand-in for the remote tourism REST service.

    Records every request and lets a test force a failure for a given
    (method, path) pair.
    """

    def __init__(self):
        self.trips = [
            {"id": 1, "destination": "Zanzibar", "price": 1200, "status": "active",
             "gallery": ["https://img/z1.jpg"], "created_at": "2025-03-02T10:00:00"},
            {"id": 2, "destination": "Serengeti", "price": 2400, "status": "completed",
             "gallery": "https://img/s1.jpg, https://img/s2.jpg", "created_at": "2024-03-15T10:00:00"},
        ]
        self.bookings = [
            {"id": "b1", "name": "Amina Yusuf", "email": "amina@example.com", "destination": "Zanzibar",
             "guest_capcity": 2, "activites": "snorkelling", "created_at": "2025-03-01T09:00:00"},
            {"id": "b2", "name": "Brian Otieno", "email": "brian@example.com", "destination": "Serengeti",
             "guest_capcity": 4, "activites": "safari", "created_at": "2025-02-11T09:00:00"},
        ]
        self.videos = [
            {"id": 1, "video_url": "https://v/1.mp4", "video_title": "Sunset", "video_likes": 3,
             "tags": "beach, sunset", "description": "Golden hour"},
        ]
        self.photos = [
            {"id": "p1", "image_url": "https://img/p1.jpg", "image_title": None, "image_likes": 5,
             "created_at": "2025-01-01T00:00:00"},
        ]
        self.places = [
            {"id": 7, "title": "Stone Town", "description": "Old town", "key_highlights": ["Forodhani", "Spice market"],
             "ratings": 4.5, "d_images": {"thumbnail": "https://img/st.jpg", "gallery": []}},
        ]
        self.booked_users = {
            "1": [{"user_id": "u1", "name": "Amina Yusuf", "email": "amina@example.com", "trip_id": 1}],
            "2": [{"user_id": "u2", "name": "Brian Otieno", "email": "brian@example.com", "trip_id": 2}],
        }
        self.requests = []
        self.failures = {}
        self._next_id = 100

    # Test helpers

    def fail(self, method: str, path: str, status_code: int = 500, detail: str = "Internal error"):
        self.failures[(method, path)] = (status_code, detail)

    def calls(self, method: str = None, path: str = None):
        return [
            request for request in self.requests
            if (method is None or request.method == method)
            and (path is None or request.url.path == path)
        ]

    def _new_id(self):
        self._next_id += 1
        return self._next_id

    # Transport

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key in self.failures:
            status_code, detail = self.failures[key]
            return httpx.Response(status_code, json={"detail": detail})

        path = request.url.path
        method = request.method

        routes = [
            (r"^/books/trips/$", self._collection(self.trips)),
            (r"^/books/trips/(?P<id>[^/]+)/status$", self._trip_status),
            (r"^/books/trips/(?P<id>[^/]+)/users/full$", self._booked_users),
            (r"^/books/trips/(?P<id>[^/]+)$", self._item(self.trips)),
            (r"^/bookform/$", self._collection(self.bookings)),
            (r"^/bookform/(?P<id>[^/]+)$", self._item(self.bookings)),
            (r"^/videos/list$", self._collection(self.videos)),
            (r"^/videos/upload$", self._collection(self.videos)),
            (r"^/videos/(?P<id>[^/]+)$", self._item(self.videos)),
            (r"^/photos/gallery$", self._collection(self.photos)),
            (r"^/photos/upload$", self._photo_upload),
            (r"^/photos/photos/(?P<id>[^/]+)/like$", self._photo_like),
            (r"^/places/$", self._collection(self.places)),
            (r"^/places/(?P<id>[^/]+)$", self._item(self.places)),
            (r"^/aboutus/update$", self._about),
        ]
        for pattern, handler in routes:
            match = re.match(pattern, path)
            if match:
                return handler(method, request, **match.groupdict())

        return httpx.Response(404, json={"detail": "Not Found"})

    def _collection(self, items):
        def handler(method, request):
            if method == "GET":
                return httpx.Response(200, json=copy.deepcopy(items))
            if method == "POST":
                record = json.loads(request.content)
                record["id"] = self._new_id()
                items.append(record)
                return httpx.Response(200, json=record)
            return httpx.Response(405, json={"detail": "Method Not Allowed"})
        return handler

    def _item(self, items):
        def handler(method, request, id):
            index = next((i for i, item in enumerate(items) if str(item["id"]) == id), None)
            if index is None:
                return httpx.Response(404, json={"detail": f"{id} not found"})
            if method == "PUT":
                items[index] = json.loads(request.content)
                return httpx.Response(200, json=items[index])
            if method == "DELETE":
                items.pop(index)
                return httpx.Response(200, json={"message": "Deleted"})
            return httpx.Response(200, json=items[index])
        return handler

    def _trip_status(self, method, request, id):
        for trip in self.trips:
            if str(trip["id"]) == id:
                trip["status"] = request.url.params["status"]
                return httpx.Response(200, json=trip)
        return httpx.Response(404, json={"detail": "Trip not found"})

    def _booked_users(self, method, request, id):
        return httpx.Response(200, json=self.booked_users.get(id, []))

    def _photo_upload(self, method, request):
        record = {
            "id": f"p{self._new_id()}",
            "image_url": "https://img/uploaded.jpg",
            "image_title": request.url.params.get("image_title"),
            "description": request.url.params.get("description"),
            "image_location": request.url.params.get("image_location"),
            "image_likes": 0,
        }
        self.photos.append(record)
        return httpx.Response(200, json=record)

    def _photo_like(self, method, request, id):
        for photo in self.photos:
            if str(photo["id"]) == id:
                photo["image_likes"] += 1
                return httpx.Response(200, json={"likes": photo["image_likes"]})
        return httpx.Response(404, json={"detail": "Photo not found"})

    def _about(self, method, request):
        return httpx.Response(200, json={"message": "updated", "image_url": "https://img/about.jpg"})


# ---------- TEST FIXTURES ----------

@pytest.fixture
def remote_api():
    return FakeTourismAPI()


@pytest.fixture
def http_client(remote_api):
    return build_http_client(transport=httpx.MockTransport(remote_api.handle))


@pytest.fixture
def remote(http_client):
    return RemoteService(http_client)


@pytest.fixture
def registry(remote):
    return StoreRegistry(remote)


@pytest.fixture
def client(registry):
    """Override get_registry dependency for FastAPI TestClient."""
    app.dependency_overrides[get_registry] = lambda: registry
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
