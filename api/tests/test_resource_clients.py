import asyncio

import httpx
import pytest

from tourdesk.services.resources import RemoteService, ResourceError


def test_trip_list_issues_single_get(remote, remote_api):
    trips = asyncio.run(remote.trips.list())

    assert [trip["id"] for trip in trips] == [1, 2]
    assert len(remote_api.requests) == 1
    assert remote_api.requests[0].method == "GET"
    assert remote_api.requests[0].url.path == "/books/trips/"
    assert remote_api.requests[0].headers["accept"] == "application/json"


def test_trip_status_update_sends_query_parameter(remote, remote_api):
    asyncio.run(remote.trips.update_status(1, "completed"))

    [request] = remote_api.requests
    assert request.method == "PUT"
    assert request.url.path == "/books/trips/1/status"
    assert request.url.params["status"] == "completed"
    assert remote_api.trips[0]["status"] == "completed"


def test_trip_create_posts_json(remote, remote_api):
    created = asyncio.run(remote.trips.create({"destination": "Lamu", "gallery": ["https://img/l.jpg"]}))

    [request] = remote_api.requests
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/json"
    assert created["destination"] == "Lamu"
    assert "id" in created


def test_booked_users_endpoint(remote, remote_api):
    users = asyncio.run(remote.trips.booked_users(2))

    assert remote_api.requests[0].url.path == "/books/trips/2/users/full"
    assert users[0]["user_id"] == "u2"


@pytest.mark.parametrize("call, method, path", [
    (lambda r: r.bookings.list(), "GET", "/bookform/"),
    (lambda r: r.bookings.delete("b1"), "DELETE", "/bookform/b1"),
    (lambda r: r.videos.list(), "GET", "/videos/list"),
    (lambda r: r.videos.create({"video_title": "New"}), "POST", "/videos/upload"),
    (lambda r: r.videos.delete(1), "DELETE", "/videos/1"),
    (lambda r: r.photos.list(), "GET", "/photos/gallery"),
    (lambda r: r.photos.like("p1"), "POST", "/photos/photos/p1/like"),
    (lambda r: r.destinations.list(), "GET", "/places/"),
    (lambda r: r.destinations.update({"id": 7, "title": "Stone Town"}), "PUT", "/places/7"),
    (lambda r: r.destinations.delete(7), "DELETE", "/places/7"),
])
def test_endpoints(remote, remote_api, call, method, path):
    asyncio.run(call(remote))

    [request] = remote_api.requests
    assert request.method == method
    assert request.url.path == path


def test_photo_upload_is_multipart_with_query_metadata(remote, remote_api):
    asyncio.run(remote.photos.upload(
        b"\x89PNG...",
        "reef.png",
        "image/png",
        image_title="Reef",
        description="Coral garden",
        image_location="Mnemba",
    ))

    [request] = remote_api.requests
    assert request.url.path == "/photos/upload"
    assert request.url.params["image_title"] == "Reef"
    assert request.url.params["image_location"] == "Mnemba"
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'name="file"; filename="reef.png"' in request.content


def test_about_update_is_multipart(remote, remote_api):
    asyncio.run(remote.about.update("About", "Our story"))

    [request] = remote_api.requests
    assert request.url.path == "/aboutus/update"
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'name="story"' in request.content


def test_non_2xx_raises_resource_error_with_server_detail(remote, remote_api):
    remote_api.fail("DELETE", "/books/trips/1", 409, "Trip has bookings")

    with pytest.raises(ResourceError) as exc_info:
        asyncio.run(remote.trips.delete(1))

    assert exc_info.value.resource == "trips"
    assert exc_info.value.status_code == 409
    assert exc_info.value.message == "Trip has bookings"
    assert isinstance(exc_info.value.original_error, httpx.HTTPStatusError)
    assert len(remote_api.requests) == 1


def test_plain_text_error_body():
    def handler(request):
        return httpx.Response(503, text="Service Unavailable")

    remote = RemoteService(httpx.AsyncClient(base_url="https://remote.test", transport=httpx.MockTransport(handler)))

    with pytest.raises(ResourceError) as exc_info:
        asyncio.run(remote.videos.list())

    assert exc_info.value.message == "Service Unavailable"


def test_transport_failure_is_wrapped_and_not_retried():
    attempts = []

    def handler(request):
        attempts.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    remote = RemoteService(httpx.AsyncClient(base_url="https://remote.test", transport=httpx.MockTransport(handler)))

    with pytest.raises(ResourceError) as exc_info:
        asyncio.run(remote.bookings.list())

    assert exc_info.value.status_code is None
    assert "connection refused" in exc_info.value.message
    assert len(attempts) == 1


def test_health_check(remote, remote_api):
    assert asyncio.run(remote.health_check()) is True

    remote_api.fail("GET", "/books/trips/")
    assert asyncio.run(remote.health_check()) is False
