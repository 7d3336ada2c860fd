import pytest

from tourdesk.config import ConfigurationError, Settings


# ---------- SERVICE ----------

def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/health/live").json() == {"status": "alive"}


def test_readiness_reports_remote_service(client, remote_api):
    assert client.get("/health/ready").json()["status"] == "ready"

    remote_api.fail("GET", "/books/trips/")
    body = client.get("/health/ready").json()
    assert body["status"] == "degraded"
    assert body["checks"]["remote_api"] is False


def test_metrics_exposed(client):
    client.get("/health")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "http_requests_total" in response.text


def test_missing_identity_key_refuses_to_start():
    with pytest.raises(ConfigurationError):
        Settings(IDENTITY_PROVIDER_PUBLISHABLE_KEY="").require_identity_key()

    assert Settings(IDENTITY_PROVIDER_PUBLISHABLE_KEY="pk_live").require_identity_key() == "pk_live"


# ---------- TRIPS ----------

def test_list_trips(client, remote_api):
    response = client.get("/trips")

    assert response.status_code == 200
    assert [trip["destination"] for trip in response.json()] == ["Zanzibar", "Serengeti"]

    client.get("/trips")
    assert len(remote_api.calls("GET", "/books/trips/")) == 1


def test_list_trips_filtered_by_status(client):
    response = client.get("/trips", params={"status": "completed"})

    assert [trip["id"] for trip in response.json()] == [2]


def test_list_trips_unknown_status_filter(client):
    response = client.get("/trips", params={"status": "archived"})

    assert response.status_code == 400


def test_get_trip_not_found(client):
    response = client.get("/trips/999")

    assert response.status_code == 404


def test_update_trip_status(client, remote_api):
    response = client.put("/trips/1/status", json={"status": "completed"})

    assert response.status_code == 200
    [request] = remote_api.calls("PUT", "/books/trips/1/status")
    assert request.url.params["status"] == "completed"

    notifications = response.json()["notifications"]
    assert [n["kind"] for n in notifications] == ["success"]
    assert notifications[0]["message"] == "Trip status updated successfully!"

    assert client.get("/trips/1").json()["status"] == "completed"


def test_update_trip_status_rejects_unknown_value(client, remote_api):
    response = client.put("/trips/1/status", json={"status": "archived"})

    assert response.status_code == 422
    assert remote_api.requests == []


def test_delete_trip_without_confirmation(client, remote_api):
    response = client.delete("/trips/1")

    assert response.status_code == 200
    assert response.json() == {"deleted": False, "notifications": []}
    assert remote_api.calls("DELETE") == []


def test_delete_trip_with_confirmation(client, remote_api):
    response = client.delete("/trips/1", params={"confirm": "true"})

    assert response.status_code == 200
    assert response.json()["deleted"] is True
    assert response.json()["notifications"][0]["message"] == "The trip has been deleted."
    assert len(remote_api.calls("DELETE", "/books/trips/1")) == 1
    assert [trip["id"] for trip in client.get("/trips").json()] == [2]


def test_remote_failure_maps_to_bad_gateway(client, remote_api):
    remote_api.fail("DELETE", "/books/trips/1", 500, "Database unavailable")

    response = client.delete("/trips/1", params={"confirm": "true"})

    assert response.status_code == 502
    assert response.json() == {
        "detail": "Database unavailable",
        "resource": "trips",
        "upstream_status": 500,
    }

    # the error toast is still waiting to be read
    [notification] = client.get("/notifications").json()
    assert notification["kind"] == "error"
    assert client.get("/notifications").json() == []


def test_failed_mutation_does_not_leak_into_next_response(client, remote_api):
    remote_api.fail("DELETE", "/books/trips/2", 500, "boom")
    assert client.delete("/trips/2", params={"confirm": "true"}).status_code == 502

    response = client.put("/trips/1/status", json={"status": "completed"})

    notifications = response.json()["notifications"]
    assert [(n["kind"], n["message"]) for n in notifications] == [
        ("success", "Trip status updated successfully!"),
    ]


def test_create_trip(client, remote_api):
    response = client.post("/trips", json={
        "destination": "Lamu",
        "image_url": "https://img/l.jpg",
        "start_date": "2025-06-01T00:00:00",
        "end_date": "2025-06-05T00:00:00",
        "gallery": "https://img/l1.jpg, https://img/l2.jpg",
    })

    assert response.status_code == 201
    assert remote_api.trips[-1]["gallery"] == ["https://img/l1.jpg", "https://img/l2.jpg"]


def test_create_trip_requires_gallery(client, remote_api):
    response = client.post("/trips", json={
        "destination": "Lamu",
        "image_url": "https://img/l.jpg",
        "start_date": "2025-06-01T00:00:00",
        "end_date": "2025-06-05T00:00:00",
        "gallery": [],
    })

    assert response.status_code == 422
    assert remote_api.requests == []


def test_trip_bookings(client):
    assert [u["user_id"] for u in client.get("/trips/all/bookings").json()] == ["u1", "u2"]
    assert [u["user_id"] for u in client.get("/trips/1/bookings").json()] == ["u1"]


# ---------- BOOKINGS ----------

def test_search_bookings(client):
    response = client.get("/bookings", params={"search": "brian"})

    assert [booking["id"] for booking in response.json()] == ["b2"]
    assert response.json()[0]["guest_capacity"] == 4


def test_update_booking(client, remote_api):
    response = client.put("/bookings/b1", json={"guest_capacity": 5})

    assert response.status_code == 200
    assert remote_api.bookings[0]["guest_capcity"] == 5


# ---------- MEDIA ----------

def test_list_videos_normalizes_tags(client):
    assert client.get("/videos").json()[0]["tags"] == ["beach", "sunset"]


def test_upload_photo(client, remote_api):
    response = client.post(
        "/photos",
        files={"file": ("reef.jpg", b"\xff\xd8\xff", "image/jpeg")},
        data={"image_title": "Reef", "image_location": "Mnemba"},
    )

    assert response.status_code == 201
    [request] = remote_api.calls("POST", "/photos/upload")
    assert request.url.params["image_title"] == "Reef"


def test_upload_photo_rejects_non_image(client, remote_api):
    response = client.post("/photos", files={"file": ("notes.txt", b"hello", "text/plain")})

    assert response.status_code == 400
    assert remote_api.requests == []


def test_like_photo(client):
    response = client.post("/photos/p1/like")

    assert response.json() == {"id": "p1", "likes": 6}


def test_create_destination(client, remote_api):
    response = client.post("/destinations", json={
        "title": "Lamu",
        "image_urls": ["https://img/1.jpg", "https://img/2.jpg"],
    })

    assert response.status_code == 201
    assert remote_api.places[-1]["d_images"]["thumbnail"] == "https://img/1.jpg"


def test_about_defaults_then_update(client):
    assert client.get("/about").json()["title"] == "Welcome to JB HeartFelt Tours"

    response = client.put("/about", data={"title": "Our Story", "story": "Since 2010"})

    assert response.status_code == 200
    assert client.get("/about").json()["title"] == "Our Story"


# ---------- DASHBOARD ----------

def test_dashboard(client):
    response = client.get("/dashboard")

    assert response.status_code == 200
    body = response.json()
    assert body["total_customers"] == 2
    assert body["total_orders"] == 2
    assert len(body["monthly_sales"]["data"]) == 12
    assert {entry["name"] for entry in body["demographics"]} == {"Zanzibar", "Serengeti"}
    assert body["is_loading"] is False


def test_dashboard_with_remote_down(client, remote_api):
    remote_api.fail("GET", "/bookform/")
    remote_api.fail("GET", "/books/trips/")

    body = client.get("/dashboard").json()

    assert body["total_customers"] == 0
    assert body["demographics"] == []
    assert body["monthly_progress"]["target"] == 30


# ---------- PREFERENCES & CACHE ----------

def test_view_mode_preferences(client):
    assert client.get("/preferences/trips/view-mode").json() == {"view_mode": "grid"}

    client.put("/preferences/trips/view-mode", json={"view_mode": "list"})

    assert client.get("/preferences/trips/view-mode").json() == {"view_mode": "list"}
    assert client.put("/preferences/trips/view-mode", json={"view_mode": "table"}).status_code == 422


def test_cache_invalidation(client, remote_api):
    client.get("/trips")
    client.post("/cache/invalidate/trips")
    client.get("/trips")

    assert len(remote_api.calls("GET", "/books/trips/")) == 2
    assert client.post("/cache/invalidate/unknown").status_code == 404
