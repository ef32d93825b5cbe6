"""Integration tests for booking endpoints."""

import json
import uuid

import httpx
import pytest

from backend.app.api.routes.bookings import get_notification_client
from backend.app.config import Settings
from backend.app.main import app

GUEST_ID = uuid.uuid4()
GUEST = {"Authorization": f"Bearer {GUEST_ID}:guest@example.com"}


async def first_vehicle(client: httpx.AsyncClient, vehicle_type: str = "Van") -> dict:
    response = await client.get("/catalog/vehicles", params={"type": vehicle_type})
    return response.json()[0]


async def first_hotel(client: httpx.AsyncClient, city: str = "Kandy") -> dict:
    response = await client.get("/catalog/hotels", params={"city": city, "category": "Middle"})
    return response.json()[0]


@pytest.mark.asyncio
async def test_vehicle_booking_is_priced_and_confirmed(api_client: httpx.AsyncClient) -> None:
    vehicle = await first_vehicle(api_client)

    response = await api_client.post(
        "/bookings/vehicle",
        headers=GUEST,
        json={
            "vehicle_id": vehicle["vehicle_id"],
            "rental_start_date": "2026-03-01",
            "rental_end_date": "2026-03-04",
            "estimated_km": 250,
        },
    )

    assert response.status_code == 201
    body = response.json()
    booking = body["booking"]
    assert booking["booking_type"] == "vehicle"
    assert booking["subtotal"] == pytest.approx(250 * vehicle["per_km_charge"])
    assert booking["service_charge"] == pytest.approx(booking["subtotal"] * 0.10)
    assert booking["total_amount"] == pytest.approx(booking["subtotal"] * 1.10)
    assert booking["booking_status"] == "confirmed"
    assert booking["payment_method"] == "card"

    # No email provider configured in tests
    assert body["notification_sent"] is False
    assert body["warning"]


@pytest.mark.asyncio
async def test_accommodation_booking_counts_nights(api_client: httpx.AsyncClient) -> None:
    hotel = await first_hotel(api_client)

    response = await api_client.post(
        "/bookings/accommodation",
        headers=GUEST,
        json={
            "hotel_id": hotel["hotel_id"],
            "check_in_date": "2026-03-01",
            "check_out_date": "2026-03-04",
            "number_of_persons": 2,
            "room_type": "Double",
        },
    )

    assert response.status_code == 201
    booking = response.json()["booking"]
    assert booking["number_of_nights"] == 3
    assert booking["subtotal"] == pytest.approx(3 * hotel["per_night_charge"])
    assert booking["total_amount"] == pytest.approx(3 * hotel["per_night_charge"] * 1.10)


@pytest.mark.asyncio
async def test_checkout_must_follow_checkin(api_client: httpx.AsyncClient) -> None:
    hotel = await first_hotel(api_client)

    response = await api_client.post(
        "/bookings/accommodation",
        json={
            "hotel_id": hotel["hotel_id"],
            "check_in_date": "2026-03-04",
            "check_out_date": "2026-03-04",
            "room_type": "Double",
        },
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_unknown_vehicle_is_404(api_client: httpx.AsyncClient) -> None:
    response = await api_client.post(
        "/bookings/vehicle",
        json={
            "vehicle_id": str(uuid.uuid4()),
            "rental_start_date": "2026-03-01",
            "rental_end_date": "2026-03-02",
            "estimated_km": 10,
        },
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_notification_sent_to_admin_and_owner(
    api_client: httpx.AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    sent: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(json.loads(request.content))
        return httpx.Response(200, json={"id": "email_1"})

    async def mock_client() -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    settings = Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        resend_api_key="re_test",
        admin_email="admin@example.com",
    )
    monkeypatch.setattr("backend.app.api.routes.bookings.get_settings", lambda: settings)
    app.dependency_overrides[get_notification_client] = mock_client

    vehicle = await first_vehicle(api_client)
    response = await api_client.post(
        "/bookings/vehicle",
        headers=GUEST,
        json={
            "vehicle_id": vehicle["vehicle_id"],
            "rental_start_date": "2026-03-01",
            "rental_end_date": "2026-03-02",
            "estimated_km": 80,
        },
    )

    assert response.status_code == 201
    assert response.json()["notification_sent"] is True
    assert response.json()["warning"] is None
    assert sent[0]["subject"] == "New Vehicle Booking"
    assert sent[0]["to"] == ["admin@example.com", "dev@example.com"]
    assert "guest@example.com" in sent[0]["html"]


@pytest.mark.asyncio
async def test_customer_and_owner_views(api_client: httpx.AsyncClient) -> None:
    vehicle = await first_vehicle(api_client)
    created = await api_client.post(
        "/bookings/vehicle",
        headers=GUEST,
        json={
            "vehicle_id": vehicle["vehicle_id"],
            "rental_start_date": "2026-03-01",
            "rental_end_date": "2026-03-02",
            "estimated_km": 50,
        },
    )
    booking_id = created.json()["booking"]["booking_id"]

    mine = await api_client.get("/bookings", headers=GUEST)
    assert [b["booking_id"] for b in mine.json()] == [booking_id]

    # Dev user owns every seeded listing
    owned = await api_client.get("/bookings/owned")
    assert owned.status_code == 200
    assert booking_id in [b["booking_id"] for b in owned.json()]

    # Guest holds no driver or hotel-owner role
    forbidden = await api_client.get("/bookings/owned", headers=GUEST)
    assert forbidden.status_code == 403
