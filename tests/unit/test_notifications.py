"""Tests for booking notification emails."""

import json

import httpx
import pytest

from backend.app.adapters.notifications import (
    BookingNotification,
    build_booking_email,
    send_booking_notification,
)
from backend.app.models.common import BookingType
from backend.app.utils.metrics import notification_failures_total


def vehicle_notification(**overrides: object) -> BookingNotification:
    fields: dict[str, object] = {
        "booking_type": BookingType.vehicle,
        "details": {
            "vehicle_model": "Toyota KDH",
            "vehicle_type": "Van",
            "rental_start_date": "2026-03-01",
            "rental_end_date": "2026-03-04",
            "estimated_km": 250.0,
            "subtotal": 45000.0,
            "service_charge": 4500.0,
        },
        "customer_email": "guest@example.com",
        "customer_name": "Nimal",
        "total_amount": 49500.0,
        "owner_email": "driver@example.com",
    }
    fields.update(overrides)
    return BookingNotification.model_validate(fields)


def failures(booking_type: str) -> float:
    return notification_failures_total.labels(booking_type=booking_type)._value.get()


def test_vehicle_email_goes_to_admin_and_owner() -> None:
    message = build_booking_email(
        vehicle_notification(), admin_email="admin@example.com", sender="Travel <a@b.c>"
    )

    assert message.subject == "New Vehicle Booking"
    assert message.to == ["admin@example.com", "driver@example.com"]
    assert "Toyota KDH" in message.html
    assert "LKR 49500.00" in message.html


def test_accommodation_email_subject_and_fields() -> None:
    notification = BookingNotification(
        booking_type=BookingType.accommodation,
        details={"hotel_name": "Temple View", "number_of_nights": 3, "room_type": "Double"},
        customer_email="guest@example.com",
        total_amount=59400.0,
    )

    message = build_booking_email(notification, admin_email="admin@example.com", sender="x")

    assert message.subject == "New Accommodation Booking"
    assert message.to == ["admin@example.com"]
    assert "Temple View" in message.html
    assert "Number of Nights" in message.html


def test_email_escapes_user_content() -> None:
    message = build_booking_email(
        vehicle_notification(customer_name="<script>alert(1)</script>"),
        admin_email="admin@example.com",
        sender="x",
    )

    assert "<script>" not in message.html
    assert "&lt;script&gt;" in message.html


def test_owner_matching_admin_is_not_duplicated() -> None:
    message = build_booking_email(
        vehicle_notification(owner_email="admin@example.com"),
        admin_email="admin@example.com",
        sender="x",
    )

    assert message.to == ["admin@example.com"]


@pytest.mark.asyncio
async def test_send_posts_to_resend() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "email_123"})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    sent = await send_booking_notification(
        vehicle_notification(),
        api_key="re_test",
        admin_email="admin@example.com",
        sender="Travel <onboarding@resend.dev>",
        client=client,
    )

    assert sent is True
    assert seen[0].headers["Authorization"] == "Bearer re_test"
    body = json.loads(seen[0].content)
    assert body["from"] == "Travel <onboarding@resend.dev>"
    assert body["to"] == ["admin@example.com", "driver@example.com"]
    assert body["subject"] == "New Vehicle Booking"


@pytest.mark.asyncio
async def test_send_failure_returns_false_without_retry() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(500)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    before = failures("vehicle")

    sent = await send_booking_notification(
        vehicle_notification(),
        api_key="re_test",
        admin_email="admin@example.com",
        sender="x",
        client=client,
    )

    assert sent is False
    assert calls == 1
    assert failures("vehicle") == before + 1


@pytest.mark.asyncio
async def test_send_skipped_without_api_key() -> None:
    sent = await send_booking_notification(
        vehicle_notification(), api_key="", admin_email="admin@example.com", sender="x"
    )

    assert sent is False


@pytest.mark.asyncio
async def test_send_without_admin_email_fails_softly() -> None:
    sent = await send_booking_notification(
        vehicle_notification(), api_key="re_test", admin_email="", sender="x"
    )

    assert sent is False
