"""Tests for UI helper functions."""

import json
from typing import Any

import httpx
import pytest

from ui.helpers import (
    build_trip_request,
    error_message,
    format_day_rows,
    format_lkr,
    format_violations,
    generate_itinerary,
    get_auth_header,
    save_itinerary,
)

RESULT: dict[str, Any] = {
    "days": [
        {
            "day": 1,
            "interest": "Culture",
            "activity": "Temple of the Tooth: Sacred relic temple",
            "hotel": {"hotel_name": "Kandy Palace"},
            "vehicle": {"vehicle_type": "Car", "model": "Prius"},
            "accommodation_cost": 100.0,
            "transport_cost": 50.0,
            "daily_total": 150.0,
        }
    ],
    "total_cost": 150.0,
    "violations": [{"message": "Total itinerary cost exceeds the stated budget."}],
}


def test_get_auth_header_formats() -> None:
    assert get_auth_header("abc") == {"Authorization": "Bearer abc"}
    assert get_auth_header("abc", "a@b.c") == {"Authorization": "Bearer abc:a@b.c"}


def test_build_trip_request_sends_blanks_as_null() -> None:
    trip = build_trip_request(3, 2, 1000.0, ["Culture"], "", "Car", "", title="  ")

    assert trip["hotel_category"] is None
    assert trip["vehicle_type"] == "Car"
    assert trip["vehicle_class"] is None
    assert trip["title"] is None


def test_format_day_rows() -> None:
    rows = format_day_rows(RESULT)

    assert rows == [
        {
            "Day": "1",
            "Interest": "Culture",
            "Activity": "Temple of the Tooth: Sacred relic temple",
            "Hotel": "Kandy Palace",
            "Vehicle": "Car - Prius",
            "Accommodation": "LKR 100.00",
            "Transport": "LKR 50.00",
            "Total": "LKR 150.00",
        }
    ]


def test_format_lkr_and_violations() -> None:
    assert format_lkr(1234567.5) == "LKR 1,234,567.50"
    assert format_violations(RESULT) == ["Total itinerary cost exceeds the stated budget."]
    assert format_violations({}) == []


def test_error_message_reads_structured_detail() -> None:
    response = httpx.Response(
        422, json={"detail": {"code": "no_hotels_found", "message": "No Luxury hotels found"}}
    )
    assert error_message(response) == "No Luxury hotels found"

    response = httpx.Response(422, json={"detail": [{"msg": "field required"}]})
    assert error_message(response) == "field required"


def test_generate_itinerary_raises_value_error_on_rejection() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            422, json={"detail": {"code": "no_interests", "message": "Please select at least one interest"}}
        )

    client = httpx.Client(transport=httpx.MockTransport(handler))

    with pytest.raises(ValueError, match="Please select at least one interest"):
        generate_itinerary("http://backend", {"days": 3}, client=client)


def test_save_itinerary_returns_id() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"itinerary_id": "abc-123", "title": "Trip"})

    client = httpx.Client(transport=httpx.MockTransport(handler))

    itinerary_id = save_itinerary("http://backend", {"days": 3}, RESULT, "Trip", client=client)

    assert itinerary_id == "abc-123"
    assert seen[0].url.path == "/itineraries"
    assert json.loads(seen[0].content)["title"] == "Trip"
