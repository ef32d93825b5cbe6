"""Helper functions for UI - API client calls and table formatting."""

from typing import Any

import httpx

DEV_USER_ID = "00000000-0000-0000-0000-000000000002"

INTERESTS = ["Culture", "Beaches", "Nature", "Wildlife"]
HOTEL_CATEGORIES = ["Low", "Middle", "Luxury"]
VEHICLE_TYPES = ["Car", "Van", "Bus"]
VEHICLE_CLASSES = ["Mid", "Luxury"]

TIMEOUT = 30.0


def get_auth_header(user_id: str = DEV_USER_ID, email: str | None = None) -> dict[str, str]:
    """Auth header for API calls (dev bearer format "<user_id>[:<email>]")."""
    token = f"{user_id}:{email}" if email else user_id
    return {"Authorization": f"Bearer {token}"}


def build_trip_request(
    days: int,
    guests: int,
    budget: float,
    interests: list[str],
    hotel_category: str | None,
    vehicle_type: str | None,
    vehicle_class: str | None = None,
    title: str | None = None,
) -> dict[str, Any]:
    """Build the JSON body for itinerary generation.

    Blank selections are sent as null so the backend reports them.
    """
    return {
        "days": days,
        "guests": guests,
        "budget": budget,
        "interests": interests,
        "hotel_category": hotel_category or None,
        "vehicle_type": vehicle_type or None,
        "vehicle_class": vehicle_class or None,
        "title": title.strip() if title and title.strip() else None,
    }


def error_message(response: httpx.Response) -> str:
    """Extract a readable message from an error response."""
    try:
        detail = response.json().get("detail")
    except ValueError:
        return f"Request failed ({response.status_code})"

    if isinstance(detail, dict):
        return str(detail.get("message", detail))
    if isinstance(detail, list) and detail:
        return str(detail[0].get("msg", detail[0]))
    return str(detail or f"Request failed ({response.status_code})")


def generate_itinerary(
    backend_url: str, trip: dict[str, Any], client: httpx.Client | None = None
) -> dict[str, Any]:
    """Call POST /itineraries/generate.

    Raises:
        ValueError: With the backend's message when the trip is rejected
        httpx.HTTPStatusError: On other failures
    """
    response = (client or httpx).post(
        f"{backend_url}/itineraries/generate",
        json=trip,
        headers=get_auth_header(),
        timeout=TIMEOUT,
    )
    if response.status_code == 422:
        raise ValueError(error_message(response))
    response.raise_for_status()
    result: dict[str, Any] = response.json()
    return result


def save_itinerary(
    backend_url: str,
    trip: dict[str, Any],
    result: dict[str, Any],
    title: str | None = None,
    client: httpx.Client | None = None,
) -> str:
    """Call POST /itineraries and return the new itinerary id."""
    response = (client or httpx).post(
        f"{backend_url}/itineraries",
        json={"title": title, "request": trip, "result": result},
        headers=get_auth_header(),
        timeout=TIMEOUT,
    )
    response.raise_for_status()
    return str(response.json()["itinerary_id"])


def list_itineraries(backend_url: str, client: httpx.Client | None = None) -> list[dict[str, Any]]:
    """Call GET /itineraries."""
    response = (client or httpx).get(
        f"{backend_url}/itineraries", headers=get_auth_header(), timeout=TIMEOUT
    )
    response.raise_for_status()
    items: list[dict[str, Any]] = response.json()
    return items


def download_pdf(
    backend_url: str, trip: dict[str, Any], result: dict[str, Any], client: httpx.Client | None = None
) -> bytes:
    """Call POST /itineraries/export/pdf for an unsaved itinerary."""
    response = (client or httpx).post(
        f"{backend_url}/itineraries/export/pdf",
        json={"request": trip, "result": result},
        headers=get_auth_header(),
        timeout=TIMEOUT,
    )
    response.raise_for_status()
    return response.content


def format_lkr(amount: float) -> str:
    """Format an amount in Sri Lankan rupees."""
    return f"LKR {amount:,.2f}"


def format_day_rows(result: dict[str, Any]) -> list[dict[str, str]]:
    """Flatten an itinerary result into table rows for display."""
    rows = []
    for day in result.get("days", []):
        rows.append(
            {
                "Day": str(day["day"]),
                "Interest": day["interest"],
                "Activity": day["activity"],
                "Hotel": day["hotel"]["hotel_name"],
                "Vehicle": f"{day['vehicle']['vehicle_type']} - {day['vehicle']['model']}",
                "Accommodation": format_lkr(day["accommodation_cost"]),
                "Transport": format_lkr(day["transport_cost"]),
                "Total": format_lkr(day["daily_total"]),
            }
        )
    return rows


def format_violations(result: dict[str, Any]) -> list[str]:
    """Violation messages for display."""
    return [v["message"] for v in result.get("violations", [])]
