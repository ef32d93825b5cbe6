"""Tests for geocoding and driving directions adapters."""

import json

import httpx
import pytest

from backend.app.adapters.directions import (
    DirectionsError,
    GeocodingError,
    PlaceNotFoundError,
    fetch_route,
    geocode_place,
)
from backend.app.models.common import Geo
from backend.app.models.travel import Stop

ORS_RESPONSE = {
    "features": [
        {
            "properties": {"summary": {"distance": 115500.0, "duration": 9000.0}},
            "geometry": {"coordinates": [[80.6337, 7.2906], [80.7, 7.0], [81.0546, 6.8667]]},
        }
    ]
}


def located(name: str, lat: float, lon: float) -> Stop:
    return Stop(name=name, location=Geo(lat=lat, lon=lon))


@pytest.mark.asyncio
async def test_geocode_place_suffixes_country() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=[{"display_name": "Ella, Badulla District, Sri Lanka", "lat": "6.8667", "lon": "81.0466"}],
        )

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    stop = await geocode_place("Ella", client=client)

    assert seen[0].url.params["q"] == "Ella, Sri Lanka"
    assert stop.name == "Ella"
    assert stop.location == Geo(lat=6.8667, lon=81.0466)


@pytest.mark.asyncio
async def test_geocode_place_not_found() -> None:
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[])))

    with pytest.raises(PlaceNotFoundError, match="Location not found: Nowhere"):
        await geocode_place("Nowhere", client=client)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>rate limited</html>"),
        httpx.Response(200, json=[{"lat": "6.87"}]),
        httpx.Response(200, json=[{"display_name": "Ella", "lat": "north", "lon": "81.05"}]),
        httpx.Response(200, json={"error": "Unable to geocode"}),
    ],
)
async def test_geocode_place_malformed_response(response: httpx.Response) -> None:
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: response))

    with pytest.raises(GeocodingError, match="unexpected response"):
        await geocode_place("Ella", client=client)


@pytest.mark.asyncio
async def test_geocode_place_rejects_blank_query() -> None:
    with pytest.raises(GeocodingError):
        await geocode_place("  ")


@pytest.mark.asyncio
async def test_fetch_route_converts_units_and_coordinates() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=ORS_RESPONSE)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    stops = [located("Kandy", 7.2906, 80.6337), located("Ella", 6.8667, 81.0546)]

    route = await fetch_route(stops, api_key="ors-key", client=client)

    body = json.loads(seen[0].content)
    assert body["coordinates"] == [[80.6337, 7.2906], [81.0546, 6.8667]]
    assert seen[0].headers["Authorization"] == "ors-key"

    assert route.distance_km == pytest.approx(115.5)
    assert route.duration_hours == pytest.approx(2.5)
    assert route.geometry[0] == Geo(lat=7.2906, lon=80.6337)
    assert len(route.geometry) == 3
    assert route.provenance.source == "directions:openrouteservice"


@pytest.mark.asyncio
async def test_fetch_route_needs_two_located_stops() -> None:
    stops = [located("Kandy", 7.2906, 80.6337), Stop(name="Ella")]

    with pytest.raises(ValueError, match="at least 2"):
        await fetch_route(stops, api_key="ors-key")


@pytest.mark.asyncio
async def test_fetch_route_caps_stops() -> None:
    stops = [located(f"S{i}", 7.0 + i / 100, 80.0) for i in range(9)]

    with pytest.raises(ValueError, match="Maximum 8"):
        await fetch_route(stops, api_key="ors-key")


@pytest.mark.asyncio
async def test_fetch_route_provider_failure() -> None:
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(403)))
    stops = [located("Kandy", 7.2906, 80.6337), located("Ella", 6.8667, 81.0546)]

    with pytest.raises(DirectionsError):
        await fetch_route(stops, api_key="bad-key", client=client)
