"""Directions adapter - Nominatim geocoding and OpenRouteService driving routes."""

import httpx

from backend.app.adapters.provenance import provider_provenance
from backend.app.models.common import Geo
from backend.app.models.travel import Route, Stop

MIN_STOPS = 2
MAX_STOPS = 8


class GeocodingError(Exception):
    """Geocoding lookup failed."""

    pass


class PlaceNotFoundError(GeocodingError):
    """Place name is blank or matched nothing."""

    pass


class DirectionsError(Exception):
    """Routing provider failed or returned an unusable response."""

    pass


async def geocode_place(
    query: str,
    base_url: str = "https://nominatim.openstreetmap.org/search",
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> Stop:
    """Resolve a Sri Lankan place name to coordinates.

    Args:
        query: Place name, e.g. "Ella"
        base_url: Nominatim search endpoint
        client: Optional httpx client (for testing with mocks)
        timeout: Request timeout in seconds when no client is given

    Returns:
        Stop with the short display name and location

    Raises:
        PlaceNotFoundError: If the place name is blank or unknown
        GeocodingError: On network, HTTP or response-shape errors
    """
    query = query.strip()
    if not query:
        raise PlaceNotFoundError("Place name is empty")

    params = {"q": f"{query}, Sri Lanka", "format": "json", "limit": "1"}

    close_client = False
    if client is None:
        client = httpx.AsyncClient(
            timeout=timeout, headers={"User-Agent": "lanka-trip-planner/0.1"}
        )
        close_client = True

    try:
        response = await client.get(base_url, params=params)
        response.raise_for_status()
        matches = response.json()

        if not matches:
            raise PlaceNotFoundError(f"Location not found: {query}")

        first = matches[0]
        return Stop(
            name=first["display_name"].split(",")[0],
            location=Geo(lat=float(first["lat"]), lon=float(first["lon"])),
        )
    except httpx.HTTPError as e:
        raise GeocodingError(f"Failed to find location: {query}") from e
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise GeocodingError("Geocoding provider returned an unexpected response") from e
    finally:
        if close_client:
            await client.aclose()


async def fetch_route(
    stops: list[Stop],
    api_key: str,
    base_url: str = "https://api.openrouteservice.org/v2/directions/driving-car/geojson",
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> Route:
    """Compute a driving route through the located stops, in order.

    Args:
        stops: Stops; those without a location are ignored
        api_key: OpenRouteService API key
        base_url: ORS GeoJSON directions endpoint
        client: Optional httpx client (for testing with mocks)
        timeout: Request timeout in seconds when no client is given

    Returns:
        Route with distance in km, duration in hours and lat/lon geometry

    Raises:
        ValueError: If fewer than 2 or more than 8 located stops
        DirectionsError: On network, HTTP or response-shape errors
    """
    located = [s for s in stops if s.location is not None]
    if len(located) < MIN_STOPS:
        raise ValueError(f"Please add at least {MIN_STOPS} locations")
    if len(located) > MAX_STOPS:
        raise ValueError(f"Maximum {MAX_STOPS} stops allowed")

    # ORS expects [lon, lat]
    coordinates = [[s.location.lon, s.location.lat] for s in located if s.location]

    close_client = False
    if client is None:
        client = httpx.AsyncClient(timeout=timeout)
        close_client = True

    try:
        response = await client.post(
            base_url,
            json={"coordinates": coordinates},
            headers={"Authorization": api_key, "Content-Type": "application/json"},
        )
        response.raise_for_status()
        data = response.json()

        feature = data["features"][0]
        summary = feature["properties"]["summary"]
        geometry = [Geo(lat=c[1], lon=c[0]) for c in feature["geometry"]["coordinates"]]

        return Route(
            stops=located,
            distance_km=summary["distance"] / 1000,
            duration_hours=summary["duration"] / 3600,
            geometry=geometry,
            provenance=provider_provenance("directions", "openrouteservice", url=base_url),
        )
    except httpx.HTTPError as e:
        raise DirectionsError(f"Directions lookup failed: {type(e).__name__}") from e
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise DirectionsError("Routing provider returned an unexpected response") from e
    finally:
        if close_client:
            await client.aclose()
