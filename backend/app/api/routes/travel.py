"""Travel lookups - current weather, geocoding and driving directions."""

from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from backend.app.adapters.directions import (
    MAX_STOPS,
    MIN_STOPS,
    DirectionsError,
    GeocodingError,
    PlaceNotFoundError,
    fetch_route,
    geocode_place,
)
from backend.app.adapters.weather import CityNotFoundError, WeatherLookupError, fetch_weather
from backend.app.config import get_settings
from backend.app.models.travel import Route, Stop, WeatherReport, format_duration

router = APIRouter(tags=["travel"])


class DirectionsRequest(BaseModel):
    """Request body for POST /directions.

    Stops without a location are geocoded by name first.
    """

    stops: list[Stop] = Field(..., min_length=MIN_STOPS, max_length=MAX_STOPS)


class DirectionsResponse(BaseModel):
    """Route plus a human-readable duration."""

    route: Route
    duration_text: str


async def get_http_client() -> httpx.AsyncClient | None:
    """HTTP client for third-party lookups; None lets each adapter open its own."""
    return None


@router.get("/weather", response_model=WeatherReport)
async def get_weather(
    client: Annotated[httpx.AsyncClient | None, Depends(get_http_client)],
    city: Annotated[str, Query()] = "",
) -> WeatherReport:
    """Current weather for a city.

    Raises:
        HTTPException: 422 on blank city, 404 on unknown city, 502 on provider failure
    """
    settings = get_settings()
    try:
        return await fetch_weather(
            city,
            api_key=settings.openweather_api_key,
            base_url=settings.openweather_base_url,
            client=client,
            timeout=settings.http_timeout_seconds,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
    except CityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except WeatherLookupError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e


@router.get("/geocode", response_model=Stop)
async def geocode(
    client: Annotated[httpx.AsyncClient | None, Depends(get_http_client)],
    q: Annotated[str, Query(min_length=1)],
) -> Stop:
    """Resolve a Sri Lankan place name to coordinates.

    Raises:
        HTTPException: 404 on unknown place, 502 on provider failure
    """
    settings = get_settings()
    try:
        return await geocode_place(
            q,
            base_url=settings.nominatim_base_url,
            client=client,
            timeout=settings.http_timeout_seconds,
        )
    except PlaceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except GeocodingError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e


@router.post("/directions", response_model=DirectionsResponse)
async def directions(
    body: DirectionsRequest,
    client: Annotated[httpx.AsyncClient | None, Depends(get_http_client)],
) -> DirectionsResponse:
    """Driving route through the stops in order.

    Raises:
        HTTPException: 404 if a stop cannot be geocoded, 422 on a bad stop
            count, 502 on geocoding or routing provider failure
    """
    settings = get_settings()

    located: list[Stop] = []
    for stop in body.stops:
        if stop.location is not None:
            located.append(stop)
            continue
        if not stop.name.strip():
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Each stop needs a name or a location",
            )
        try:
            located.append(
                await geocode_place(
                    stop.name,
                    base_url=settings.nominatim_base_url,
                    client=client,
                    timeout=settings.http_timeout_seconds,
                )
            )
        except PlaceNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        except GeocodingError as e:
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    try:
        route = await fetch_route(
            located,
            api_key=settings.ors_api_key,
            base_url=settings.ors_base_url,
            client=client,
            timeout=settings.http_timeout_seconds,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
    except DirectionsError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    return DirectionsResponse(route=route, duration_text=format_duration(route.duration_hours))
