"""Weather adapter using the OpenWeatherMap current-weather API."""

import httpx

from backend.app.adapters.provenance import provider_provenance
from backend.app.models.travel import WeatherReport


class WeatherLookupError(Exception):
    """Weather provider failed or returned an unusable response."""

    pass


class CityNotFoundError(WeatherLookupError):
    """Weather provider does not know the city."""

    pass


async def fetch_weather(
    city: str,
    api_key: str,
    base_url: str = "https://api.openweathermap.org/data/2.5/weather",
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> WeatherReport:
    """Fetch current weather for a city, in metric units.

    Args:
        city: City name, e.g. "Kandy"
        api_key: OpenWeatherMap API key
        base_url: OpenWeatherMap endpoint
        client: Optional httpx client (for testing with mocks)
        timeout: Request timeout in seconds when no client is given

    Returns:
        WeatherReport with provenance

    Raises:
        ValueError: If city is blank
        CityNotFoundError: On 404 from the provider
        WeatherLookupError: On any other network or HTTP error
    """
    city = city.strip()
    if not city:
        raise ValueError("Please enter a city name")

    # Docs: https://openweathermap.org/current
    params = {"q": city, "appid": api_key, "units": "metric"}

    close_client = False
    if client is None:
        client = httpx.AsyncClient(timeout=timeout)
        close_client = True

    try:
        response = await client.get(base_url, params=params)
        if response.status_code == 404:
            raise CityNotFoundError(f"City not found: {city}")
        response.raise_for_status()
        data = response.json()

        # Response structure: {name, sys: {country}, weather: [{description}], main: {...}, wind: {...}}
        main = data["main"]
        weather = data.get("weather") or [{}]

        return WeatherReport(
            city=data.get("name", city),
            country=data.get("sys", {}).get("country"),
            description=weather[0].get("description", ""),
            temp_c=main["temp"],
            feels_like_c=main.get("feels_like", main["temp"]),
            humidity_pct=main.get("humidity", 0),
            wind_ms=data.get("wind", {}).get("speed", 0.0),
            provenance=provider_provenance("weather", "openweathermap", url=base_url),
        )
    except httpx.HTTPError as e:
        raise WeatherLookupError(f"Weather lookup failed: {type(e).__name__}") from e
    except (KeyError, ValueError, TypeError) as e:
        raise WeatherLookupError("Weather provider returned an unexpected response") from e
    finally:
        if close_client:
            await client.aclose()
