"""Travel lookup models - weather and driving directions."""

from pydantic import BaseModel, Field

from backend.app.models.common import Geo, Provenance


class WeatherReport(BaseModel):
    """Current weather conditions for a city."""

    city: str
    country: str | None = None
    description: str
    temp_c: float
    feels_like_c: float
    humidity_pct: int
    wind_ms: float
    provenance: Provenance


class Stop(BaseModel):
    """Route stop, either geocoded already or by name."""

    name: str = ""
    location: Geo | None = None


class Route(BaseModel):
    """Driving route across two or more stops."""

    stops: list[Stop] = Field(..., min_length=2)
    distance_km: float
    duration_hours: float
    geometry: list[Geo]
    provenance: Provenance


def format_duration(hours: float) -> str:
    """Format a duration in hours as "X h Y min" or "Y min"."""
    whole = int(hours)
    minutes = round((hours - whole) * 60)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    if whole == 0:
        return f"{minutes} min"
    return f"{whole} h {minutes} min"
