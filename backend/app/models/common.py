"""Common types and enums shared across all models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Geo(BaseModel):
    """Geographic coordinates (WGS84)."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class PriceCategory(str, Enum):
    """Hotel price category."""

    low = "Low"
    middle = "Middle"
    luxury = "Luxury"


class VehicleKind(str, Enum):
    """Vehicle type names offered in the catalog."""

    car = "Car"
    van = "Van"
    bus = "Bus"


class VehicleClassName(str, Enum):
    """Vehicle class."""

    mid = "Mid"
    luxury = "Luxury"


class Interest(str, Enum):
    """Destination interest category."""

    culture = "Culture"
    beaches = "Beaches"
    nature = "Nature"
    wildlife = "Wildlife"


class Role(str, Enum):
    """Application role granted to a user."""

    admin = "admin"
    driver = "driver"
    hotel_owner = "hotel_owner"
    user = "user"


class BookingType(str, Enum):
    """Booking kind."""

    vehicle = "vehicle"
    accommodation = "accommodation"


class Provenance(BaseModel):
    """Provenance metadata for third-party lookups."""

    source: str  # e.g. "weather:openweathermap"
    service: str
    provider: str
    source_url: str | None = None
    fetched_at: datetime


def canonical_interest(value: str) -> str:
    """Map a user-supplied interest to its canonical category label.

    Known interests map case-insensitively onto ``Interest`` labels
    ("culture" -> "Culture"). Anything else is returned title-cased so it can
    still drive the day rotation, it just never matches a destination.
    """
    cleaned = value.strip()
    for interest in Interest:
        if interest.value.lower() == cleaned.lower():
            return interest.value
    return cleaned.title()
