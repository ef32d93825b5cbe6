"""Itinerary models - derived plan and its persisted form."""

from datetime import datetime

from pydantic import BaseModel, Field

from backend.app.models.catalog import Destination, Hotel, Vehicle
from backend.app.models.trip import TripRequest
from backend.app.models.violations import Violation

# Bump when the persisted document layout changes.
ITINERARY_SCHEMA_VERSION = 1


class DayPlan(BaseModel):
    """One day's activity, lodging and transport with cost."""

    day: int = Field(..., ge=1)
    interest: str
    activity: str
    destination: Destination | None = None
    hotel: Hotel
    vehicle: Vehicle
    distance_km: float
    accommodation_cost: float
    transport_cost: float
    daily_total: float


class ItineraryResult(BaseModel):
    """Complete generated itinerary."""

    days: list[DayPlan]
    total_cost: float
    hotel: Hotel
    vehicle: Vehicle
    violations: list[Violation] = Field(default_factory=list)


class ItineraryDocument(BaseModel):
    """Versioned snapshot stored in saved_itinerary.itinerary_data."""

    schema_version: int = ITINERARY_SCHEMA_VERSION
    request: TripRequest
    result: ItineraryResult


class SavedItinerary(BaseModel):
    """Saved itinerary as returned to the owner."""

    itinerary_id: str
    user_id: str
    title: str
    days: int
    guests: int
    interests: list[str]
    document: ItineraryDocument
    created_at: datetime
