"""Trip request model - user input for itinerary generation."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.app.models.common import PriceCategory, VehicleClassName


def _canonical_choice(value: Any, choices: type[Enum]) -> Any:
    """Blank -> None; known labels matched case-insensitively; others stripped."""
    if isinstance(value, Enum):
        return value.value
    if not isinstance(value, str):
        return value

    cleaned = value.strip()
    if not cleaned:
        return None
    for choice in choices:
        if choice.value.lower() == cleaned.lower():
            return choice.value
    return cleaned


class TripRequest(BaseModel):
    """User-supplied trip parameters.

    Ranges are deliberately not enforced here: the synthesizer validates them
    in a fixed order so the first failing rule is the one reported. For the
    same reason selections are plain strings; an unknown hotel category
    simply matches no hotels.
    """

    model_config = ConfigDict(frozen=True)

    days: int
    guests: int
    budget: float
    interests: list[str] = Field(default_factory=list)
    hotel_category: str | None = None
    vehicle_type: str | None = None
    vehicle_class: str | None = None
    title: str | None = Field(None, max_length=200)

    @field_validator("hotel_category", mode="before")
    @classmethod
    def normalize_hotel_category(cls, v: Any) -> Any:
        """Map "luxury" to "Luxury" and blanks to None."""
        return _canonical_choice(v, PriceCategory)

    @field_validator("vehicle_class", mode="before")
    @classmethod
    def normalize_vehicle_class(cls, v: Any) -> Any:
        """Map "mid" to "Mid" and blanks to None."""
        return _canonical_choice(v, VehicleClassName)

    @field_validator("vehicle_type", mode="before")
    @classmethod
    def normalize_vehicle_type(cls, v: Any) -> Any:
        """Blank vehicle type -> None."""
        if isinstance(v, str):
            return v.strip() or None
        return v
