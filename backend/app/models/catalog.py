"""Catalog models - reference rows loaded from storage."""

from pydantic import BaseModel, ConfigDict, Field

from backend.app.models.common import PriceCategory


class Hotel(BaseModel):
    """Hotel listing."""

    model_config = ConfigDict(frozen=True)

    hotel_id: str
    hotel_name: str
    stars: int = Field(..., ge=1, le=5)
    per_night_charge: float = Field(..., gt=0)
    price_category: PriceCategory
    city: str
    address: str | None = None
    description: str | None = None
    image_url: str | None = None
    owner_id: str | None = None
    owner_email: str | None = None


class Vehicle(BaseModel):
    """Rental vehicle listing."""

    model_config = ConfigDict(frozen=True)

    vehicle_id: str
    vehicle_type: str  # "Car", "Van", "Bus" - matched by substring
    model: str
    per_km_charge: float = Field(..., gt=0)
    vehicle_class: str | None = None
    vehicle_number: str | None = None
    seating_capacity: int | None = Field(None, ge=1)
    image_url: str | None = None
    owner_id: str | None = None
    owner_email: str | None = None


class Destination(BaseModel):
    """Point of interest tagged with an interest category."""

    model_config = ConfigDict(frozen=True)

    destination_id: str
    interest_category: str
    name: str
    description: str = ""
    city: str | None = None


class VehicleType(BaseModel):
    """Passenger capacity range for a vehicle type."""

    model_config = ConfigDict(frozen=True)

    name: str
    min_passengers: int = Field(..., ge=1)
    max_passengers: int = Field(..., ge=1)

    def accommodates(self, guests: int) -> bool:
        """Whether this type can carry the given party size."""
        return self.min_passengers <= guests <= self.max_passengers


class VehicleClass(BaseModel):
    """Class within a vehicle type.

    price_multiplier is stored but not applied to transport cost.
    """

    model_config = ConfigDict(frozen=True)

    vehicle_type: str
    class_name: str
    price_multiplier: float = Field(1.0, gt=0)


class Catalog(BaseModel):
    """In-memory snapshot of all five catalog relations."""

    model_config = ConfigDict(frozen=True)

    hotels: tuple[Hotel, ...] = ()
    vehicles: tuple[Vehicle, ...] = ()
    destinations: tuple[Destination, ...] = ()
    vehicle_types: tuple[VehicleType, ...] = ()
    vehicle_classes: tuple[VehicleClass, ...] = ()

    def offerable_vehicle_types(self, guests: int) -> list[VehicleType]:
        """Vehicle types whose capacity range covers ``guests``."""
        return [vt for vt in self.vehicle_types if vt.accommodates(guests)]
