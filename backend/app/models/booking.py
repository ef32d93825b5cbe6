"""Booking models - vehicle rentals and hotel stays."""

from datetime import date, datetime

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from backend.app.models.common import BookingType


class VehicleBookingRequest(BaseModel):
    """Vehicle rental request."""

    vehicle_id: str
    rental_start_date: date
    rental_end_date: date
    estimated_km: float = Field(..., gt=0)

    @field_validator("rental_end_date")
    @classmethod
    def validate_end_after_start(cls, v: date, info: ValidationInfo) -> date:
        """Ensure end >= start."""
        if "rental_start_date" in info.data and v < info.data["rental_start_date"]:
            raise ValueError("rental_end_date must be >= rental_start_date")
        return v


class AccommodationBookingRequest(BaseModel):
    """Hotel stay request."""

    hotel_id: str
    check_in_date: date
    check_out_date: date
    number_of_persons: int = Field(1, ge=1)
    room_type: str = Field(..., min_length=1)

    @field_validator("check_out_date")
    @classmethod
    def validate_checkout_after_checkin(cls, v: date, info: ValidationInfo) -> date:
        """Ensure at least one night."""
        if "check_in_date" in info.data and v <= info.data["check_in_date"]:
            raise ValueError("check_out_date must be after check_in_date")
        return v


class PriceQuote(BaseModel):
    """Subtotal, service charge and total for a booking."""

    subtotal: float
    service_charge: float
    total_amount: float


class Booking(BaseModel):
    """Stored booking."""

    booking_id: str
    user_id: str
    booking_type: BookingType
    vehicle_id: str | None = None
    hotel_id: str | None = None
    rental_start_date: date | None = None
    rental_end_date: date | None = None
    estimated_km: float | None = None
    check_in_date: date | None = None
    check_out_date: date | None = None
    number_of_persons: int | None = None
    number_of_nights: int | None = None
    room_type: str | None = None
    subtotal: float
    service_charge: float
    total_amount: float
    payment_method: str = "card"
    booking_status: str = "confirmed"
    created_at: datetime
