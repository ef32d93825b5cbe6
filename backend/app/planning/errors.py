"""Itinerary synthesis errors."""

from enum import Enum


class RejectionCode(str, Enum):
    """Why a trip request was rejected."""

    DAYS_OUT_OF_RANGE = "days_out_of_range"
    GUESTS_OUT_OF_RANGE = "guests_out_of_range"
    BUDGET_INVALID = "budget_invalid"
    NO_INTERESTS = "no_interests"
    NO_HOTEL_CATEGORY = "no_hotel_category"
    NO_VEHICLE_TYPE = "no_vehicle_type"
    NO_HOTELS_FOUND = "no_hotels_found"
    NO_VEHICLES_FOUND = "no_vehicles_found"


# Input problems, as opposed to an empty catalog match
VALIDATION_CODES = frozenset(
    {
        RejectionCode.DAYS_OUT_OF_RANGE,
        RejectionCode.GUESTS_OUT_OF_RANGE,
        RejectionCode.BUDGET_INVALID,
        RejectionCode.NO_INTERESTS,
        RejectionCode.NO_HOTEL_CATEGORY,
        RejectionCode.NO_VEHICLE_TYPE,
    }
)


class SynthesisError(Exception):
    """Trip request rejected before or during selection."""

    def __init__(self, code: RejectionCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def is_validation_error(self) -> bool:
        """True for input problems, False for empty catalog matches."""
        return self.code in VALIDATION_CODES
