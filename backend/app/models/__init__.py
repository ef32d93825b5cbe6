"""Models package - re-exports for convenience."""

from backend.app.models.account import (
    AdminOverview,
    RoleRequest,
    RoleRequestStatus,
    UpdateProfileRequest,
    UserProfile,
)
from backend.app.models.booking import (
    AccommodationBookingRequest,
    Booking,
    PriceQuote,
    VehicleBookingRequest,
)
from backend.app.models.catalog import Catalog, Destination, Hotel, Vehicle, VehicleClass, VehicleType
from backend.app.models.common import (
    BookingType,
    Geo,
    Interest,
    PriceCategory,
    Provenance,
    Role,
    VehicleClassName,
    VehicleKind,
)
from backend.app.models.itinerary import DayPlan, ItineraryDocument, ItineraryResult, SavedItinerary
from backend.app.models.travel import Route, Stop, WeatherReport
from backend.app.models.trip import TripRequest
from backend.app.models.violations import Violation

__all__ = [
    # Common
    "Geo",
    "PriceCategory",
    "VehicleKind",
    "VehicleClassName",
    "Interest",
    "Role",
    "BookingType",
    "Provenance",
    # Catalog
    "Catalog",
    "Hotel",
    "Vehicle",
    "Destination",
    "VehicleType",
    "VehicleClass",
    # Trip
    "TripRequest",
    # Itinerary
    "DayPlan",
    "ItineraryResult",
    "ItineraryDocument",
    "SavedItinerary",
    # Bookings
    "VehicleBookingRequest",
    "AccommodationBookingRequest",
    "PriceQuote",
    "Booking",
    # Travel
    "WeatherReport",
    "Stop",
    "Route",
    # Violations
    "Violation",
    # Accounts
    "UserProfile",
    "UpdateProfileRequest",
    "RoleRequest",
    "RoleRequestStatus",
    "AdminOverview",
]
