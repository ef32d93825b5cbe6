"""Repository protocol interfaces for data access."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from backend.app.db.context import RequestContext
from backend.app.models.account import (
    AdminOverview,
    RoleRequest,
    RoleRequestStatus,
    UpdateProfileRequest,
    UserProfile,
)
from backend.app.models.booking import Booking
from backend.app.models.common import Role
from backend.app.models.itinerary import ItineraryDocument, SavedItinerary


class RoleRequestConflictError(Exception):
    """Role request cannot be created or reviewed in its current state."""

    pass


@dataclass
class ItinerarySummary:
    """Summary of a saved itinerary for listing."""

    itinerary_id: UUID
    title: str
    days: int
    guests: int
    interests: list[str]
    total_cost: float
    created_at: datetime


@dataclass
class NewBooking:
    """Priced booking ready to be stored."""

    booking_type: str
    subtotal: float
    service_charge: float
    total_amount: float
    vehicle_id: UUID | None = None
    hotel_id: UUID | None = None
    rental_start_date: date | None = None
    rental_end_date: date | None = None
    estimated_km: float | None = None
    check_in_date: date | None = None
    check_out_date: date | None = None
    number_of_persons: int | None = None
    number_of_nights: int | None = None
    room_type: str | None = None


class ItineraryRepository(Protocol):
    """Repository for saved itinerary operations."""

    async def save_itinerary(
        self, title: str, document: ItineraryDocument, ctx: RequestContext
    ) -> UUID:
        """Save an itinerary snapshot.

        Args:
            title: Display title
            document: Request plus generated result
            ctx: Request context

        Returns:
            Itinerary ID
        """
        ...

    async def get_itinerary(
        self, itinerary_id: UUID, ctx: RequestContext
    ) -> SavedItinerary | None:
        """Get a saved itinerary by ID.

        Args:
            itinerary_id: Itinerary ID
            ctx: Request context (enforces ownership)

        Returns:
            Saved itinerary or None if not found
        """
        ...

    async def list_itineraries(
        self, ctx: RequestContext, limit: int = 50
    ) -> list[ItinerarySummary]:
        """List the caller's itineraries, newest first.

        Args:
            ctx: Request context (enforces ownership)
            limit: Maximum number of results

        Returns:
            List of itinerary summaries
        """
        ...

    async def delete_itinerary(self, itinerary_id: UUID, ctx: RequestContext) -> bool:
        """Delete a saved itinerary.

        Args:
            itinerary_id: Itinerary ID
            ctx: Request context (enforces ownership)

        Returns:
            True if a row was deleted
        """
        ...


class BookingRepository(Protocol):
    """Repository for booking operations."""

    async def create_booking(self, booking: NewBooking, ctx: RequestContext) -> Booking:
        """Store a confirmed booking.

        Args:
            booking: Priced booking
            ctx: Request context

        Returns:
            Stored booking
        """
        ...

    async def list_bookings(self, ctx: RequestContext) -> list[Booking]:
        """List the caller's bookings, newest first."""
        ...

    async def list_bookings_for_owner(self, ctx: RequestContext) -> list[Booking]:
        """List bookings against listings the caller owns, newest first."""
        ...


class AccountRepository(Protocol):
    """Repository for profiles, role requests and the admin overview."""

    async def get_profile(self, ctx: RequestContext) -> UserProfile:
        """Get the caller's profile; callers without a row get an empty one."""
        ...

    async def update_profile(
        self, update: UpdateProfileRequest, ctx: RequestContext
    ) -> UserProfile:
        """Apply the fields set in ``update`` to the caller's profile."""
        ...

    async def create_role_request(self, role: Role, ctx: RequestContext) -> RoleRequest:
        """File a pending request for ``role``.

        Raises:
            RoleRequestConflictError: If the role is already granted or a
                request for it is pending
        """
        ...

    async def list_role_requests(
        self, status: RoleRequestStatus | None = None
    ) -> list[RoleRequest]:
        """List role requests across all users, newest first."""
        ...

    async def review_role_request(
        self, request_id: UUID, decision: RoleRequestStatus, ctx: RequestContext
    ) -> RoleRequest | None:
        """Approve or reject a pending request.

        Approval grants the role. Returns None if the request does not exist.

        Raises:
            RoleRequestConflictError: If the request was already reviewed
        """
        ...

    async def admin_overview(self) -> AdminOverview:
        """Counts plus every user, booking and role request."""
        ...
