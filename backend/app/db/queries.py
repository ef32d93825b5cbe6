"""Ownership-safe query helpers."""

from sqlalchemy import Select, select

from backend.app.db.context import RequestContext
from backend.app.db.models import Booking, Hotel, RoleRequest, SavedItinerary, UserRole, Vehicle


def query_saved_itineraries(ctx: RequestContext) -> Select:
    """Select saved_itinerary rows owned by the caller.

    Args:
        ctx: Request context with user_id

    Returns:
        Select filtered by user_id
    """
    return select(SavedItinerary).where(SavedItinerary.user_id == ctx.user_id)


def query_bookings(ctx: RequestContext) -> Select:
    """Select booking rows made by the caller.

    Args:
        ctx: Request context with user_id

    Returns:
        Select filtered by user_id
    """
    return select(Booking).where(Booking.user_id == ctx.user_id)


def query_bookings_on_owned_listings(ctx: RequestContext) -> Select:
    """Select bookings placed against vehicles or hotels the caller listed.

    Used by the driver and hotel-owner views.
    """
    owned_vehicles = select(Vehicle.vehicle_id).where(Vehicle.user_id == ctx.user_id)
    owned_hotels = select(Hotel.hotel_id).where(Hotel.user_id == ctx.user_id)
    return select(Booking).where(
        Booking.vehicle_id.in_(owned_vehicles) | Booking.hotel_id.in_(owned_hotels)
    )


def query_roles(ctx: RequestContext) -> Select:
    """Select role names granted to the caller."""
    return select(UserRole.role).where(UserRole.user_id == ctx.user_id)


def query_role_requests(status: str | None = None) -> Select:
    """Select role requests across all users, optionally by status.

    Admin-only; callers must gate on the admin role.
    """
    stmt = select(RoleRequest)
    if status is not None:
        stmt = stmt.where(RoleRequest.status == status)
    return stmt


def query_pending_role_request(ctx: RequestContext, role: str) -> Select:
    """Select the caller's pending request for ``role``, if any."""
    return select(RoleRequest).where(
        RoleRequest.user_id == ctx.user_id,
        RoleRequest.requested_role == role,
        RoleRequest.status == "pending",
    )
