"""Booking endpoints - vehicle rentals, hotel stays and owner views."""

import uuid
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.adapters.notifications import BookingNotification, send_booking_notification
from backend.app.api.auth import get_current_context, require_role
from backend.app.bookings.pricing import quote_accommodation, quote_vehicle
from backend.app.config import Settings, get_settings
from backend.app.db import models as db
from backend.app.db.context import RequestContext
from backend.app.db.engine import get_session
from backend.app.db.repositories import BookingRepository, NewBooking
from backend.app.db.sql_repositories import SqlBookingRepository, get_profile_name
from backend.app.models.booking import AccommodationBookingRequest, Booking, VehicleBookingRequest
from backend.app.models.common import BookingType, Role

router = APIRouter(prefix="/bookings", tags=["bookings"])

NOTIFICATION_WARNING = "Booking confirmed, but the notification email could not be sent"


class BookingResponse(BaseModel):
    """Response for booking creation."""

    booking: Booking
    notification_sent: bool
    warning: str | None = None


def get_booking_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BookingRepository:
    """FastAPI dependency for the booking repository."""
    return SqlBookingRepository(session)


async def get_notification_client() -> httpx.AsyncClient | None:
    """HTTP client for outbound email; None lets the adapter open its own."""
    return None


def _parse_uuid(value: str, label: str) -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label} format",
        ) from e


async def _notify(
    notification: BookingNotification,
    settings: Settings,
    client: httpx.AsyncClient | None,
) -> bool:
    return await send_booking_notification(
        notification,
        api_key=settings.resend_api_key,
        admin_email=settings.admin_email,
        sender=settings.notification_from,
        base_url=settings.resend_base_url,
        client=client,
        timeout=settings.http_timeout_seconds,
    )


def _response(booking: Booking, sent: bool) -> BookingResponse:
    return BookingResponse(
        booking=booking,
        notification_sent=sent,
        warning=None if sent else NOTIFICATION_WARNING,
    )


@router.post("/vehicle", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def book_vehicle(
    request: VehicleBookingRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
    repo: Annotated[BookingRepository, Depends(get_booking_repository)],
    client: Annotated[httpx.AsyncClient | None, Depends(get_notification_client)],
) -> BookingResponse:
    """Book a vehicle.

    Subtotal is estimated km times the vehicle's per-km charge, plus the
    service charge. The booking is stored as confirmed before the
    notification is attempted.

    Raises:
        HTTPException: 404 if the vehicle does not exist
    """
    settings = get_settings()
    vehicle = await session.get(db.Vehicle, _parse_uuid(request.vehicle_id, "vehicle_id"))
    if vehicle is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vehicle not found")

    # Read before the booking commit expires the row
    owner_email = vehicle.owner_email
    vehicle_model = vehicle.model
    vehicle_type = vehicle.vehicle_type

    quote = quote_vehicle(
        request.estimated_km, vehicle.per_km_charge, settings.service_charge_rate
    )
    customer_name = ctx.display_name or await get_profile_name(session, ctx) or "Guest"

    booking = await repo.create_booking(
        NewBooking(
            booking_type=BookingType.vehicle.value,
            vehicle_id=vehicle.vehicle_id,
            rental_start_date=request.rental_start_date,
            rental_end_date=request.rental_end_date,
            estimated_km=request.estimated_km,
            **quote.model_dump(),
        ),
        ctx,
    )

    sent = await _notify(
        BookingNotification(
            booking_type=BookingType.vehicle,
            details={
                "vehicle_model": vehicle_model,
                "vehicle_type": vehicle_type,
                "rental_start_date": request.rental_start_date.isoformat(),
                "rental_end_date": request.rental_end_date.isoformat(),
                "estimated_km": request.estimated_km,
                "subtotal": quote.subtotal,
                "service_charge": quote.service_charge,
            },
            customer_email=ctx.email or "unknown",
            customer_name=customer_name,
            total_amount=quote.total_amount,
            owner_email=owner_email,
        ),
        settings,
        client,
    )
    return _response(booking, sent)


@router.post(
    "/accommodation", response_model=BookingResponse, status_code=status.HTTP_201_CREATED
)
async def book_accommodation(
    request: AccommodationBookingRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
    repo: Annotated[BookingRepository, Depends(get_booking_repository)],
    client: Annotated[httpx.AsyncClient | None, Depends(get_notification_client)],
) -> BookingResponse:
    """Book a hotel stay.

    Subtotal is nights times the hotel's nightly charge, plus the service
    charge.

    Raises:
        HTTPException: 404 if the hotel does not exist
    """
    settings = get_settings()
    hotel = await session.get(db.Hotel, _parse_uuid(request.hotel_id, "hotel_id"))
    if hotel is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")

    owner_email = hotel.owner_email
    hotel_name = hotel.hotel_name
    city = hotel.city

    nights, quote = quote_accommodation(
        request.check_in_date,
        request.check_out_date,
        hotel.per_night_charge,
        settings.service_charge_rate,
    )
    customer_name = ctx.display_name or await get_profile_name(session, ctx) or "Guest"

    booking = await repo.create_booking(
        NewBooking(
            booking_type=BookingType.accommodation.value,
            hotel_id=hotel.hotel_id,
            check_in_date=request.check_in_date,
            check_out_date=request.check_out_date,
            number_of_persons=request.number_of_persons,
            number_of_nights=nights,
            room_type=request.room_type,
            **quote.model_dump(),
        ),
        ctx,
    )

    sent = await _notify(
        BookingNotification(
            booking_type=BookingType.accommodation,
            details={
                "hotel_name": hotel_name,
                "city": city,
                "check_in_date": request.check_in_date.isoformat(),
                "check_out_date": request.check_out_date.isoformat(),
                "number_of_nights": nights,
                "number_of_persons": request.number_of_persons,
                "room_type": request.room_type,
                "subtotal": quote.subtotal,
                "service_charge": quote.service_charge,
            },
            customer_email=ctx.email or "unknown",
            customer_name=customer_name,
            total_amount=quote.total_amount,
            owner_email=owner_email,
        ),
        settings,
        client,
    )
    return _response(booking, sent)


@router.get("", response_model=list[Booking])
async def list_my_bookings(
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    repo: Annotated[BookingRepository, Depends(get_booking_repository)],
) -> list[Booking]:
    """List the caller's bookings, newest first."""
    return await repo.list_bookings(ctx)


@router.get("/owned", response_model=list[Booking])
async def list_bookings_on_my_listings(
    ctx: Annotated[RequestContext, Depends(require_role(Role.driver, Role.hotel_owner))],
    repo: Annotated[BookingRepository, Depends(get_booking_repository)],
) -> list[Booking]:
    """List bookings against vehicles or hotels the caller listed."""
    return await repo.list_bookings_for_owner(ctx)
