"""Integration tests for SQL repositories against sqlite."""

import uuid
from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.context import RequestContext
from backend.app.db.models import Profile, Vehicle
from backend.app.db.repositories import NewBooking
from backend.app.db.sql_repositories import (
    SqlBookingRepository,
    SqlItineraryRepository,
    get_profile_name,
)
from backend.app.models.catalog import Catalog
from backend.app.models.itinerary import ItineraryDocument
from backend.app.models.trip import TripRequest
from backend.app.planning.synthesizer import synthesize

ALICE = RequestContext(user_id=uuid.uuid4(), email="alice@example.com", display_name="Alice")
BOB = RequestContext(user_id=uuid.uuid4())


@pytest.mark.asyncio
async def test_itinerary_round_trip(session: AsyncSession, kandy_catalog: Catalog) -> None:
    request = TripRequest(
        days=3,
        guests=2,
        budget=1000.0,
        interests=["Culture"],
        hotel_category="Luxury",
        vehicle_type="Car",
    )
    document = ItineraryDocument(request=request, result=synthesize(request, kandy_catalog))
    repo = SqlItineraryRepository(session)

    itinerary_id = await repo.save_itinerary("Kandy", document, ALICE)

    saved = await repo.get_itinerary(itinerary_id, ALICE)
    assert saved is not None
    assert saved.document == document
    assert await repo.get_itinerary(itinerary_id, BOB) is None

    summaries = await repo.list_itineraries(ALICE)
    assert [s.total_cost for s in summaries] == [450.0]

    assert await repo.delete_itinerary(itinerary_id, BOB) is False
    assert await repo.delete_itinerary(itinerary_id, ALICE) is True
    assert await repo.list_itineraries(ALICE) == []


@pytest.mark.asyncio
async def test_first_write_creates_profile(session: AsyncSession) -> None:
    repo = SqlBookingRepository(session)

    await repo.create_booking(
        NewBooking(booking_type="vehicle", subtotal=100.0, service_charge=10.0, total_amount=110.0),
        ALICE,
    )

    profile = await session.get(Profile, ALICE.user_id)
    assert profile is not None
    assert profile.email == "alice@example.com"
    assert await get_profile_name(session, ALICE) == "Alice"


@pytest.mark.asyncio
async def test_owner_sees_bookings_on_their_listings(session: AsyncSession) -> None:
    session.add(Profile(user_id=BOB.user_id))
    vehicle = Vehicle(user_id=BOB.user_id, vehicle_type="Van", model="KDH", per_km_charge=180.0)
    session.add(vehicle)
    await session.commit()

    repo = SqlBookingRepository(session)
    booking = await repo.create_booking(
        NewBooking(
            booking_type="vehicle",
            vehicle_id=vehicle.vehicle_id,
            rental_start_date=date(2026, 3, 1),
            rental_end_date=date(2026, 3, 2),
            estimated_km=100.0,
            subtotal=18000.0,
            service_charge=1800.0,
            total_amount=19800.0,
        ),
        ALICE,
    )

    assert booking.booking_status == "confirmed"
    assert [b.booking_id for b in await repo.list_bookings(ALICE)] == [booking.booking_id]
    assert [b.booking_id for b in await repo.list_bookings_for_owner(BOB)] == [booking.booking_id]
    assert await repo.list_bookings_for_owner(ALICE) == []
