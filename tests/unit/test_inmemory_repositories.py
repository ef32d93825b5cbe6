"""Tests for in-memory repositories - ownership and snapshots."""

import uuid

import pytest

from backend.app.db.context import RequestContext
from backend.app.db.inmemory import InMemoryBookingRepository, InMemoryItineraryRepository
from backend.app.db.repositories import NewBooking
from backend.app.models.catalog import Catalog
from backend.app.models.itinerary import ItineraryDocument
from backend.app.models.trip import TripRequest
from backend.app.planning.synthesizer import synthesize

ALICE = RequestContext(user_id=uuid.uuid4())
BOB = RequestContext(user_id=uuid.uuid4())


def make_document(catalog: Catalog, days: int = 3) -> ItineraryDocument:
    request = TripRequest(
        days=days,
        guests=2,
        budget=1000.0,
        interests=["Culture"],
        hotel_category="Luxury",
        vehicle_type="Car",
    )
    return ItineraryDocument(request=request, result=synthesize(request, catalog))


@pytest.mark.asyncio
async def test_save_and_get_itinerary(kandy_catalog: Catalog) -> None:
    repo = InMemoryItineraryRepository()
    document = make_document(kandy_catalog)

    itinerary_id = await repo.save_itinerary("Kandy weekend", document, ALICE)
    saved = await repo.get_itinerary(itinerary_id, ALICE)

    assert saved is not None
    assert saved.title == "Kandy weekend"
    assert saved.days == 3
    assert saved.interests == ["Culture"]
    assert saved.document.schema_version == 1
    assert saved.document.result.total_cost == pytest.approx(450.0)


@pytest.mark.asyncio
async def test_itineraries_are_owner_scoped(kandy_catalog: Catalog) -> None:
    repo = InMemoryItineraryRepository()
    itinerary_id = await repo.save_itinerary("Mine", make_document(kandy_catalog), ALICE)

    assert await repo.get_itinerary(itinerary_id, BOB) is None
    assert await repo.list_itineraries(BOB) == []
    assert await repo.delete_itinerary(itinerary_id, BOB) is False
    assert await repo.get_itinerary(itinerary_id, ALICE) is not None


@pytest.mark.asyncio
async def test_list_and_delete(kandy_catalog: Catalog) -> None:
    repo = InMemoryItineraryRepository()
    first = await repo.save_itinerary("First", make_document(kandy_catalog, 1), ALICE)
    await repo.save_itinerary("Second", make_document(kandy_catalog, 2), ALICE)

    summaries = await repo.list_itineraries(ALICE)
    assert {s.title for s in summaries} == {"First", "Second"}
    assert {s.total_cost for s in summaries} == {150.0, 300.0}

    assert await repo.delete_itinerary(first, ALICE) is True
    assert [s.title for s in await repo.list_itineraries(ALICE)] == ["Second"]


@pytest.mark.asyncio
async def test_bookings_listed_for_customer_and_owner() -> None:
    vehicle_id = uuid.uuid4()
    repo = InMemoryBookingRepository(owned_listing_ids={BOB.user_id: {vehicle_id}})

    stored = await repo.create_booking(
        NewBooking(
            booking_type="vehicle",
            vehicle_id=vehicle_id,
            estimated_km=100.0,
            subtotal=12000.0,
            service_charge=1200.0,
            total_amount=13200.0,
        ),
        ALICE,
    )

    assert stored.booking_status == "confirmed"
    assert stored.payment_method == "card"
    assert [b.booking_id for b in await repo.list_bookings(ALICE)] == [stored.booking_id]
    assert await repo.list_bookings(BOB) == []
    assert [b.booking_id for b in await repo.list_bookings_for_owner(BOB)] == [stored.booking_id]
    assert await repo.list_bookings_for_owner(ALICE) == []
