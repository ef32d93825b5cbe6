"""In-memory implementations of repository interfaces."""

import uuid
from datetime import UTC, datetime

from backend.app.db.context import RequestContext
from backend.app.db.repositories import ItinerarySummary, NewBooking
from backend.app.models.booking import Booking
from backend.app.models.itinerary import ItineraryDocument, SavedItinerary


class InMemoryItineraryRepository:
    """In-memory implementation of ItineraryRepository."""

    def __init__(self) -> None:
        self._itineraries: dict[uuid.UUID, SavedItinerary] = {}

    async def save_itinerary(
        self, title: str, document: ItineraryDocument, ctx: RequestContext
    ) -> uuid.UUID:
        """Save an itinerary snapshot."""
        itinerary_id = uuid.uuid4()

        # Round-trip through JSON so later catalog edits cannot leak in
        snapshot = ItineraryDocument.model_validate(document.model_dump(mode="json"))

        self._itineraries[itinerary_id] = SavedItinerary(
            itinerary_id=str(itinerary_id),
            user_id=str(ctx.user_id),
            title=title,
            days=document.request.days,
            guests=document.request.guests,
            interests=list(document.request.interests),
            document=snapshot,
            created_at=datetime.now(UTC),
        )
        return itinerary_id

    async def get_itinerary(
        self, itinerary_id: uuid.UUID, ctx: RequestContext
    ) -> SavedItinerary | None:
        """Get a saved itinerary by ID."""
        saved = self._itineraries.get(itinerary_id)

        # Enforce ownership
        if saved is None or saved.user_id != str(ctx.user_id):
            return None
        return saved

    async def list_itineraries(
        self, ctx: RequestContext, limit: int = 50
    ) -> list[ItinerarySummary]:
        """List the caller's itineraries, newest first."""
        owned = [s for s in self._itineraries.values() if s.user_id == str(ctx.user_id)]
        owned.sort(key=lambda s: s.created_at, reverse=True)

        return [
            ItinerarySummary(
                itinerary_id=uuid.UUID(s.itinerary_id),
                title=s.title,
                days=s.days,
                guests=s.guests,
                interests=s.interests,
                total_cost=s.document.result.total_cost,
                created_at=s.created_at,
            )
            for s in owned[:limit]
        ]

    async def delete_itinerary(self, itinerary_id: uuid.UUID, ctx: RequestContext) -> bool:
        """Delete a saved itinerary owned by the caller."""
        if await self.get_itinerary(itinerary_id, ctx) is None:
            return False
        del self._itineraries[itinerary_id]
        return True


class InMemoryBookingRepository:
    """In-memory implementation of BookingRepository.

    Listing ownership is not modelled here, ``owned_listing_ids`` maps an
    owner's user id to the vehicle/hotel ids they listed.
    """

    def __init__(self, owned_listing_ids: dict[uuid.UUID, set[uuid.UUID]] | None = None) -> None:
        self._bookings: list[Booking] = []
        self._owned = owned_listing_ids or {}

    async def create_booking(self, booking: NewBooking, ctx: RequestContext) -> Booking:
        """Store a confirmed booking."""
        stored = Booking(
            booking_id=str(uuid.uuid4()),
            user_id=str(ctx.user_id),
            booking_type=booking.booking_type,
            vehicle_id=str(booking.vehicle_id) if booking.vehicle_id else None,
            hotel_id=str(booking.hotel_id) if booking.hotel_id else None,
            rental_start_date=booking.rental_start_date,
            rental_end_date=booking.rental_end_date,
            estimated_km=booking.estimated_km,
            check_in_date=booking.check_in_date,
            check_out_date=booking.check_out_date,
            number_of_persons=booking.number_of_persons,
            number_of_nights=booking.number_of_nights,
            room_type=booking.room_type,
            subtotal=booking.subtotal,
            service_charge=booking.service_charge,
            total_amount=booking.total_amount,
            created_at=datetime.now(UTC),
        )
        self._bookings.append(stored)
        return stored

    async def list_bookings(self, ctx: RequestContext) -> list[Booking]:
        """List the caller's bookings, newest first."""
        mine = [b for b in self._bookings if b.user_id == str(ctx.user_id)]
        return list(reversed(mine))

    async def list_bookings_for_owner(self, ctx: RequestContext) -> list[Booking]:
        """List bookings against listings the caller owns, newest first."""
        owned = {str(i) for i in self._owned.get(ctx.user_id, set())}
        matches = [
            b for b in self._bookings if b.vehicle_id in owned or b.hotel_id in owned
        ]
        return list(reversed(matches))
