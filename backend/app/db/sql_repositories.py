"""SQL implementations of repository interfaces."""

import uuid
from collections.abc import Iterable
from datetime import UTC, datetime

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.context import RequestContext
from backend.app.db.models import Booking as BookingDB
from backend.app.db.models import Hotel, Profile, UserRole, Vehicle
from backend.app.db.models import RoleRequest as RoleRequestDB
from backend.app.db.models import SavedItinerary as SavedItineraryDB
from backend.app.db.queries import (
    query_bookings,
    query_bookings_on_owned_listings,
    query_pending_role_request,
    query_role_requests,
    query_roles,
    query_saved_itineraries,
)
from backend.app.db.repositories import ItinerarySummary, NewBooking, RoleRequestConflictError
from backend.app.models.account import (
    AdminOverview,
    AdminStats,
    RoleRequest,
    RoleRequestStatus,
    UpdateProfileRequest,
    UserProfile,
    UserSummary,
)
from backend.app.models.booking import Booking
from backend.app.models.common import Role
from backend.app.models.itinerary import ItineraryDocument, SavedItinerary


async def ensure_profile(session: AsyncSession, ctx: RequestContext) -> None:
    """Create the caller's profile row on first write.

    Identity lives with the auth provider, so the profile row may not exist
    yet when a user saves or books for the first time.
    """
    existing = await session.get(Profile, ctx.user_id)
    if existing is None:
        session.add(
            Profile(user_id=ctx.user_id, email=ctx.email, full_name=ctx.display_name)
        )
        await session.flush()


def _to_saved(row: SavedItineraryDB) -> SavedItinerary:
    return SavedItinerary(
        itinerary_id=str(row.itinerary_id),
        user_id=str(row.user_id),
        title=row.title,
        days=row.days,
        guests=row.guests,
        interests=list(row.interests),
        document=ItineraryDocument.model_validate(row.itinerary_data),
        created_at=row.created_at,
    )


def _to_booking(row: BookingDB) -> Booking:
    return Booking(
        booking_id=str(row.booking_id),
        user_id=str(row.user_id),
        booking_type=row.booking_type,
        vehicle_id=str(row.vehicle_id) if row.vehicle_id else None,
        hotel_id=str(row.hotel_id) if row.hotel_id else None,
        rental_start_date=row.rental_start_date,
        rental_end_date=row.rental_end_date,
        estimated_km=row.estimated_km,
        check_in_date=row.check_in_date,
        check_out_date=row.check_out_date,
        number_of_persons=row.number_of_persons,
        number_of_nights=row.number_of_nights,
        room_type=row.room_type,
        subtotal=row.subtotal,
        service_charge=row.service_charge,
        total_amount=row.total_amount,
        payment_method=row.payment_method,
        booking_status=row.booking_status,
        created_at=row.created_at,
    )


def _to_role_request(row: RoleRequestDB) -> RoleRequest:
    return RoleRequest(
        request_id=str(row.id),
        user_id=str(row.user_id),
        requested_role=Role(row.requested_role),
        status=RoleRequestStatus(row.status),
        reviewed_by=str(row.reviewed_by) if row.reviewed_by else None,
        reviewed_at=row.reviewed_at,
        created_at=row.created_at,
    )


def _known_roles(values: Iterable[str]) -> list[Role]:
    known = {r.value for r in Role}
    return sorted((Role(v) for v in set(values) if v in known), key=lambda r: r.value)


class SqlItineraryRepository:
    """SQL implementation of ItineraryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save_itinerary(
        self, title: str, document: ItineraryDocument, ctx: RequestContext
    ) -> uuid.UUID:
        """Save an itinerary snapshot."""
        await ensure_profile(self._session, ctx)

        itinerary_id = uuid.uuid4()
        row = SavedItineraryDB(
            itinerary_id=itinerary_id,
            user_id=ctx.user_id,
            title=title,
            days=document.request.days,
            guests=document.request.guests,
            interests=list(document.request.interests),
            itinerary_data=document.model_dump(mode="json"),
            created_at=datetime.now(UTC),
        )

        self._session.add(row)
        await self._session.commit()

        return itinerary_id

    async def get_itinerary(
        self, itinerary_id: uuid.UUID, ctx: RequestContext
    ) -> SavedItinerary | None:
        """Get a saved itinerary by ID."""
        result = await self._session.execute(
            query_saved_itineraries(ctx).where(SavedItineraryDB.itinerary_id == itinerary_id)
        )
        row = result.scalar_one_or_none()
        return _to_saved(row) if row else None

    async def list_itineraries(
        self, ctx: RequestContext, limit: int = 50
    ) -> list[ItinerarySummary]:
        """List the caller's itineraries, newest first."""
        result = await self._session.execute(
            query_saved_itineraries(ctx)
            .order_by(SavedItineraryDB.created_at.desc())
            .limit(limit)
        )

        summaries = []
        for row in result.scalars():
            total = row.itinerary_data.get("result", {}).get("total_cost", 0.0)
            summaries.append(
                ItinerarySummary(
                    itinerary_id=row.itinerary_id,
                    title=row.title,
                    days=row.days,
                    guests=row.guests,
                    interests=list(row.interests),
                    total_cost=float(total),
                    created_at=row.created_at,
                )
            )
        return summaries

    async def delete_itinerary(self, itinerary_id: uuid.UUID, ctx: RequestContext) -> bool:
        """Delete a saved itinerary owned by the caller."""
        result = await self._session.execute(
            delete(SavedItineraryDB).where(
                SavedItineraryDB.itinerary_id == itinerary_id,
                SavedItineraryDB.user_id == ctx.user_id,
            )
        )
        await self._session.commit()
        return bool(result.rowcount)


class SqlBookingRepository:
    """SQL implementation of BookingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_booking(self, booking: NewBooking, ctx: RequestContext) -> Booking:
        """Store a confirmed booking."""
        await ensure_profile(self._session, ctx)

        row = BookingDB(
            booking_id=uuid.uuid4(),
            user_id=ctx.user_id,
            booking_type=booking.booking_type,
            vehicle_id=booking.vehicle_id,
            hotel_id=booking.hotel_id,
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
            payment_method="card",
            booking_status="confirmed",
            created_at=datetime.now(UTC),
        )
        self._session.add(row)
        stored = _to_booking(row)
        await self._session.commit()

        return stored

    async def list_bookings(self, ctx: RequestContext) -> list[Booking]:
        """List the caller's bookings, newest first."""
        result = await self._session.execute(
            query_bookings(ctx).order_by(BookingDB.created_at.desc())
        )
        return [_to_booking(row) for row in result.scalars()]

    async def list_bookings_for_owner(self, ctx: RequestContext) -> list[Booking]:
        """List bookings against listings the caller owns, newest first."""
        result = await self._session.execute(
            query_bookings_on_owned_listings(ctx).order_by(BookingDB.created_at.desc())
        )
        return [_to_booking(row) for row in result.scalars()]


async def get_profile_name(session: AsyncSession, ctx: RequestContext) -> str | None:
    """Look up the caller's display name from their profile."""
    result = await session.execute(
        select(Profile.full_name).where(Profile.user_id == ctx.user_id)
    )
    return result.scalar_one_or_none()


class SqlAccountRepository:
    """SQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _roles(self, ctx: RequestContext) -> list[Role]:
        result = await self._session.execute(query_roles(ctx))
        return _known_roles(result.scalars())

    def _profile_view(
        self, row: Profile | None, ctx: RequestContext, roles: list[Role]
    ) -> UserProfile:
        if row is None:
            return UserProfile(user_id=str(ctx.user_id), email=ctx.email, roles=roles)
        return UserProfile(
            user_id=str(row.user_id),
            email=row.email,
            full_name=row.full_name,
            phone=row.phone,
            bio=row.bio,
            country=row.country,
            roles=roles,
        )

    async def get_profile(self, ctx: RequestContext) -> UserProfile:
        """Get the caller's profile and roles."""
        row = await self._session.get(Profile, ctx.user_id)
        return self._profile_view(row, ctx, await self._roles(ctx))

    async def update_profile(
        self, update: UpdateProfileRequest, ctx: RequestContext
    ) -> UserProfile:
        """Update the caller's profile, creating it on first edit."""
        await ensure_profile(self._session, ctx)
        row = await self._session.get(Profile, ctx.user_id)

        for field, value in update.model_dump(exclude_unset=True).items():
            setattr(row, field, value)

        profile = self._profile_view(row, ctx, await self._roles(ctx))
        await self._session.commit()
        return profile

    async def create_role_request(self, role: Role, ctx: RequestContext) -> RoleRequest:
        """File a pending role request for the caller."""
        if role in await self._roles(ctx):
            raise RoleRequestConflictError(f"Role {role.value} is already granted")

        pending = await self._session.execute(query_pending_role_request(ctx, role.value))
        if pending.scalars().first() is not None:
            raise RoleRequestConflictError(f"A {role.value} request is already pending")

        await ensure_profile(self._session, ctx)
        row = RoleRequestDB(
            id=uuid.uuid4(),
            user_id=ctx.user_id,
            requested_role=role.value,
            status=RoleRequestStatus.pending.value,
            created_at=datetime.now(UTC),
        )
        self._session.add(row)
        stored = _to_role_request(row)
        await self._session.commit()
        return stored

    async def list_role_requests(
        self, status: RoleRequestStatus | None = None
    ) -> list[RoleRequest]:
        """List role requests, newest first."""
        result = await self._session.execute(
            query_role_requests(status.value if status else None).order_by(
                RoleRequestDB.created_at.desc()
            )
        )
        return [_to_role_request(row) for row in result.scalars()]

    async def review_role_request(
        self, request_id: uuid.UUID, decision: RoleRequestStatus, ctx: RequestContext
    ) -> RoleRequest | None:
        """Approve or reject a pending request; approval grants the role."""
        if decision == RoleRequestStatus.pending:
            raise ValueError("decision must be approved or rejected")

        row = await self._session.get(RoleRequestDB, request_id)
        if row is None:
            return None
        if row.status != RoleRequestStatus.pending.value:
            raise RoleRequestConflictError(f"Request already {row.status}")

        row.status = decision.value
        row.reviewed_by = ctx.user_id
        row.reviewed_at = datetime.now(UTC)

        if decision == RoleRequestStatus.approved:
            granted = await self._session.execute(
                select(UserRole.id).where(
                    UserRole.user_id == row.user_id, UserRole.role == row.requested_role
                )
            )
            if granted.scalar_one_or_none() is None:
                self._session.add(
                    UserRole(id=uuid.uuid4(), user_id=row.user_id, role=row.requested_role)
                )

        reviewed = _to_role_request(row)
        await self._session.commit()
        return reviewed

    async def _count(self, model: type) -> int:
        result = await self._session.execute(select(func.count()).select_from(model))
        return int(result.scalar_one())

    async def admin_overview(self) -> AdminOverview:
        """Counts plus every user, booking and role request."""
        roles_by_user: dict[uuid.UUID, list[str]] = {}
        for user_id, role in await self._session.execute(select(UserRole.user_id, UserRole.role)):
            roles_by_user.setdefault(user_id, []).append(role)

        profiles = await self._session.execute(select(Profile).order_by(Profile.created_at))
        users = [
            UserSummary(
                user_id=str(p.user_id),
                email=p.email,
                full_name=p.full_name,
                roles=_known_roles(roles_by_user.get(p.user_id, [])),
                created_at=p.created_at,
            )
            for p in profiles.scalars()
        ]

        bookings_result = await self._session.execute(
            select(BookingDB).order_by(BookingDB.created_at.desc())
        )
        bookings = [_to_booking(row) for row in bookings_result.scalars()]
        requests = await self.list_role_requests()

        return AdminOverview(
            stats=AdminStats(
                total_users=len(users),
                total_bookings=len(bookings),
                total_vehicles=await self._count(Vehicle),
                total_hotels=await self._count(Hotel),
                pending_requests=sum(
                    1 for r in requests if r.status == RoleRequestStatus.pending
                ),
            ),
            users=users,
            bookings=bookings,
            role_requests=requests,
        )
