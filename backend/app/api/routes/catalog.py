"""Catalog endpoints - browsing and owner listings."""

import uuid
from datetime import UTC, datetime
from typing import Annotated, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from backend.app.api.auth import get_roles, require_role
from backend.app.db import models as db
from backend.app.db.catalog_loader import hotel_from_row, load_catalog, vehicle_from_row
from backend.app.db.context import RequestContext
from backend.app.db.engine import get_engine, get_session
from backend.app.db.sql_repositories import ensure_profile
from backend.app.models.catalog import Catalog, Destination, Hotel, Vehicle, VehicleType
from backend.app.models.common import PriceCategory, Role, VehicleClassName, VehicleKind

router = APIRouter(prefix="/catalog", tags=["catalog"])

ListingT = TypeVar("ListingT", db.Hotel, db.Vehicle)


class CreateHotelRequest(BaseModel):
    """Request body for POST /catalog/hotels."""

    hotel_name: str = Field(..., min_length=1, max_length=200)
    stars: int = Field(..., ge=1, le=5)
    per_night_charge: float = Field(..., gt=0)
    price_category: PriceCategory
    city: str = Field(..., min_length=1)
    address: str | None = None
    description: str | None = None
    image_url: str | None = None


class CreateVehicleRequest(BaseModel):
    """Request body for POST /catalog/vehicles."""

    vehicle_type: VehicleKind
    model: str = Field(..., min_length=1, max_length=200)
    per_km_charge: float = Field(..., gt=0)
    vehicle_class: VehicleClassName | None = None
    vehicle_number: str | None = None
    seating_capacity: int | None = Field(None, ge=1)
    image_url: str | None = None


class UpdateHotelRequest(BaseModel):
    """Request body for PUT /catalog/hotels/{hotel_id}; null fields are left unchanged."""

    hotel_name: str | None = Field(None, min_length=1, max_length=200)
    stars: int | None = Field(None, ge=1, le=5)
    per_night_charge: float | None = Field(None, gt=0)
    price_category: PriceCategory | None = None
    city: str | None = Field(None, min_length=1)
    address: str | None = None
    description: str | None = None
    image_url: str | None = None


class UpdateVehicleRequest(BaseModel):
    """Request body for PUT /catalog/vehicles/{vehicle_id}; null fields are left unchanged."""

    vehicle_type: VehicleKind | None = None
    model: str | None = Field(None, min_length=1, max_length=200)
    per_km_charge: float | None = Field(None, gt=0)
    vehicle_class: VehicleClassName | None = None
    vehicle_number: str | None = None
    seating_capacity: int | None = Field(None, ge=1)
    image_url: str | None = None


async def _owned_listing(
    session: AsyncSession,
    model: type[ListingT],
    listing_id: str,
    ctx: RequestContext,
    roles: set[Role],
) -> ListingT:
    """Load a listing the caller may edit.

    Owners reach only their own rows; admins reach every row. Rows owned by
    someone else are reported as missing.
    """
    label = model.__tablename__
    try:
        key = uuid.UUID(listing_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label}_id format",
        ) from e

    row = await session.get(model, key)
    if row is None or (Role.admin not in roles and row.user_id != ctx.user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label.capitalize()} not found",
        )
    return row


@router.get("", response_model=Catalog)
async def get_catalog(engine: Annotated[AsyncEngine, Depends(get_engine)]) -> Catalog:
    """Full catalog snapshot."""
    return await load_catalog(engine)


@router.get("/hotels", response_model=list[Hotel])
async def list_hotels(
    engine: Annotated[AsyncEngine, Depends(get_engine)],
    city: Annotated[str | None, Query()] = None,
    category: Annotated[PriceCategory | None, Query()] = None,
) -> list[Hotel]:
    """List hotels, optionally filtered by city and price category."""
    catalog = await load_catalog(engine)
    hotels = list(catalog.hotels)
    if city:
        hotels = [h for h in hotels if h.city.lower() == city.strip().lower()]
    if category:
        hotels = [h for h in hotels if h.price_category == category]
    return hotels


@router.get("/vehicles", response_model=list[Vehicle])
async def list_vehicles(
    engine: Annotated[AsyncEngine, Depends(get_engine)],
    vehicle_type: Annotated[str | None, Query(alias="type")] = None,
) -> list[Vehicle]:
    """List vehicles, optionally filtered by type (case-insensitive substring)."""
    catalog = await load_catalog(engine)
    vehicles = list(catalog.vehicles)
    if vehicle_type:
        needle = vehicle_type.strip().lower()
        vehicles = [v for v in vehicles if needle in v.vehicle_type.lower()]
    return vehicles


@router.get("/destinations", response_model=list[Destination])
async def list_destinations(
    engine: Annotated[AsyncEngine, Depends(get_engine)],
) -> list[Destination]:
    """List destinations."""
    catalog = await load_catalog(engine)
    return list(catalog.destinations)


@router.get("/vehicle-types", response_model=list[VehicleType])
async def list_vehicle_types(
    engine: Annotated[AsyncEngine, Depends(get_engine)],
    guests: Annotated[int | None, Query(ge=1)] = None,
) -> list[VehicleType]:
    """List vehicle types; with ``guests``, only those that can carry the party."""
    catalog = await load_catalog(engine)
    if guests is None:
        return list(catalog.vehicle_types)
    return catalog.offerable_vehicle_types(guests)


@router.post("/hotels", response_model=Hotel, status_code=status.HTTP_201_CREATED)
async def create_hotel(
    request: CreateHotelRequest,
    ctx: Annotated[RequestContext, Depends(require_role(Role.hotel_owner))],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Hotel:
    """Add a hotel listing owned by the caller."""
    await ensure_profile(session, ctx)

    row = db.Hotel(
        hotel_id=uuid.uuid4(),
        user_id=ctx.user_id,
        owner_email=ctx.email,
        created_at=datetime.now(UTC),
        **request.model_dump(mode="json"),
    )
    session.add(row)
    hotel = hotel_from_row(row)
    await session.commit()
    return hotel


@router.post("/vehicles", response_model=Vehicle, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    request: CreateVehicleRequest,
    ctx: Annotated[RequestContext, Depends(require_role(Role.driver))],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Vehicle:
    """Add a vehicle listing owned by the caller."""
    await ensure_profile(session, ctx)

    row = db.Vehicle(
        vehicle_id=uuid.uuid4(),
        user_id=ctx.user_id,
        owner_email=ctx.email,
        created_at=datetime.now(UTC),
        **request.model_dump(mode="json"),
    )
    session.add(row)
    vehicle = vehicle_from_row(row)
    await session.commit()
    return vehicle


@router.put("/hotels/{hotel_id}", response_model=Hotel)
async def update_hotel(
    hotel_id: str,
    request: UpdateHotelRequest,
    ctx: Annotated[RequestContext, Depends(require_role(Role.hotel_owner))],
    roles: Annotated[set[Role], Depends(get_roles)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Hotel:
    """Edit a hotel the caller listed.

    Raises:
        HTTPException: 404 if missing or owned by someone else
    """
    row = await _owned_listing(session, db.Hotel, hotel_id, ctx, roles)
    for field, value in request.model_dump(mode="json", exclude_none=True).items():
        setattr(row, field, value)

    hotel = hotel_from_row(row)
    await session.commit()
    return hotel


@router.delete("/hotels/{hotel_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_hotel(
    hotel_id: str,
    ctx: Annotated[RequestContext, Depends(require_role(Role.hotel_owner))],
    roles: Annotated[set[Role], Depends(get_roles)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """Remove a hotel the caller listed; past bookings keep their rows."""
    row = await _owned_listing(session, db.Hotel, hotel_id, ctx, roles)
    await session.delete(row)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/vehicles/{vehicle_id}", response_model=Vehicle)
async def update_vehicle(
    vehicle_id: str,
    request: UpdateVehicleRequest,
    ctx: Annotated[RequestContext, Depends(require_role(Role.driver))],
    roles: Annotated[set[Role], Depends(get_roles)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Vehicle:
    """Edit a vehicle the caller listed.

    Raises:
        HTTPException: 404 if missing or owned by someone else
    """
    row = await _owned_listing(session, db.Vehicle, vehicle_id, ctx, roles)
    for field, value in request.model_dump(mode="json", exclude_none=True).items():
        setattr(row, field, value)

    vehicle = vehicle_from_row(row)
    await session.commit()
    return vehicle


@router.delete("/vehicles/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(
    vehicle_id: str,
    ctx: Annotated[RequestContext, Depends(require_role(Role.driver))],
    roles: Annotated[set[Role], Depends(get_roles)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """Remove a vehicle the caller listed; past bookings keep their rows."""
    row = await _owned_listing(session, db.Vehicle, vehicle_id, ctx, roles)
    await session.delete(row)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
